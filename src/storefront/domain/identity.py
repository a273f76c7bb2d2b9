"""Identity as seen by the order core.

Resolving credentials is the job of an external collaborator; the core
only needs the resolved user ID and role.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.domain.exceptions import ForbiddenError

ADMIN_ROLE = "ADMIN"
CUSTOMER_ROLE = "CUSTOMER"


@dataclass(frozen=True)
class Identity:
    user_id: str
    role: str = CUSTOMER_ROLE

    @property
    def is_admin(self) -> bool:
        return self.role.upper() == ADMIN_ROLE

    def require_admin(self) -> None:
        if not self.is_admin:
            raise ForbiddenError("Administrator role required")


class IdentityProvider(ABC):

    @abstractmethod
    def resolve(self, credential: str) -> Identity:
        """Return the identity behind *credential*, or raise AuthError."""
