"""Bearer-token identity provider.

Tokens are issued by the authentication service (out of scope here) and
carry ``{"id": ..., "role": ...}`` signed with a shared secret.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from storefront.domain.exceptions import AuthError
from storefront.domain.identity import CUSTOMER_ROLE, Identity, IdentityProvider

logger = logging.getLogger(__name__)


class JwtIdentityProvider(IdentityProvider):

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        self._secret = secret
        self._algorithm = algorithm

    def resolve(self, credential: str) -> Identity:
        if not credential:
            raise AuthError("No token provided")
        try:
            payload = jwt.decode(credential, self._secret, algorithms=[self._algorithm])
        except JWTError as exc:
            logger.debug("Rejected bearer token: %s", exc)
            raise AuthError("Invalid token") from exc

        user_id = payload.get("id") or payload.get("sub")
        if not user_id:
            raise AuthError("Invalid token")
        return Identity(user_id=str(user_id), role=str(payload.get("role", CUSTOMER_ROLE)).upper())

    def issue(self, user_id: str, role: str, expires_in: timedelta = timedelta(hours=1)) -> str:
        """Sign a token for *user_id*; used by tests and local tooling."""
        payload: dict[str, Any] = {
            "id": user_id,
            "role": role,
            "exp": datetime.now(timezone.utc) + expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)
