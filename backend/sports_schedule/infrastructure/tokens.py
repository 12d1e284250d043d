"""Token Codec — issues and verifies signed bearer tokens (JWT via PyJWT).

Invariants:
    - Claims: sub (user id), name, isAdmin, iat, exp
    - Expired, tampered or malformed tokens raise AuthorizationError(INVALID_TOKEN)
    - isAdmin is true only when the claim is literally true

Design Decisions:
    - Signing key and algorithm come from Settings; no module-level secret
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from sports_schedule.core.domain_types import Identity
from sports_schedule.core.errors import AuthorizationError

logger = logging.getLogger(__name__)

GUEST_USER_ID = "guest"
GUEST_NAME = "Guest"


class TokenCodec:
    """Encodes Identity into JWTs and back."""

    def __init__(self, secret: str, algorithm: str = "HS256"):
        self.secret = secret
        self.algorithm = algorithm

    def issue(self, identity: Identity, ttl: timedelta) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": identity.user_id,
            "name": identity.name,
            "isAdmin": identity.is_admin,
            "iat": now,
            "exp": now + ttl,
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Identity:
        try:
            claims = jwt.decode(
                token, self.secret, algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
            raise AuthorizationError(
                "Invalid or expired token", "INVALID_TOKEN",
            )
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected invalid token: {e}")
            raise AuthorizationError(
                "Invalid or expired token", "INVALID_TOKEN",
            )
        return Identity(
            user_id=str(claims["sub"]),
            name=str(claims.get("name", "")),
            is_admin=claims.get("isAdmin") is True,
        )
