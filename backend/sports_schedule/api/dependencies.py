"""Request Dependencies — access control gate, clock and shared service wiring.

Invariants:
    - Missing bearer token -> 401 AUTHENTICATION_REQUIRED
    - Invalid or expired token -> 403 INVALID_TOKEN
    - Valid non-admin token on an admin route -> 403 ADMIN_REQUIRED
    - get_today is the only source of "now" for season resolution (overridable in tests)
"""

from datetime import date

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from sports_schedule.config import Settings, get_settings
from sports_schedule.core.domain_types import Identity
from sports_schedule.core.errors import AuthenticationError, AuthorizationError
from sports_schedule.infrastructure.database import get_db
from sports_schedule.infrastructure.tokens import TokenCodec
from sports_schedule.services.integrity_engine import IntegrityEngine

_bearer = HTTPBearer(auto_error=False)


def get_today() -> date:
    return date.today()


def get_token_codec(settings: Settings = Depends(get_settings)) -> TokenCodec:
    return TokenCodec(settings.jwt_secret, settings.jwt_algorithm)


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    codec: TokenCodec = Depends(get_token_codec),
) -> Identity:
    """Validate the bearer token and return the caller's identity."""
    if credentials is None:
        raise AuthenticationError()
    return codec.verify(credentials.credentials)


async def require_admin(
    identity: Identity = Depends(get_current_identity),
) -> Identity:
    if not identity.is_admin:
        raise AuthorizationError()
    return identity


def get_integrity_engine(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> IntegrityEngine:
    return IntegrityEngine(db, timeout_seconds=settings.integrity_timeout_seconds)
