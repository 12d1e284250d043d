"""Auth Routes — login, registration and guest tokens.

Invariants:
    - Responses carry only the token (and role for /register), never the password hash
    - /guest never touches the database
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from sports_schedule.api.dependencies import get_token_codec
from sports_schedule.config import Settings, get_settings
from sports_schedule.infrastructure.database import get_db
from sports_schedule.infrastructure.tokens import TokenCodec
from sports_schedule.schemas.auth import (
    Credentials, RegisterRequest, RegisterResponse, TokenResponse,
)
from sports_schedule.services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["auth"])


def _auth_service(
    db: AsyncSession = Depends(get_db),
    codec: TokenCodec = Depends(get_token_codec),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(db, codec, settings)


@router.post("/login", response_model=TokenResponse)
async def login(body: Credentials, auth: AuthService = Depends(_auth_service)):
    token = await auth.login(body.username, body.password)
    return TokenResponse(token=token)


@router.post(
    "/register", response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest, auth: AuthService = Depends(_auth_service),
):
    user, token = await auth.register(body.username, body.password, body.is_admin)
    return RegisterResponse(
        message="User registered", token=token, is_admin=user.is_admin,
    )


@router.post("/guest", response_model=TokenResponse)
async def guest(auth: AuthService = Depends(_auth_service)):
    """Read-only guest token (isAdmin is always false)."""
    return TokenResponse(token=auth.guest_token())
