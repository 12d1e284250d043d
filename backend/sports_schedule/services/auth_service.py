"""Auth Service — login, registration and guest tokens.

Invariants:
    - Passwords are stored only as bcrypt hashes
    - Unknown username and wrong password produce the same 401
    - Guest tokens are never admin
    - Self-registration creates admins only when allow_admin_registration is set
"""

import logging
from datetime import timedelta

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sports_schedule.config import Settings
from sports_schedule.core.domain_types import Identity
from sports_schedule.core.errors import AuthenticationError, DuplicateUsernameError
from sports_schedule.infrastructure.passwords import hash_password, verify_password
from sports_schedule.infrastructure.tokens import (
    GUEST_NAME, GUEST_USER_ID, TokenCodec,
)
from sports_schedule.models.user import User

logger = logging.getLogger(__name__)


class AuthService:
    """Credential checks and token issuance for /login, /register and /guest."""

    def __init__(self, db: AsyncSession, codec: TokenCodec, settings: Settings):
        self.db = db
        self.codec = codec
        self.settings = settings

    def _user_token(self, user: User) -> str:
        return self.codec.issue(
            Identity(user_id=user.id, name=user.username, is_admin=user.is_admin),
            timedelta(minutes=self.settings.token_ttl_minutes),
        )

    async def _find_user(self, username: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.username == username),
        )
        return result.scalar_one_or_none()

    async def login(self, username: str, password: str) -> str:
        user = await self._find_user(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            raise AuthenticationError("Invalid credentials", "INVALID_CREDENTIALS")
        logger.info("User logged in", extra={"user_id": user.id})
        return self._user_token(user)

    async def register(
        self, username: str, password: str, is_admin: bool = False,
    ) -> tuple[User, str]:
        if await self._find_user(username) is not None:
            raise DuplicateUsernameError(username)
        grant_admin = is_admin and self.settings.allow_admin_registration
        if is_admin and not grant_admin:
            logger.warning("Admin self-registration refused; creating regular user")
        user = User(
            username=username,
            password_hash=hash_password(password),
            is_admin=grant_admin,
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            # lost a race with a concurrent registration of the same name
            await self.db.rollback()
            raise DuplicateUsernameError(username)
        await self.db.refresh(user)
        logger.info("User registered", extra={"user_id": user.id})
        return user, self._user_token(user)

    def guest_token(self) -> str:
        return self.codec.issue(
            Identity(user_id=GUEST_USER_ID, name=GUEST_NAME, is_admin=False),
            timedelta(minutes=self.settings.guest_token_ttl_minutes),
        )
