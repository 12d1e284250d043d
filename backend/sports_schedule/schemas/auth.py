"""Auth Schemas — credentials in, bearer tokens out."""

from typing import Annotated

from pydantic import AfterValidator, Field

from sports_schedule.infrastructure.passwords import BCRYPT_MAX_BYTES, password_fits
from sports_schedule.schemas.base import CamelModel


def _check_password_bytes(value: str) -> str:
    if not password_fits(value):
        raise ValueError(f"must be at most {BCRYPT_MAX_BYTES} bytes when UTF-8 encoded")
    return value


Password = Annotated[str, Field(min_length=1), AfterValidator(_check_password_bytes)]


class Credentials(CamelModel):
    username: str = Field(min_length=1, max_length=100)
    password: Password


class RegisterRequest(Credentials):
    is_admin: bool = False


class TokenResponse(CamelModel):
    token: str


class RegisterResponse(CamelModel):
    message: str
    token: str
    is_admin: bool


class IdentityResponse(CamelModel):
    """Echo of the caller's validated token claims."""
    message: str
    user_id: str
    user_name: str
    is_admin: bool
