"""Password hashing with bcrypt.

bcrypt only reads the first 72 bytes of its input; longer passwords are
rejected at the schema boundary (schemas/auth.py) before reaching here.
"""

import bcrypt

BCRYPT_MAX_BYTES = 72


def password_fits(password: str) -> bool:
    return len(password.encode("utf-8")) <= BCRYPT_MAX_BYTES


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(
            password.encode("utf-8"), password_hash.encode("utf-8"),
        )
    except ValueError:
        return False
