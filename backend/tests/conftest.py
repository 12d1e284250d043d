"""Root conftest — shared test configuration."""

import os

# Tests never talk to a real database or use a real signing key
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("JWT_SECRET", "test-signing-key-0123456789abcdef")
os.environ.setdefault("LOG_FORMAT", "text")
