"""bcrypt password hashing helpers."""
import bcrypt

from . import config


def hash_password(password: str, rounds: int | None = None) -> str:
    """Return a bcrypt hash of ``password`` using the configured work factor."""
    salt = bcrypt.gensalt(rounds=rounds or config.BCRYPT_WORK_FACTOR)
    return bcrypt.hashpw(password.encode(), salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode(), password_hash.encode())
