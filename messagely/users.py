"""User account persistence: registration, credentials and lookups."""
from typing import List

from sqlalchemy import func, insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import schemas
from .errors import NotFoundError, UnauthorizedError
from .logging_config import configure_logging
from .models import User
from .passwords import hash_password, verify_password

logger = configure_logging()


def register(db: Session, payload: schemas.RegisterRequest) -> schemas.RegisteredUser:
    """Create a user with a hashed password.

    ``join_at`` and ``last_login_at`` are both stamped with the database's
    current time. A duplicate username surfaces as the store's
    ``IntegrityError``.
    """
    stmt = (
        insert(User)
        .values(
            username=payload.username,
            password=hash_password(payload.password),
            first_name=payload.first_name,
            last_name=payload.last_name,
            phone=payload.phone,
            join_at=func.current_timestamp(),
            last_login_at=func.current_timestamp(),
        )
        .returning(User.username, User.password, User.first_name, User.last_name, User.phone)
    )
    try:
        row = db.execute(stmt).one()
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.info("REGISTER_FAIL username=%s", payload.username)
        raise
    logger.info("REGISTER_SUCCESS username=%s", row.username)
    return schemas.RegisteredUser.model_validate(row)


def authenticate(db: Session, username: str, password: str) -> bool:
    """Is this username/password valid?

    An unknown username raises ``UnauthorizedError``; a wrong password for an
    existing user returns False.
    """
    row = db.query(User.password).filter(User.username == username).first()
    if row is None:
        logger.info("LOGIN_FAIL username=%s reason=not_found", username)
        raise UnauthorizedError("Invalid username/password")

    if not verify_password(password, row.password):
        logger.info("LOGIN_FAIL username=%s reason=bad_password", username)
        return False

    logger.info("LOGIN_SUCCESS username=%s", username)
    return True


def update_login_timestamp(db: Session, username: str) -> None:
    updated = (
        db.query(User)
        .filter(User.username == username)
        .update({User.last_login_at: func.current_timestamp()}, synchronize_session=False)
    )
    db.commit()
    if not updated:
        logger.warning("USER_NOT_FOUND username=%s", username)
        raise NotFoundError(f"No user: {username}")
    logger.info("LOGIN_TIMESTAMP_UPDATED username=%s", username)


def list_users(db: Session) -> List[schemas.UserSummary]:
    """Basic info on every user, ordered by username."""
    users = db.query(User).order_by(User.username).all()
    return [schemas.UserSummary.model_validate(user) for user in users]


def get_user(db: Session, username: str) -> schemas.UserDetail:
    user = db.query(User).filter(User.username == username).first()
    if not user:
        logger.warning("USER_NOT_FOUND username=%s", username)
        raise NotFoundError(f"No user: {username}")
    return schemas.UserDetail.model_validate(user)
