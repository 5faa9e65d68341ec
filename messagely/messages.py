"""Message queries joined with the counterpart user's profile."""
from typing import Any, Dict, List, Mapping

from sqlalchemy.orm import Session

from . import schemas
from .logging_config import configure_logging
from .models import Message, User

logger = configure_logging()


def nest_counterpart(row: Mapping[str, Any], key: str) -> Dict[str, Any]:
    """Fold the flat counterpart columns of a joined row into ``row[key]``."""
    return {
        "id": row["id"],
        key: {
            "username": row["username"],
            "first_name": row["first_name"],
            "last_name": row["last_name"],
            "phone": row["phone"],
        },
        "body": row["body"],
        "sent_at": row["sent_at"],
        "read_at": row["read_at"],
    }


def _joined_rows(db: Session, match_column, counterpart_column, username: str):
    return (
        db.query(
            Message.id,
            User.username,
            User.first_name,
            User.last_name,
            User.phone,
            Message.body,
            Message.sent_at,
            Message.read_at,
        )
        .select_from(Message)
        .join(User, counterpart_column == User.username)
        .filter(match_column == username)
        .order_by(Message.id)
        .all()
    )


def messages_from(db: Session, username: str) -> List[schemas.SentMessage]:
    """Messages sent by ``username``, each with the recipient as ``to_user``.

    Unknown users simply have no messages.
    """
    rows = _joined_rows(db, Message.from_username, Message.to_username, username)
    logger.info("MESSAGES_FROM username=%s count=%s", username, len(rows))
    return [schemas.SentMessage(**nest_counterpart(row._mapping, "to_user")) for row in rows]


def messages_to(db: Session, username: str) -> List[schemas.ReceivedMessage]:
    """Messages received by ``username``, each with the sender as ``from_user``."""
    rows = _joined_rows(db, Message.to_username, Message.from_username, username)
    logger.info("MESSAGES_TO username=%s count=%s", username, len(rows))
    return [schemas.ReceivedMessage(**nest_counterpart(row._mapping, "from_user")) for row in rows]
