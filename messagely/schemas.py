"""Pydantic schemas for data-access inputs and results."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    username: str
    password: str
    first_name: str
    last_name: str
    phone: str


class RegisteredUser(BaseModel):
    username: str
    password: str
    first_name: str
    last_name: str
    phone: str

    class Config:
        from_attributes = True


class UserSummary(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str

    class Config:
        from_attributes = True


class UserDetail(UserSummary):
    join_at: datetime
    last_login_at: Optional[datetime] = None


class MessageUser(UserSummary):
    """Counterpart profile nested inside a message."""


class SentMessage(BaseModel):
    id: int
    to_user: MessageUser
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class ReceivedMessage(BaseModel):
    id: int
    from_user: MessageUser
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None
