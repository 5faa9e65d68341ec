"""Database models for users and their messages."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from .database import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String, primary_key=True, index=True)
    password = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    join_at = Column(DateTime, nullable=False)
    last_login_at = Column(DateTime, nullable=True)

    sent_messages = relationship("Message", back_populates="sender", foreign_keys="Message.from_username")
    received_messages = relationship("Message", back_populates="recipient", foreign_keys="Message.to_username")


class Message(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, index=True)
    from_username = Column(String, ForeignKey("users.username"), nullable=False)
    to_username = Column(String, ForeignKey("users.username"), nullable=False)
    body = Column(Text, nullable=False)
    sent_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    read_at = Column(DateTime, nullable=True)

    sender = relationship("User", foreign_keys=[from_username], back_populates="sent_messages")
    recipient = relationship("User", foreign_keys=[to_username], back_populates="received_messages")
