import os
import tempfile

os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "messagely-tests.log"))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from messagely import models, users
from messagely.database import Base
from messagely.schemas import RegisterRequest


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db):
    def _make_user(username, password="secret", first_name=None, last_name="Tester", phone="555-0100"):
        payload = RegisterRequest(
            username=username,
            password=password,
            first_name=first_name or username.title(),
            last_name=last_name,
            phone=phone,
        )
        return users.register(db, payload)

    return _make_user


@pytest.fixture
def send_message(db):
    def _send_message(from_username, to_username, body):
        message = models.Message(from_username=from_username, to_username=to_username, body=body)
        db.add(message)
        db.commit()
        db.refresh(message)
        return message

    return _send_message
