from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import Session, sessionmaker

from messagely import database


def test_init_db_creates_tables(tmp_path, monkeypatch):
    engine = create_engine(f"sqlite:///{tmp_path / 'init.db'}")
    monkeypatch.setattr(database, "engine", engine)

    database.init_db()

    assert {"users", "messages"} <= set(inspect(engine).get_table_names())


def test_get_db_yields_session_and_closes(tmp_path, monkeypatch):
    engine = create_engine(f"sqlite:///{tmp_path / 'session.db'}")
    monkeypatch.setattr(database, "SessionLocal", sessionmaker(bind=engine))

    gen = database.get_db()
    session = next(gen)
    assert isinstance(session, Session)
    gen.close()


def test_engine_connect_args_only_for_sqlite():
    assert database._engine_connect_args("sqlite:///x.db") == {"check_same_thread": False}
    assert database._engine_connect_args("postgresql://localhost/messagely") == {}
