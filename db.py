from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from sqlalchemy import event, Engine, create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

import config
from models import Base

# HARD DISABLE SQL echo - snapshot writes happen on every cart mutation
sql_echo = False


def create_snapshot_engine(url: str | None = None) -> Engine:
    """
    Create the engine backing the local cart snapshot table.

    In-memory SQLite databases share a single connection (StaticPool), so
    every session sees the same tables.

    Args:
        url: SQLAlchemy URL, defaults to config.CART_DB_URL

    Returns:
        Engine with the snapshot table created
    """
    url = url or config.CART_DB_URL
    if url.startswith("sqlite") and ":memory:" in url:
        engine = create_engine(
            url,
            echo=sql_echo,
            connect_args={'check_same_thread': False},
            poolclass=StaticPool
        )
    else:
        if url.startswith("sqlite:///") and not url.startswith("sqlite:////"):
            Path(url.removeprefix("sqlite:///")).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(url, echo=sql_echo, connect_args={'check_same_thread': False})

    Base.metadata.create_all(bind=engine)
    return engine


def create_session_maker(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(engine, expire_on_commit=False)


@contextmanager
def get_db_session(session_maker: sessionmaker[Session]) -> Iterator[Session]:
    session = session_maker()
    try:
        yield session
    finally:
        session.close()


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    # Only SQLite understands these pragmas
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()
