from contextlib import contextmanager
import pathlib
from typing import Iterator

from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import NullPool
from sqlmodel import Session, SQLModel, create_engine

from core.config import DATABASE_URL, DEBUG


def create_db_engine(url: str = DATABASE_URL) -> Engine:
    """
    Create an engine for the wiki database
    Args:
        url: SQLAlchemy database url
    Returns:
        Engine that opens a fresh connection for every session
    """
    connect_args = {}
    sa_url = make_url(url)
    if sa_url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if sa_url.database and sa_url.database != ":memory:":
            pathlib.Path(sa_url.database).parent.mkdir(parents=True, exist_ok=True)

    return create_engine(url, echo=DEBUG, poolclass=NullPool, connect_args=connect_args)


def ensure_schema(engine: Engine):
    """Create missing tables and indexes"""
    SQLModel.metadata.create_all(engine)


@contextmanager
def open_session(engine: Engine) -> Iterator[Session]:
    """Ensure the schema and yield a session that is closed on every exit path"""
    ensure_schema(engine)
    with Session(engine) as session:
        yield session
