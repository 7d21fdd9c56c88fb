import pytest
from fastapi.testclient import TestClient
from sqlmodel import select

from core.db import create_db_engine, open_session
from model.page import Page
from web import create_app
from wiki.naming import canonical
from wiki.store import PageStore


@pytest.fixture
def store(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'wiki.db'}")
    yield PageStore(engine)
    engine.dispose()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as client:
        yield client


@pytest.fixture
def count_by_name(store):
    """Number of stored pages whose name matches, ignoring case"""

    def count(name):
        with open_session(store.engine) as session:
            names = session.exec(select(Page.name)).all()
        return sum(1 for n in names if canonical(n) == canonical(name))

    return count
