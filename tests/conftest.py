import pytest
from fastapi.testclient import TestClient

from pastebin.app import create_app
from pastebin.db import PasteStore
from pastebin.settings import Settings


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'pastes.db'}"


@pytest.fixture
def store(db_url):
    store = PasteStore.open(db_url)
    yield store
    store.close()


@pytest.fixture
def settings(db_url):
    return Settings(database_url=db_url)


@pytest.fixture
def client(settings):
    # entering the client runs the lifespan, which opens the store
    with TestClient(create_app(settings)) as c:
        yield c
