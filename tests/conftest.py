import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from fakes import FakeArticleClient
from src.main import app
from src.words.router import get_article_client
from src.words.store import UsageStore


@pytest.fixture
def database_path(tmp_path):
    return tmp_path / "words.db"


@pytest.fixture
def database_url(database_path):
    return f"sqlite+aiosqlite:///{database_path}"


@pytest_asyncio.fixture
async def store(database_url):
    usage_store = await UsageStore.open(database_url)
    yield usage_store
    await usage_store.close()


@pytest.fixture
def article_client():
    return FakeArticleClient()


@pytest.fixture
def client(monkeypatch, database_url, article_client):
    monkeypatch.setattr("src.main.DATABASE_URL", database_url)
    app.dependency_overrides[get_article_client] = lambda: article_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(monkeypatch, database_url):
    """Client whose article source raises the error passed to the returned factory."""
    def _make(error: Exception):
        fake = FakeArticleClient(error=error)
        app.dependency_overrides[get_article_client] = lambda: fake
        return fake

    monkeypatch.setattr("src.main.DATABASE_URL", database_url)
    with TestClient(app) as test_client:
        yield test_client, _make
    app.dependency_overrides.clear()
