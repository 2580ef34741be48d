import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from blogapi.main import app
from blogapi.models import PostStore
from blogapi.routes.posts import get_store

@pytest.fixture
def store():
    """A fresh, empty post store for each test."""
    s = PostStore()
    app.dependency_overrides[get_store] = lambda: s
    yield s
    app.dependency_overrides.pop(get_store, None)

@pytest_asyncio.fixture
async def client(store):
    async with AsyncClient(transport=ASGITransport(app=app), base_url='http://test') as ac:
        yield ac
