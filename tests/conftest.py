import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from class_portal_api.app.core.seed import seed_storage
from class_portal_api.app.core.storage import Storage
from class_portal_api.app.main import create_app


@pytest.fixture
def storage():
    return Storage()


@pytest.fixture
def seeded_storage():
    store = Storage()
    seed_storage(store)
    return store


@pytest.fixture
def app(seeded_storage):
    return create_app(storage=seeded_storage, seed=False)


@pytest.fixture
def empty_app(storage):
    return create_app(storage=storage, seed=False)


@pytest_asyncio.fixture
async def api_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest_asyncio.fixture
async def empty_client(empty_app):
    transport = ASGITransport(app=empty_app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
