import pytest
from fastapi.testclient import TestClient

from pm_news_api.app.core.storage import MemStorage
from pm_news_api.app.main import create_app


@pytest.fixture
def storage() -> MemStorage:
    return MemStorage()


@pytest.fixture
def seeded_storage() -> MemStorage:
    return MemStorage(seed=True)


@pytest.fixture
def client(seeded_storage) -> TestClient:
    return TestClient(create_app(storage=seeded_storage))
