"""
Shared fixtures: in-memory stand-ins for the completion client and the MongoDB
collection, plus a TestClient wired to them through dependency overrides.
"""
from unittest.mock import AsyncMock, MagicMock
import pytest
from fastapi.testclient import TestClient
from app.core.dependencies import get_completion_client, get_record_store
from app.database import RecordStore
from app.main import app
from app.services.completion import CompletionClient

WELL_FORMED_COMPLETION = (
    "1. What is a closure?\n"
    "Answer: A function bundled with its lexical scope.\n"
    "2. Describe REST.\n"
    "Answer: An architectural style for networked APIs."
)


class FakeCompletionClient(CompletionClient):
    provider = "fake"

    def __init__(self, text: str = WELL_FORMED_COMPLETION, error: Exception = None):
        super().__init__(model="fake-model")
        self.text = text
        self.error = error
        self.prompts = []

    async def _complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def fake_collection():
    collection = MagicMock()
    collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id="6650f0c2a1b2c3d4e5f60718"))
    return collection


@pytest.fixture
def record_store(fake_collection):
    return RecordStore(fake_collection)


@pytest.fixture
def completion_client():
    return FakeCompletionClient()


@pytest.fixture
def client(completion_client, record_store):
    app.dependency_overrides[get_completion_client] = lambda: completion_client
    app.dependency_overrides[get_record_store] = lambda: record_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
