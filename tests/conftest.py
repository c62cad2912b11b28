import pytest
from fastapi.testclient import TestClient

from clean_slate_api.app.core.store import ParticipantStore
from clean_slate_api.app.main import create_app


@pytest.fixture
def store():
    return ParticipantStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def smith():
    """A complete submission from the messaging tool."""
    return {
        "name": "John Smith",
        "congressionalOffice": "12|Rep. Smith",
        "audienceProfile": "staffer",
        "primaryConcern": "budget",
        "adjectives": ["clear", "direct"],
        "priorities": ["jobs", "health"],
        "selectedTraits": ["honest", "kind", "bold"],
    }
