import pytest
from fastapi.testclient import TestClient

from postboard.core.config import Settings
from postboard.core.security import issue_token
from postboard.main import create_app
from postboard.services.seeding import seed_store


@pytest.fixture
def settings():
    """Default (as-implemented) behaviour without the artificial delay."""
    return Settings(resolver_delay_ms=0)


@pytest.fixture
def store():
    return seed_store()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def john_token(settings):
    return issue_token(1, settings)


@pytest.fixture
def gql(client):
    """POST a GraphQL document and return the decoded JSON body."""

    def _execute(query, variables=None, token=None):
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        payload = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        resp = client.post("/graphql", json=payload, headers=headers)
        assert resp.status_code == 200
        return resp.json()

    return _execute
