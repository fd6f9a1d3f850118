import pytest
from fastapi.testclient import TestClient

from swapi_graphql.main import app


@pytest.fixture
def client(fake_swapi):
    with TestClient(app) as test_client:
        # Replace the real client created during startup
        app.state.swapi = fake_swapi
        yield test_client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["graphql"] == "/graphql"


def test_graphql_query_over_http(client):
    response = client.post(
        "/graphql",
        json={"query": '{ film(filmID: "1") { title characterConnection(first: 1) { totalCount } } }'},
    )

    assert response.status_code == 200
    assert response.json() == {
        "data": {"film": {"title": "A New Hope", "characterConnection": {"totalCount": 5}}}
    }


def test_graphql_error_over_http(client):
    response = client.post("/graphql", json={"query": "{ vehicle { name } }"})

    assert response.status_code == 200
    body = response.json()
    assert body["data"] == {"vehicle": None}
    assert body["errors"][0]["extensions"]["code"] == "MISSING_ARGUMENT"
    assert body["errors"][0]["path"] == ["vehicle"]
