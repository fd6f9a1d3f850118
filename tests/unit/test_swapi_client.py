import httpx
import pytest

from swapi_graphql.core.exceptions import SwapiClientError
from swapi_graphql.services.swapi_client import SwapiClient, local_id_from_url

BASE_URL = "https://swapi.test/api"


def make_client(handler) -> SwapiClient:
    transport = httpx.MockTransport(handler)
    return SwapiClient(BASE_URL, client=httpx.AsyncClient(transport=transport))


# --- Helpers ---


@pytest.mark.parametrize(
    "record_url, expected",
    [
        ("https://swapi.dev/api/people/4/", "4"),
        ("https://swapi.dev/api/films/1", "1"),
        ("/api/starships/12/", "12"),
    ],
)
def test_local_id_from_url(record_url, expected):
    assert local_id_from_url(record_url) == expected


def test_local_id_from_url_without_path():
    with pytest.raises(ValueError):
        local_id_from_url("https://swapi.dev/")


# --- Requests ---


@pytest.mark.asyncio
async def test_fetch_by_type_and_id_success():
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, json={"name": "Darth Vader"})

    client = make_client(handler)
    record = await client.fetch_by_type_and_id("people", "4")

    assert record == {"name": "Darth Vader"}
    assert requested == [f"{BASE_URL}/people/4/"]
    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_by_type_and_id_not_found_is_none():
    client = make_client(lambda request: httpx.Response(404, json={"detail": "Not found"}))

    assert await client.fetch_by_type_and_id("people", "999") is None
    await client.aclose()


@pytest.mark.asyncio
async def test_server_error_raises_client_error():
    client = make_client(lambda request: httpx.Response(500, text="boom"))

    with pytest.raises(SwapiClientError) as exc_info:
        await client.fetch_by_type_and_id("films", "1")
    assert exc_info.value.status_code == 500
    await client.aclose()


@pytest.mark.asyncio
async def test_non_json_body_raises_client_error():
    client = make_client(lambda request: httpx.Response(200, text="<html>maintenance</html>"))

    with pytest.raises(SwapiClientError, match="not JSON"):
        await client.fetch_by_url(f"{BASE_URL}/films/1/")
    await client.aclose()


@pytest.mark.asyncio
async def test_transport_error_raises_client_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)

    with pytest.raises(SwapiClientError, match="Failed to communicate"):
        await client.fetch_by_type_and_id("planets", "1")
    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_all_by_type_follows_next_links():
    pages = {
        f"{BASE_URL}/planets/": {
            "count": 3,
            "next": f"{BASE_URL}/planets/?page=2",
            "results": [{"name": "Tatooine"}, {"name": "Alderaan"}],
        },
        f"{BASE_URL}/planets/?page=2": {
            "count": 3,
            "next": None,
            "results": [{"name": "Yavin IV"}],
        },
    }

    client = make_client(lambda request: httpx.Response(200, json=pages[str(request.url)]))
    result = await client.fetch_all_by_type("planets")

    assert [record["name"] for record in result.objects] == ["Tatooine", "Alderaan", "Yavin IV"]
    assert result.total_count == 3
    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_by_type_and_query_sends_search_param():
    seen_params = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_params.append(dict(request.url.params))
        return httpx.Response(
            200, json={"count": 1, "next": None, "results": [{"name": "Luke Skywalker"}]}
        )

    client = make_client(handler)
    result = await client.fetch_by_type_and_query("people", "luke")

    assert seen_params == [{"search": "luke"}]
    assert result.total_count == 1
    assert result.objects[0]["name"] == "Luke Skywalker"
    await client.aclose()


@pytest.mark.asyncio
async def test_list_endpoint_missing_raises():
    client = make_client(lambda request: httpx.Response(404))

    with pytest.raises(SwapiClientError):
        await client.fetch_all_by_type("droids")
    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_many_by_urls_preserves_order():
    records = {
        f"{BASE_URL}/people/1/": {"name": "Luke Skywalker"},
        f"{BASE_URL}/people/2/": {"name": "C-3PO"},
    }

    def handler(request: httpx.Request) -> httpx.Response:
        record = records.get(str(request.url))
        return httpx.Response(200, json=record) if record else httpx.Response(404)

    client = make_client(handler)
    results = await client.fetch_many_by_urls(
        [f"{BASE_URL}/people/2/", f"{BASE_URL}/people/3/", f"{BASE_URL}/people/1/"]
    )

    assert results == [{"name": "C-3PO"}, None, {"name": "Luke Skywalker"}]
    await client.aclose()


def test_resource_url_encodes_local_id_as_one_segment():
    client = SwapiClient(BASE_URL)

    assert client.resource_url("people", "4") == f"{BASE_URL}/people/4/"
    assert client.resource_url("people", "../films/1") == f"{BASE_URL}/people/..%2Ffilms%2F1/"


@pytest.mark.asyncio
async def test_fetch_by_type_and_id_stays_within_resource():
    requested_paths = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested_paths.append(request.url.raw_path.decode())
        return httpx.Response(404)

    client = make_client(handler)

    assert await client.fetch_by_type_and_id("people", "../films/1") is None
    assert requested_paths == ["/api/people/..%2Ffilms%2F1/"]
    await client.aclose()
