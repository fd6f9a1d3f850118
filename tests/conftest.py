import pytest

from swapi_graphql.graphql.registry import build_registry
from swapi_graphql.graphql.schema import Context, schema
from swapi_graphql.services.swapi_client import FetchResult

BASE_URL = "https://swapi.test/api"


def url(resource: str, local_id: int) -> str:
    return f"{BASE_URL}/{resource}/{local_id}/"


def person(local_id: int, name: str, **extra) -> dict:
    record = {
        "name": name,
        "height": "172",
        "mass": "77",
        "hair_color": "blond",
        "skin_color": "fair",
        "eye_color": "blue",
        "birth_year": "19BBY",
        "gender": "male",
        "homeworld": url("planets", 1),
        "films": [url("films", 1)],
        "species": [],
        "vehicles": [],
        "starships": [],
        "created": "2014-12-09T13:50:51.644000Z",
        "edited": "2014-12-20T21:17:56.891000Z",
        "url": url("people", local_id),
    }
    record.update(extra)
    return record


FILMS = [
    {
        "title": "A New Hope",
        "episode_id": 4,
        "opening_crawl": "It is a period of civil war.",
        "director": "George Lucas",
        "producer": "Gary Kurtz, Rick McCallum",
        "release_date": "1977-05-25",
        "characters": [url("people", i) for i in (1, 2, 3, 4, 5)],
        "planets": [url("planets", 1)],
        "starships": [url("starships", 9)],
        "vehicles": [],
        "species": [url("species", 2)],
        "created": "2014-12-10T14:23:31.880000Z",
        "edited": "2014-12-20T19:49:45.256000Z",
        "url": url("films", 1),
    },
    {
        "title": "The Empire Strikes Back",
        "episode_id": 5,
        "opening_crawl": "It is a dark time for the Rebellion.",
        "director": "Irvin Kershner",
        "producer": "Gary Kurtz, Rick McCallum",
        "release_date": "1980-05-17",
        "characters": [url("people", 1)],
        "planets": [],
        "starships": [],
        "vehicles": [],
        "species": [],
        "url": url("films", 2),
    },
]

PEOPLE = [
    person(1, "Luke Skywalker"),
    person(2, "C-3PO", height="167", mass="75", gender="n/a", species=[url("species", 2)]),
    person(3, "R2-D2", height="96", mass="32"),
    person(4, "Darth Vader", height="202", mass="136"),
    person(5, "Leia Organa", height="150", mass="unknown", gender="female"),
]

PLANETS = [
    {
        "name": "Tatooine",
        "rotation_period": "23",
        "orbital_period": "304",
        "diameter": "10465",
        "climate": "arid",
        "gravity": "1 standard",
        "terrain": "desert",
        "surface_water": "1",
        "population": "200000",
        "residents": [url("people", 1), url("people", 4)],
        "films": [url("films", 1)],
        "url": url("planets", 1),
    },
]

SPECIES = [
    {
        "name": "Droid",
        "classification": "artificial",
        "designation": "sentient",
        "average_height": "n/a",
        "skin_colors": "n/a",
        "hair_colors": "n/a",
        "eye_colors": "n/a",
        "average_lifespan": "indefinite",
        "homeworld": None,
        "language": "n/a",
        "people": [url("people", 2), url("people", 3)],
        "films": [url("films", 1)],
        "url": url("species", 2),
    },
]

STARSHIPS = [
    {
        "name": "Death Star",
        "model": "DS-1 Orbital Battle Station",
        "manufacturer": "Imperial Department of Military Research, Sienar Fleet Systems",
        "cost_in_credits": "1000000000000",
        "length": "120000",
        "max_atmosphering_speed": "n/a",
        "crew": "342,953",
        "passengers": "843,342",
        "cargo_capacity": "1000000000000",
        "consumables": "3 years",
        "hyperdrive_rating": "4.0",
        "MGLT": "10",
        "starship_class": "Deep Space Mobile Battlestation",
        "pilots": [],
        "films": [url("films", 1)],
        "url": url("starships", 9),
    },
]

VEHICLES = [
    {
        "name": "Sand Crawler",
        "model": "Digger Crawler",
        "manufacturer": "Corellia Mining Corporation",
        "cost_in_credits": "150000",
        "length": "36.8 ",
        "max_atmosphering_speed": "30",
        "crew": "46",
        "passengers": "30",
        "cargo_capacity": "50000",
        "consumables": "2 months",
        "vehicle_class": "wheeled",
        "pilots": [],
        "films": [url("films", 1)],
        "url": url("vehicles", 4),
    },
]

CATALOG = {
    "films": FILMS,
    "people": PEOPLE,
    "planets": PLANETS,
    "species": SPECIES,
    "starships": STARSHIPS,
    "vehicles": VEHICLES,
}


class FakeSwapiClient:
    """In-memory stand-in for SwapiClient, recording every call."""

    def __init__(self, catalog: dict[str, list[dict]]):
        self.catalog = catalog
        self.by_url = {
            record["url"]: record for records in catalog.values() for record in records
        }
        self.calls: list[tuple] = []

    async def fetch_by_type_and_id(self, resource, local_id):
        self.calls.append(("by_id", resource, str(local_id)))
        return self.by_url.get(url(resource, local_id))

    async def fetch_all_by_type(self, resource):
        self.calls.append(("all", resource))
        records = self.catalog[resource]
        return FetchResult(objects=list(records), total_count=len(records))

    async def fetch_by_type_and_query(self, resource, query):
        self.calls.append(("search", resource, query))
        needle = query.lower()
        matches = [
            record
            for record in self.catalog[resource]
            if needle in (record.get("name") or record.get("title") or "").lower()
        ]
        return FetchResult(objects=matches, total_count=len(matches))

    async def fetch_by_url(self, record_url):
        self.calls.append(("url", record_url))
        return self.by_url.get(record_url)

    async def fetch_many_by_urls(self, urls):
        return [await self.fetch_by_url(record_url) for record_url in urls]


@pytest.fixture
def fake_swapi() -> FakeSwapiClient:
    return FakeSwapiClient(CATALOG)


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def context(fake_swapi, registry) -> Context:
    return Context(swapi=fake_swapi, registry=registry)


@pytest.fixture
def execute(context):
    """Runs a query against the schema with the fake catalog behind it."""

    async def _execute(query: str, variables: dict | None = None, context_value=None):
        return await schema.execute(
            query,
            variable_values=variables,
            context_value=context_value or context,
        )

    return _execute
