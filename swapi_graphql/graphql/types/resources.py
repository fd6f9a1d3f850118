import dataclasses
from typing import Any

import strawberry
from strawberry.types import Info

from swapi_graphql.graphql.common import Node, to_global_id
from swapi_graphql.graphql.resolvers.relations import (
    resolve_related_connection,
    resolve_related_node,
)
from swapi_graphql.graphql.tags import TypeTag
from swapi_graphql.graphql.utils import ConnectionArgs, ConnectionSlice
from swapi_graphql.services.swapi_client import Record, local_id_from_url

from .common import (
    NODE_LIST_DESCRIPTION,
    TOTAL_COUNT_DESCRIPTION,
    PageInfo,
    to_float,
    to_int,
    to_list,
)


def _global_id(tag: TypeTag, record: Record) -> strawberry.ID:
    if record.get("url"):
        local_id = local_id_from_url(record["url"])
    else:
        local_id = str(record["id"])
    return to_global_id(tag.value, local_id)


def _urls(record: Record, key: str) -> list[str]:
    return list(record.get(key) or [])


def _url_list() -> Any:
    return dataclasses.field(default_factory=list)


# --- Node Types ---


@strawberry.type(description="A single film.")
class Film(Node):
    title: str | None = strawberry.field(default=None, description="The title of this film.")
    episode_id: int | None = strawberry.field(
        default=None, name="episodeID", description="The episode number of this film."
    )
    opening_crawl: str | None = strawberry.field(
        default=None,
        description="The opening paragraphs at the beginning of this film.",
    )
    director: str | None = strawberry.field(
        default=None, description="The name of the director of this film."
    )
    producers: list[str] | None = strawberry.field(
        default=None, description="The name(s) of the producer(s) of this film."
    )
    release_date: str | None = strawberry.field(
        default=None,
        description="The ISO 8601 date format of film release at original creator country.",
    )
    created: str | None = strawberry.field(
        default=None,
        description="The ISO 8601 date format of the time that this resource was created.",
    )
    edited: str | None = strawberry.field(
        default=None,
        description="The ISO 8601 date format of the time that this resource was edited.",
    )

    character_urls: strawberry.Private[list[str]] = _url_list()
    planet_urls: strawberry.Private[list[str]] = _url_list()
    starship_urls: strawberry.Private[list[str]] = _url_list()
    vehicle_urls: strawberry.Private[list[str]] = _url_list()
    species_urls: strawberry.Private[list[str]] = _url_list()

    @classmethod
    def from_record(cls, record: Record) -> "Film":
        return cls(
            id=_global_id(TypeTag.FILMS, record),
            title=record.get("title"),
            episode_id=to_int(record.get("episode_id")),
            opening_crawl=record.get("opening_crawl"),
            director=record.get("director"),
            producers=to_list(record.get("producer")),
            release_date=record.get("release_date"),
            created=record.get("created"),
            edited=record.get("edited"),
            character_urls=_urls(record, "characters"),
            planet_urls=_urls(record, "planets"),
            starship_urls=_urls(record, "starships"),
            vehicle_urls=_urls(record, "vehicles"),
            species_urls=_urls(record, "species"),
        )

    @strawberry.field
    async def species_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "SpeciesConnection":
        return await resolve_related_connection(
            info, TypeTag.SPECIES, self.species_urls, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def starship_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "StarshipsConnection":
        return await resolve_related_connection(
            info, TypeTag.STARSHIPS, self.starship_urls, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def vehicle_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "VehiclesConnection":
        return await resolve_related_connection(
            info, TypeTag.VEHICLES, self.vehicle_urls, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def character_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "PeopleConnection":
        return await resolve_related_connection(
            info, TypeTag.PEOPLE, self.character_urls, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def planet_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "PlanetsConnection":
        return await resolve_related_connection(
            info, TypeTag.PLANETS, self.planet_urls, ConnectionArgs(first, after, last, before)
        )


@strawberry.type(
    description="An individual person or character within the Star Wars universe."
)
class Person(Node):
    name: str | None = strawberry.field(default=None, description="The name of this person.")
    birth_year: str | None = strawberry.field(
        default=None,
        description="The birth year of the person, using the in-universe standard of BBY or ABY.",
    )
    eye_color: str | None = strawberry.field(
        default=None, description="The eye color of this person."
    )
    gender: str | None = strawberry.field(
        default=None, description='The gender of this person, or "n/a" for droids.'
    )
    hair_color: str | None = strawberry.field(
        default=None, description="The hair color of this person."
    )
    height: int | None = strawberry.field(
        default=None, description="The height of the person in centimeters."
    )
    mass: float | None = strawberry.field(
        default=None, description="The mass of the person in kilograms."
    )
    skin_color: str | None = strawberry.field(
        default=None, description="The skin color of this person."
    )
    created: str | None = None
    edited: str | None = None

    homeworld_url: strawberry.Private[str | None] = None
    film_urls: strawberry.Private[list[str]] = _url_list()
    species_urls: strawberry.Private[list[str]] = _url_list()
    starship_urls: strawberry.Private[list[str]] = _url_list()
    vehicle_urls: strawberry.Private[list[str]] = _url_list()

    @classmethod
    def from_record(cls, record: Record) -> "Person":
        return cls(
            id=_global_id(TypeTag.PEOPLE, record),
            name=record.get("name"),
            birth_year=record.get("birth_year"),
            eye_color=record.get("eye_color"),
            gender=record.get("gender"),
            hair_color=record.get("hair_color"),
            height=to_int(record.get("height")),
            mass=to_float(record.get("mass")),
            skin_color=record.get("skin_color"),
            created=record.get("created"),
            edited=record.get("edited"),
            homeworld_url=record.get("homeworld"),
            film_urls=_urls(record, "films"),
            species_urls=_urls(record, "species"),
            starship_urls=_urls(record, "starships"),
            vehicle_urls=_urls(record, "vehicles"),
        )

    @strawberry.field(description="A planet that this person was born on or inhabits.")
    async def homeworld(self, info: Info) -> "Planet | None":
        return await resolve_related_node(info, TypeTag.PLANETS, self.homeworld_url)

    @strawberry.field(
        description="The species that this person belongs to, or null if unknown."
    )
    async def species(self, info: Info) -> "Species | None":
        url = self.species_urls[0] if self.species_urls else None
        return await resolve_related_node(info, TypeTag.SPECIES, url)

    @strawberry.field
    async def film_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "FilmsConnection":
        return await resolve_related_connection(
            info, TypeTag.FILMS, self.film_urls, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def starship_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "StarshipsConnection":
        return await resolve_related_connection(
            info, TypeTag.STARSHIPS, self.starship_urls, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def vehicle_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "VehiclesConnection":
        return await resolve_related_connection(
            info, TypeTag.VEHICLES, self.vehicle_urls, ConnectionArgs(first, after, last, before)
        )


@strawberry.type(
    description="A large mass, planet or planetoid in the Star Wars Universe, at the time of 0 ABY."
)
class Planet(Node):
    name: str | None = strawberry.field(default=None, description="The name of this planet.")
    diameter: int | None = strawberry.field(
        default=None, description="The diameter of this planet in kilometers."
    )
    rotation_period: int | None = strawberry.field(
        default=None,
        description="The number of standard hours it takes for this planet to complete a single rotation on its axis.",
    )
    orbital_period: int | None = strawberry.field(
        default=None,
        description="The number of standard days it takes for this planet to complete a single orbit of its local star.",
    )
    gravity: str | None = strawberry.field(
        default=None,
        description='A number denoting the gravity of this planet, where "1" is normal or 1 standard G.',
    )
    population: float | None = strawberry.field(
        default=None,
        description="The average population of sentient beings inhabiting this planet.",
    )
    climates: list[str] | None = strawberry.field(
        default=None, description="The climates of this planet."
    )
    terrains: list[str] | None = strawberry.field(
        default=None, description="The terrains of this planet."
    )
    surface_water: float | None = strawberry.field(
        default=None,
        description="The percentage of the planet surface that is naturally occuring water or bodies of water.",
    )
    created: str | None = None
    edited: str | None = None

    resident_urls: strawberry.Private[list[str]] = _url_list()
    film_urls: strawberry.Private[list[str]] = _url_list()

    @classmethod
    def from_record(cls, record: Record) -> "Planet":
        return cls(
            id=_global_id(TypeTag.PLANETS, record),
            name=record.get("name"),
            diameter=to_int(record.get("diameter")),
            rotation_period=to_int(record.get("rotation_period")),
            orbital_period=to_int(record.get("orbital_period")),
            gravity=record.get("gravity"),
            population=to_float(record.get("population")),
            climates=to_list(record.get("climate")),
            terrains=to_list(record.get("terrain")),
            surface_water=to_float(record.get("surface_water")),
            created=record.get("created"),
            edited=record.get("edited"),
            resident_urls=_urls(record, "residents"),
            film_urls=_urls(record, "films"),
        )

    @strawberry.field
    async def resident_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "PeopleConnection":
        return await resolve_related_connection(
            info, TypeTag.PEOPLE, self.resident_urls, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def film_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "FilmsConnection":
        return await resolve_related_connection(
            info, TypeTag.FILMS, self.film_urls, ConnectionArgs(first, after, last, before)
        )


@strawberry.type(description="A type of person or character within the Star Wars Universe.")
class Species(Node):
    name: str | None = strawberry.field(default=None, description="The name of this species.")
    classification: str | None = strawberry.field(
        default=None, description='The classification of this species, such as "mammal" or "reptile".'
    )
    designation: str | None = strawberry.field(
        default=None, description='The designation of this species, such as "sentient".'
    )
    average_height: float | None = strawberry.field(
        default=None, description="The average height of this species in centimeters."
    )
    average_lifespan: int | None = strawberry.field(
        default=None, description="The average lifespan of this species in years, null if unknown."
    )
    eye_colors: list[str] | None = None
    hair_colors: list[str] | None = None
    skin_colors: list[str] | None = None
    language: str | None = strawberry.field(
        default=None, description="The language commonly spoken by this species."
    )
    created: str | None = None
    edited: str | None = None

    homeworld_url: strawberry.Private[str | None] = None
    person_urls: strawberry.Private[list[str]] = _url_list()
    film_urls: strawberry.Private[list[str]] = _url_list()

    @classmethod
    def from_record(cls, record: Record) -> "Species":
        return cls(
            id=_global_id(TypeTag.SPECIES, record),
            name=record.get("name"),
            classification=record.get("classification"),
            designation=record.get("designation"),
            average_height=to_float(record.get("average_height")),
            average_lifespan=to_int(record.get("average_lifespan")),
            eye_colors=to_list(record.get("eye_colors")),
            hair_colors=to_list(record.get("hair_colors")),
            skin_colors=to_list(record.get("skin_colors")),
            language=record.get("language"),
            created=record.get("created"),
            edited=record.get("edited"),
            homeworld_url=record.get("homeworld"),
            person_urls=_urls(record, "people"),
            film_urls=_urls(record, "films"),
        )

    @strawberry.field(description="A planet that this species originates from.")
    async def homeworld(self, info: Info) -> "Planet | None":
        return await resolve_related_node(info, TypeTag.PLANETS, self.homeworld_url)

    @strawberry.field
    async def person_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "PeopleConnection":
        return await resolve_related_connection(
            info, TypeTag.PEOPLE, self.person_urls, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def film_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "FilmsConnection":
        return await resolve_related_connection(
            info, TypeTag.FILMS, self.film_urls, ConnectionArgs(first, after, last, before)
        )


@strawberry.type(description="A single transport craft that has hyperdrive capability.")
class Starship(Node):
    name: str | None = strawberry.field(
        default=None, description='The name of this starship. The common name, such as "Death Star".'
    )
    model: str | None = strawberry.field(
        default=None, description="The model or official name of this starship."
    )
    starship_class: str | None = strawberry.field(
        default=None, description='The class of this starship, such as "Starfighter" or "Deep Space Mobile Battlestation".'
    )
    manufacturers: list[str] | None = strawberry.field(
        default=None, description="The manufacturers of this starship."
    )
    cost_in_credits: float | None = strawberry.field(
        default=None, description="The cost of this starship new, in galactic credits."
    )
    length: float | None = strawberry.field(
        default=None, description="The length of this starship in meters."
    )
    crew: str | None = strawberry.field(
        default=None, description="The number of personnel needed to run or pilot this starship."
    )
    passengers: str | None = strawberry.field(
        default=None, description="The number of non-essential people this starship can transport."
    )
    max_atmosphering_speed: int | None = strawberry.field(
        default=None, description="The maximum speed of this starship in atmosphere, null if not applicable."
    )
    hyperdrive_rating: float | None = strawberry.field(
        default=None, description="The class of this starships hyperdrive."
    )
    mglt: int | None = strawberry.field(
        default=None,
        name="MGLT",
        description="The Maximum number of Megalights this starship can travel in a standard hour.",
    )
    cargo_capacity: float | None = strawberry.field(
        default=None, description="The maximum number of kilograms that this starship can transport."
    )
    consumables: str | None = strawberry.field(
        default=None,
        description="The maximum length of time that this starship can provide consumables for its entire crew without having to resupply.",
    )
    created: str | None = None
    edited: str | None = None

    pilot_urls: strawberry.Private[list[str]] = _url_list()
    film_urls: strawberry.Private[list[str]] = _url_list()

    @classmethod
    def from_record(cls, record: Record) -> "Starship":
        return cls(
            id=_global_id(TypeTag.STARSHIPS, record),
            name=record.get("name"),
            model=record.get("model"),
            starship_class=record.get("starship_class"),
            manufacturers=to_list(record.get("manufacturer")),
            cost_in_credits=to_float(record.get("cost_in_credits")),
            length=to_float(record.get("length")),
            crew=record.get("crew"),
            passengers=record.get("passengers"),
            max_atmosphering_speed=to_int(record.get("max_atmosphering_speed")),
            hyperdrive_rating=to_float(record.get("hyperdrive_rating")),
            mglt=to_int(record.get("MGLT")),
            cargo_capacity=to_float(record.get("cargo_capacity")),
            consumables=record.get("consumables"),
            created=record.get("created"),
            edited=record.get("edited"),
            pilot_urls=_urls(record, "pilots"),
            film_urls=_urls(record, "films"),
        )

    @strawberry.field
    async def pilot_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "PeopleConnection":
        return await resolve_related_connection(
            info, TypeTag.PEOPLE, self.pilot_urls, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def film_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "FilmsConnection":
        return await resolve_related_connection(
            info, TypeTag.FILMS, self.film_urls, ConnectionArgs(first, after, last, before)
        )


@strawberry.type(description="A single transport craft that does not have hyperdrive capability")
class Vehicle(Node):
    name: str | None = strawberry.field(
        default=None, description='The name of this vehicle. The common name, such as "Sand Crawler" or "Speeder bike".'
    )
    model: str | None = strawberry.field(
        default=None, description="The model or official name of this vehicle."
    )
    vehicle_class: str | None = strawberry.field(
        default=None, description='The class of this vehicle, such as "Wheeled" or "Repulsorcraft".'
    )
    manufacturers: list[str] | None = strawberry.field(
        default=None, description="The manufacturers of this vehicle."
    )
    cost_in_credits: float | None = strawberry.field(
        default=None, description="The cost of this vehicle new, in Galactic Credits."
    )
    length: float | None = strawberry.field(
        default=None, description="The length of this vehicle in meters."
    )
    crew: str | None = strawberry.field(
        default=None, description="The number of personnel needed to run or pilot this vehicle."
    )
    passengers: str | None = strawberry.field(
        default=None, description="The number of non-essential people this vehicle can transport."
    )
    max_atmosphering_speed: int | None = strawberry.field(
        default=None, description="The maximum speed of this vehicle in atmosphere."
    )
    cargo_capacity: float | None = strawberry.field(
        default=None, description="The maximum number of kilograms that this vehicle can transport."
    )
    consumables: str | None = strawberry.field(
        default=None,
        description="The maximum length of time that this vehicle can provide consumables for its entire crew without having to resupply.",
    )
    created: str | None = None
    edited: str | None = None

    pilot_urls: strawberry.Private[list[str]] = _url_list()
    film_urls: strawberry.Private[list[str]] = _url_list()

    @classmethod
    def from_record(cls, record: Record) -> "Vehicle":
        return cls(
            id=_global_id(TypeTag.VEHICLES, record),
            name=record.get("name"),
            model=record.get("model"),
            vehicle_class=record.get("vehicle_class"),
            manufacturers=to_list(record.get("manufacturer")),
            cost_in_credits=to_float(record.get("cost_in_credits")),
            length=to_float(record.get("length")),
            crew=record.get("crew"),
            passengers=record.get("passengers"),
            max_atmosphering_speed=to_int(record.get("max_atmosphering_speed")),
            cargo_capacity=to_float(record.get("cargo_capacity")),
            consumables=record.get("consumables"),
            created=record.get("created"),
            edited=record.get("edited"),
            pilot_urls=_urls(record, "pilots"),
            film_urls=_urls(record, "films"),
        )

    @strawberry.field
    async def pilot_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "PeopleConnection":
        return await resolve_related_connection(
            info, TypeTag.PEOPLE, self.pilot_urls, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def film_connection(
        self,
        info: Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> "FilmsConnection":
        return await resolve_related_connection(
            info, TypeTag.FILMS, self.film_urls, ConnectionArgs(first, after, last, before)
        )


# --- Pagination Types ---


def _connection_kwargs(edge_type: type, node_type: type, page: ConnectionSlice) -> dict:
    return {
        "page_info": PageInfo(
            has_next_page=page.has_next_page,
            has_previous_page=page.has_previous_page,
            start_cursor=page.start_cursor,
            end_cursor=page.end_cursor,
        ),
        "edges": [
            edge_type(node=node_type.from_record(edge.node), cursor=edge.cursor)
            for edge in page.edges
        ],
        "total_count": page.total_count,
    }


@strawberry.type(description="An edge in a connection.")
class FilmsEdge:
    node: Film = strawberry.field(description="The item at the end of the edge")
    cursor: str = strawberry.field(description="A cursor for use in pagination")


@strawberry.type(description="A connection to a list of items.")
class FilmsConnection:
    page_info: PageInfo = strawberry.field(description="Information to aid in pagination.")
    edges: list[FilmsEdge] = strawberry.field(description="A list of edges.")
    total_count: int | None = strawberry.field(description=TOTAL_COUNT_DESCRIPTION)

    @strawberry.field(description=NODE_LIST_DESCRIPTION)
    def films(self) -> list[Film]:
        return [edge.node for edge in self.edges]

    @classmethod
    def from_slice(cls, page: ConnectionSlice) -> "FilmsConnection":
        return cls(**_connection_kwargs(FilmsEdge, Film, page))


@strawberry.type(description="An edge in a connection.")
class PeopleEdge:
    node: Person = strawberry.field(description="The item at the end of the edge")
    cursor: str = strawberry.field(description="A cursor for use in pagination")


@strawberry.type(description="A connection to a list of items.")
class PeopleConnection:
    page_info: PageInfo = strawberry.field(description="Information to aid in pagination.")
    edges: list[PeopleEdge] = strawberry.field(description="A list of edges.")
    total_count: int | None = strawberry.field(description=TOTAL_COUNT_DESCRIPTION)

    @strawberry.field(description=NODE_LIST_DESCRIPTION)
    def people(self) -> list[Person]:
        return [edge.node for edge in self.edges]

    @classmethod
    def from_slice(cls, page: ConnectionSlice) -> "PeopleConnection":
        return cls(**_connection_kwargs(PeopleEdge, Person, page))


@strawberry.type(description="An edge in a connection.")
class PlanetsEdge:
    node: Planet = strawberry.field(description="The item at the end of the edge")
    cursor: str = strawberry.field(description="A cursor for use in pagination")


@strawberry.type(description="A connection to a list of items.")
class PlanetsConnection:
    page_info: PageInfo = strawberry.field(description="Information to aid in pagination.")
    edges: list[PlanetsEdge] = strawberry.field(description="A list of edges.")
    total_count: int | None = strawberry.field(description=TOTAL_COUNT_DESCRIPTION)

    @strawberry.field(description=NODE_LIST_DESCRIPTION)
    def planets(self) -> list[Planet]:
        return [edge.node for edge in self.edges]

    @classmethod
    def from_slice(cls, page: ConnectionSlice) -> "PlanetsConnection":
        return cls(**_connection_kwargs(PlanetsEdge, Planet, page))


@strawberry.type(description="An edge in a connection.")
class SpeciesEdge:
    node: Species = strawberry.field(description="The item at the end of the edge")
    cursor: str = strawberry.field(description="A cursor for use in pagination")


@strawberry.type(description="A connection to a list of items.")
class SpeciesConnection:
    page_info: PageInfo = strawberry.field(description="Information to aid in pagination.")
    edges: list[SpeciesEdge] = strawberry.field(description="A list of edges.")
    total_count: int | None = strawberry.field(description=TOTAL_COUNT_DESCRIPTION)

    @strawberry.field(description=NODE_LIST_DESCRIPTION)
    def species(self) -> list[Species]:
        return [edge.node for edge in self.edges]

    @classmethod
    def from_slice(cls, page: ConnectionSlice) -> "SpeciesConnection":
        return cls(**_connection_kwargs(SpeciesEdge, Species, page))


@strawberry.type(description="An edge in a connection.")
class StarshipsEdge:
    node: Starship = strawberry.field(description="The item at the end of the edge")
    cursor: str = strawberry.field(description="A cursor for use in pagination")


@strawberry.type(description="A connection to a list of items.")
class StarshipsConnection:
    page_info: PageInfo = strawberry.field(description="Information to aid in pagination.")
    edges: list[StarshipsEdge] = strawberry.field(description="A list of edges.")
    total_count: int | None = strawberry.field(description=TOTAL_COUNT_DESCRIPTION)

    @strawberry.field(description=NODE_LIST_DESCRIPTION)
    def starships(self) -> list[Starship]:
        return [edge.node for edge in self.edges]

    @classmethod
    def from_slice(cls, page: ConnectionSlice) -> "StarshipsConnection":
        return cls(**_connection_kwargs(StarshipsEdge, Starship, page))


@strawberry.type(description="An edge in a connection.")
class VehiclesEdge:
    node: Vehicle = strawberry.field(description="The item at the end of the edge")
    cursor: str = strawberry.field(description="A cursor for use in pagination")


@strawberry.type(description="A connection to a list of items.")
class VehiclesConnection:
    page_info: PageInfo = strawberry.field(description="Information to aid in pagination.")
    edges: list[VehiclesEdge] = strawberry.field(description="A list of edges.")
    total_count: int | None = strawberry.field(description=TOTAL_COUNT_DESCRIPTION)

    @strawberry.field(description=NODE_LIST_DESCRIPTION)
    def vehicles(self) -> list[Vehicle]:
        return [edge.node for edge in self.edges]

    @classmethod
    def from_slice(cls, page: ConnectionSlice) -> "VehiclesConnection":
        return cls(**_connection_kwargs(VehiclesEdge, Vehicle, page))
