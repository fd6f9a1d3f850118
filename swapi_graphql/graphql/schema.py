import logging
from typing import Annotated

import strawberry
from strawberry.fastapi import BaseContext
from strawberry.types import Info as StrawberryInfo

from swapi_graphql.services.swapi_client import SwapiClient

# Import the custom error handler extension
from .extensions.error_handler import CustomErrorHandler

# Import Node interface and resolver
from .common import Node
from .registry import TypeRegistry, build_registry
from .relay import get_node
from .resolvers.root import resolve_all, resolve_by_id, resolve_search
from .tags import TypeTag
from .types.common import PageInfo
from .types.resources import (
    Film,
    FilmsConnection,
    PeopleConnection,
    Person,
    Planet,
    PlanetsConnection,
    Species,
    SpeciesConnection,
    Starship,
    StarshipsConnection,
    Vehicle,
    VehiclesConnection,
)
from .utils import ConnectionArgs

logger = logging.getLogger(__name__)

ID = strawberry.ID


# --- Custom Context ---
# Request-scoped holder for the REST client and the type registry
class Context(BaseContext):
    def __init__(
        self,
        swapi: SwapiClient,
        registry: TypeRegistry,
        strict_global_ids: bool = False,
    ):
        super().__init__()
        self.swapi = swapi
        self.registry = registry
        self.strict_global_ids = strict_global_ids


def _local_id_argument(name: str) -> object:
    return strawberry.argument(name=name, description=f"The {name} of the object, as used by SWAPI.")


# --- Root Query Definition ---


@strawberry.type(name="Root")
class Query:
    @strawberry.field
    async def all_films(
        self,
        info: StrawberryInfo,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> FilmsConnection:
        return await resolve_all(info, TypeTag.FILMS, ConnectionArgs(first, after, last, before))

    @strawberry.field
    async def film(
        self,
        info: StrawberryInfo,
        id: ID | None = None,
        film_id: Annotated[ID | None, _local_id_argument("filmID")] = None,
    ) -> Film | None:
        return await resolve_by_id(info, TypeTag.FILMS, film_id, id)

    @strawberry.field
    async def all_people(
        self,
        info: StrawberryInfo,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> PeopleConnection:
        return await resolve_all(info, TypeTag.PEOPLE, ConnectionArgs(first, after, last, before))

    @strawberry.field
    async def person(
        self,
        info: StrawberryInfo,
        id: ID | None = None,
        person_id: Annotated[ID | None, _local_id_argument("personID")] = None,
    ) -> Person | None:
        return await resolve_by_id(info, TypeTag.PEOPLE, person_id, id)

    @strawberry.field
    async def people_by_name(
        self,
        info: StrawberryInfo,
        name: str | None = None,
        title: str | None = None,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> PeopleConnection:
        return await resolve_search(
            info, TypeTag.PEOPLE, name, title, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def planets_by_name(
        self,
        info: StrawberryInfo,
        name: str | None = None,
        title: str | None = None,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> PlanetsConnection:
        return await resolve_search(
            info, TypeTag.PLANETS, name, title, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def films_by_title(
        self,
        info: StrawberryInfo,
        name: str | None = None,
        title: str | None = None,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> FilmsConnection:
        return await resolve_search(
            info, TypeTag.FILMS, name, title, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def species_by_name(
        self,
        info: StrawberryInfo,
        name: str | None = None,
        title: str | None = None,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> SpeciesConnection:
        return await resolve_search(
            info, TypeTag.SPECIES, name, title, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def vehicles_by_name(
        self,
        info: StrawberryInfo,
        name: str | None = None,
        title: str | None = None,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> VehiclesConnection:
        return await resolve_search(
            info, TypeTag.VEHICLES, name, title, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def starships_by_name(
        self,
        info: StrawberryInfo,
        name: str | None = None,
        title: str | None = None,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> StarshipsConnection:
        return await resolve_search(
            info, TypeTag.STARSHIPS, name, title, ConnectionArgs(first, after, last, before)
        )

    @strawberry.field
    async def all_planets(
        self,
        info: StrawberryInfo,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> PlanetsConnection:
        return await resolve_all(info, TypeTag.PLANETS, ConnectionArgs(first, after, last, before))

    @strawberry.field
    async def planet(
        self,
        info: StrawberryInfo,
        id: ID | None = None,
        planet_id: Annotated[ID | None, _local_id_argument("planetID")] = None,
    ) -> Planet | None:
        return await resolve_by_id(info, TypeTag.PLANETS, planet_id, id)

    @strawberry.field
    async def all_species(
        self,
        info: StrawberryInfo,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> SpeciesConnection:
        return await resolve_all(info, TypeTag.SPECIES, ConnectionArgs(first, after, last, before))

    @strawberry.field
    async def species(
        self,
        info: StrawberryInfo,
        id: ID | None = None,
        species_id: Annotated[ID | None, _local_id_argument("speciesID")] = None,
    ) -> Species | None:
        return await resolve_by_id(info, TypeTag.SPECIES, species_id, id)

    @strawberry.field
    async def all_starships(
        self,
        info: StrawberryInfo,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> StarshipsConnection:
        return await resolve_all(info, TypeTag.STARSHIPS, ConnectionArgs(first, after, last, before))

    @strawberry.field
    async def starship(
        self,
        info: StrawberryInfo,
        id: ID | None = None,
        starship_id: Annotated[ID | None, _local_id_argument("starshipID")] = None,
    ) -> Starship | None:
        return await resolve_by_id(info, TypeTag.STARSHIPS, starship_id, id)

    @strawberry.field
    async def all_vehicles(
        self,
        info: StrawberryInfo,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> VehiclesConnection:
        return await resolve_all(info, TypeTag.VEHICLES, ConnectionArgs(first, after, last, before))

    @strawberry.field
    async def vehicle(
        self,
        info: StrawberryInfo,
        id: ID | None = None,
        vehicle_id: Annotated[ID | None, _local_id_argument("vehicleID")] = None,
    ) -> Vehicle | None:
        return await resolve_by_id(info, TypeTag.VEHICLES, vehicle_id, id)

    # Node field for Relay
    @strawberry.field
    async def node(self, info: StrawberryInfo, id: ID) -> Node | None:
        """Fetches an object given its ID"""
        return await get_node(info=info, global_id=id)


# --- Schema Definition ---
schema = strawberry.Schema(
    query=Query,
    # Node implementations are only reachable through the interface from `node`
    types=[Film, Person, Planet, Species, Starship, Vehicle, PageInfo],
    extensions=[
        CustomErrorHandler,
    ],
)

# Built once; resolvers receive it through the context
registry = build_registry()
