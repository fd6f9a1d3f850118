from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from swapi_graphql.core.exceptions import UnknownTypeError

from .tags import TypeTag
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


@dataclass(frozen=True)
class TypeEntry:
    """How one catalog resource maps onto the GraphQL schema."""

    tag: TypeTag
    graphql_type: type
    connection_type: type
    resource_path: str
    id_argument: str


class TypeRegistry:
    """Read-only lookup from type tag to its entry, built once per process."""

    def __init__(self, entries: Mapping[TypeTag, TypeEntry]):
        missing = [tag.value for tag in TypeTag if tag not in entries]
        if missing:
            raise ValueError(f"Type registry is missing entries for: {', '.join(missing)}")
        self._entries = MappingProxyType(dict(entries))

    def get(self, tag: TypeTag | str) -> TypeEntry:
        """Looks up an entry; raises UnknownTypeError for tags outside the set."""
        try:
            return self._entries[TypeTag(tag)]
        except ValueError as e:
            raise UnknownTypeError(f"Unknown type: {tag}") from e

    def __contains__(self, tag: object) -> bool:
        try:
            return TypeTag(tag) in self._entries
        except ValueError:
            return False

    def __iter__(self) -> Iterator[TypeTag]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def build_registry() -> TypeRegistry:
    return TypeRegistry(
        {
            TypeTag.FILMS: TypeEntry(TypeTag.FILMS, Film, FilmsConnection, "films", "filmID"),
            TypeTag.PEOPLE: TypeEntry(TypeTag.PEOPLE, Person, PeopleConnection, "people", "personID"),
            TypeTag.PLANETS: TypeEntry(TypeTag.PLANETS, Planet, PlanetsConnection, "planets", "planetID"),
            TypeTag.SPECIES: TypeEntry(TypeTag.SPECIES, Species, SpeciesConnection, "species", "speciesID"),
            TypeTag.STARSHIPS: TypeEntry(
                TypeTag.STARSHIPS, Starship, StarshipsConnection, "starships", "starshipID"
            ),
            TypeTag.VEHICLES: TypeEntry(
                TypeTag.VEHICLES, Vehicle, VehiclesConnection, "vehicles", "vehicleID"
            ),
        }
    )
