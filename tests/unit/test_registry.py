import pytest

from swapi_graphql.core.exceptions import UnknownTypeError
from swapi_graphql.graphql.registry import TypeEntry, TypeRegistry, build_registry
from swapi_graphql.graphql.tags import TypeTag
from swapi_graphql.graphql.types.resources import Film, FilmsConnection, Person


def test_registry_covers_every_tag():
    registry = build_registry()

    assert len(registry) == len(TypeTag)
    assert set(registry) == set(TypeTag)


def test_lookup_by_enum_and_by_string():
    registry = build_registry()

    assert registry.get(TypeTag.PEOPLE).graphql_type is Person
    assert registry.get("people").id_argument == "personID"
    assert registry.get("films").connection_type is FilmsConnection
    assert "starships" in registry
    assert "droids" not in registry


def test_unknown_tag_raises():
    with pytest.raises(UnknownTypeError):
        build_registry().get("droids")


def test_incomplete_registry_is_refused():
    with pytest.raises(ValueError, match="missing entries"):
        TypeRegistry(
            {TypeTag.FILMS: TypeEntry(TypeTag.FILMS, Film, FilmsConnection, "films", "filmID")}
        )


def test_registry_cannot_be_mutated():
    registry = build_registry()

    with pytest.raises(TypeError):
        registry._entries[TypeTag.FILMS] = None
