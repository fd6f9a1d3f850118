from enum import Enum


class TypeTag(str, Enum):
    """The catalog's resource names; each one is also a node type namespace."""

    FILMS = "films"
    PEOPLE = "people"
    PLANETS = "planets"
    SPECIES = "species"
    STARSHIPS = "starships"
    VEHICLES = "vehicles"
