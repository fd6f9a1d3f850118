from .common import PageInfo
from .resources import (
    Film,
    FilmsConnection,
    FilmsEdge,
    PeopleConnection,
    PeopleEdge,
    Person,
    Planet,
    PlanetsConnection,
    PlanetsEdge,
    Species,
    SpeciesConnection,
    SpeciesEdge,
    Starship,
    StarshipsConnection,
    StarshipsEdge,
    Vehicle,
    VehiclesConnection,
    VehiclesEdge,
)

__all__ = [
    "PageInfo",
    "Film",
    "FilmsConnection",
    "FilmsEdge",
    "Person",
    "PeopleConnection",
    "PeopleEdge",
    "Planet",
    "PlanetsConnection",
    "PlanetsEdge",
    "Species",
    "SpeciesConnection",
    "SpeciesEdge",
    "Starship",
    "StarshipsConnection",
    "StarshipsEdge",
    "Vehicle",
    "VehiclesConnection",
    "VehiclesEdge",
]
