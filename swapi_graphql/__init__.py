"""GraphQL façade over the SWAPI REST catalog."""

# Logging setup
from swapi_graphql.logging_config import (
    JsonFormatter,
    setup_logging,
)

__all__ = [
    "JsonFormatter",
    "setup_logging",
]
