"""Export resolvers for easy combination in the main schema."""

# Relationship fields on node types
from .relations import (
    resolve_related_connection,
    resolve_related_node,
)

# Root query fields
from .root import (
    resolve_all,
    resolve_by_id,
    resolve_search,
)

__all__ = [
    "resolve_related_connection",
    "resolve_related_node",
    "resolve_all",
    "resolve_by_id",
    "resolve_search",
]
