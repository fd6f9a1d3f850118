"""Export GraphQL components for use in the main application."""

# Schema
from .schema import (
    Context,
    Query,
    registry,
    schema,
)

# Type registry
from .registry import TypeEntry, TypeRegistry, build_registry
from .tags import TypeTag

# Relay utilities
from .relay import (
    Node,
    from_global_id,
    get_node,
    resolve_node,
    to_global_id,
)

# Pagination
from .utils import ConnectionArgs, ConnectionSlice, connection_from_list

__all__ = [
    "Context",
    "Query",
    "registry",
    "schema",
    "TypeEntry",
    "TypeRegistry",
    "TypeTag",
    "build_registry",
    "Node",
    "from_global_id",
    "get_node",
    "resolve_node",
    "to_global_id",
    "ConnectionArgs",
    "ConnectionSlice",
    "connection_from_list",
]
