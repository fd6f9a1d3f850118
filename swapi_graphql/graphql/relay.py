import logging

import strawberry
from strawberry.types import Info

from swapi_graphql.services.swapi_client import Record, SwapiClient

from .common import Node, check_local_id, from_global_id, to_global_id
from .registry import TypeEntry, TypeRegistry

logger = logging.getLogger(__name__)


# --- Node Fetching Logic ---


def locate_node(global_id: str, registry: TypeRegistry) -> tuple[TypeEntry, str]:
    """Decodes a global ID into its registry entry and type-local ID."""
    type_name, local_id = from_global_id(global_id)
    entry = registry.get(type_name)
    return entry, check_local_id(local_id, "id")


async def _fetch_node(entry: TypeEntry, local_id: str, swapi: SwapiClient) -> Record | None:
    record = await swapi.fetch_by_type_and_id(entry.resource_path, local_id)
    if record is None:
        logger.debug(f"Node {entry.tag.value} with id '{local_id}' not found.")
    return record


async def resolve_node(
    global_id: str, registry: TypeRegistry, swapi: SwapiClient
) -> Record | None:
    """Decodes a global ID and fetches the record it points at.

    DecodeError and UnknownTypeError propagate to the caller, as does
    InvalidArgumentError for a local ID spanning more than one path segment.
    A record the catalog does not have yields None.
    """
    entry, local_id = locate_node(global_id, registry)
    return await _fetch_node(entry, local_id, swapi)


async def get_node(info: Info, global_id: strawberry.ID) -> Node | None:
    """Fetches any Node object by its global ID."""
    entry, local_id = locate_node(global_id, info.context.registry)
    record = await _fetch_node(entry, local_id, info.context.swapi)
    if record is None:
        return None
    return entry.graphql_type.from_record(record)


__all__ = ["Node", "from_global_id", "get_node", "locate_node", "resolve_node", "to_global_id"]
