import logging
from typing import Any

import strawberry
from strawberry.types import Info

from swapi_graphql.core.exceptions import (
    DecodeError,
    InvalidArgumentError,
    MissingArgumentError,
)
from swapi_graphql.graphql.common import check_local_id, from_global_id
from swapi_graphql.graphql.tags import TypeTag
from swapi_graphql.graphql.utils import ConnectionArgs, connection_from_list

logger = logging.getLogger(__name__)


# --- all<Type> Connections --- #
async def resolve_all(info: Info, tag: TypeTag, args: ConnectionArgs) -> Any:
    """Every record of one type, as a paginated connection."""
    entry = info.context.registry.get(tag)
    result = await info.context.swapi.fetch_all_by_type(entry.resource_path)
    page = connection_from_list(result.objects, args, total_count=result.total_count)
    return entry.connection_type.from_slice(page)


# --- <type>ByName / <type>ByTitle Connections --- #
async def resolve_search(
    info: Info,
    tag: TypeTag,
    name: str | None,
    title: str | None,
    args: ConnectionArgs,
) -> Any:
    """Records matching a catalog search; ``name`` wins over ``title``."""
    query = name if name is not None else title
    entry = info.context.registry.get(tag)
    result = await info.context.swapi.fetch_by_type_and_query(entry.resource_path, query or "")
    logger.debug(
        f"Search on {tag.value} returned {len(result.objects)} record(s)",
        extra={"props": {"query": query, "total_count": result.total_count}},
    )
    page = connection_from_list(result.objects, args, total_count=result.total_count)
    return entry.connection_type.from_slice(page)


# --- <type> by ID --- #
async def resolve_by_id(
    info: Info,
    tag: TypeTag,
    local_id: strawberry.ID | None,
    global_id: strawberry.ID | None,
) -> Any:
    """Fetches one record by its type-local ID or, failing that, its global ID."""
    entry = info.context.registry.get(tag)

    if local_id is None and global_id is not None:
        try:
            type_name, local_id = from_global_id(global_id)
        except DecodeError as e:
            raise InvalidArgumentError(
                f"No valid ID extracted from {global_id}", "id"
            ) from e
        if info.context.strict_global_ids and type_name != tag.value:
            raise InvalidArgumentError(
                f"ID {global_id} refers to {type_name}, not {tag.value}", "id"
            )
        check_local_id(local_id, "id")

    if local_id is None:
        raise MissingArgumentError(f"must provide id or {entry.id_argument}")
    if local_id == "":
        raise InvalidArgumentError(f"{entry.id_argument} must not be empty", entry.id_argument)
    check_local_id(local_id, entry.id_argument)

    record = await info.context.swapi.fetch_by_type_and_id(entry.resource_path, local_id)
    if record is None:
        logger.debug(f"{tag.value} record '{local_id}' not found")
        return None
    return entry.graphql_type.from_record(record)
