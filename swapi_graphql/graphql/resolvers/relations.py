import logging
from typing import Any

from strawberry.types import Info

from swapi_graphql.graphql.tags import TypeTag
from swapi_graphql.graphql.utils import ConnectionArgs, connection_from_list

logger = logging.getLogger(__name__)


async def resolve_related_connection(
    info: Info, tag: TypeTag, urls: list[str], args: ConnectionArgs
) -> Any:
    """Paginates a record's list of related URLs and fetches only the page's nodes."""
    entry = info.context.registry.get(tag)
    page = connection_from_list(urls, args)
    records = await info.context.swapi.fetch_many_by_urls(page.nodes)
    missing = sum(1 for record in records if record is None)
    if missing:
        logger.debug(f"{missing} related {tag.value} record(s) not found")
    return entry.connection_type.from_slice(page.with_nodes(records))


async def resolve_related_node(info: Info, tag: TypeTag, url: str | None) -> Any:
    """Fetches a single related record (e.g. a homeworld) by its catalog URL."""
    if not url:
        return None
    record = await info.context.swapi.fetch_by_url(url)
    if record is None:
        logger.debug(f"Related {tag.value} record at {url} not found")
        return None
    return info.context.registry.get(tag).graphql_type.from_record(record)
