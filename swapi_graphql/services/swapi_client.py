import asyncio
import logging
from typing import Any, NamedTuple
from urllib.parse import quote, urlparse

import httpx

from swapi_graphql.core.exceptions import SwapiClientError

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class FetchResult(NamedTuple):
    """Records returned for a list request plus the catalog's reported total."""

    objects: list[Record]
    total_count: int


def local_id_from_url(url: str) -> str:
    """Extracts the type-local ID from a catalog URL such as ``.../people/4/``."""
    segments = [segment for segment in urlparse(url).path.split("/") if segment]
    if not segments:
        raise ValueError(f"No ID in URL: {url!r}")
    return segments[-1]


class SwapiClient:
    """Async client for the SWAPI-style REST catalog."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def aclose(self) -> None:
        await self._client.aclose()

    def resource_url(self, resource: str, local_id: str | int | None = None) -> str:
        url = f"{self.base_url}/{resource}/"
        if local_id is not None:
            # Encoded as a single path segment
            url = f"{url}{quote(str(local_id), safe='')}/"
        return url

    async def _aget_json(
        self, url: str, params: dict[str, Any] | None = None
    ) -> Record | None:
        """GETs a JSON document; a 404 yields None."""
        logger.debug(f"GET {url} params={params}")
        try:
            response = await self._client.get(url, params=params)
        except httpx.RequestError as e:
            logger.exception(f"HTTP request to SWAPI failed: {e}")
            raise SwapiClientError(f"Failed to communicate with SWAPI: {e}") from e

        if response.status_code == 404:
            logger.debug(f"SWAPI returned 404 for {url}")
            return None

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP error from SWAPI: {e.request.url!r} - {e.response.status_code} {e.response.reason_phrase}"
            )
            raise SwapiClientError(
                f"SWAPI request failed: {e.response.status_code} {e.response.reason_phrase}",
                status_code=e.response.status_code,
            ) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"SWAPI returned a non-JSON body for {url}")
            raise SwapiClientError(
                "Invalid response from SWAPI (not JSON).",
                status_code=response.status_code,
            ) from e

    async def _afetch_pages(
        self, url: str, params: dict[str, Any] | None = None
    ) -> FetchResult:
        """Follows ``next`` links and concatenates every page's ``results``."""
        page = await self._aget_json(url, params=params)
        if page is None:
            raise SwapiClientError(f"Resource not found: {url}", status_code=404)

        total_count = page.get("count")
        objects: list[Record] = list(page.get("results") or [])
        next_url = page.get("next")
        while next_url:
            # next links already carry the query string
            page = await self._aget_json(next_url)
            if page is None:
                raise SwapiClientError(f"Page vanished: {next_url}", status_code=404)
            objects.extend(page.get("results") or [])
            next_url = page.get("next")

        if total_count is None:
            total_count = len(objects)
        logger.debug(
            f"Fetched {len(objects)} of {total_count} records from {url}",
            extra={"props": {"url": url, "params": params}},
        )
        return FetchResult(objects=objects, total_count=total_count)

    async def fetch_by_type_and_id(self, resource: str, local_id: str | int) -> Record | None:
        return await self._aget_json(self.resource_url(resource, local_id))

    async def fetch_all_by_type(self, resource: str) -> FetchResult:
        return await self._afetch_pages(self.resource_url(resource))

    async def fetch_by_type_and_query(self, resource: str, query: str) -> FetchResult:
        return await self._afetch_pages(
            self.resource_url(resource), params={"search": query}
        )

    async def fetch_by_url(self, url: str) -> Record | None:
        return await self._aget_json(url)

    async def fetch_many_by_urls(self, urls: list[str]) -> list[Record | None]:
        """Fetches records concurrently; results line up with ``urls``."""
        return list(await asyncio.gather(*(self.fetch_by_url(url) for url in urls)))
