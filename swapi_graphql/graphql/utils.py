import base64
import binascii
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from swapi_graphql.core.exceptions import InvalidArgumentError

T = TypeVar("T")

CURSOR_PREFIX = "arrayconnection:"


def offset_to_cursor(offset: int) -> str:
    """Encodes a zero-based position into an opaque cursor string."""
    return base64.b64encode(f"{CURSOR_PREFIX}{offset}".encode("utf-8")).decode("utf-8")


def cursor_to_offset(cursor: str | None) -> int | None:
    """Decodes a cursor back into its position.

    Returns
    -------
        The offset, or None if the cursor is absent or malformed.

    """
    if not cursor:
        return None
    try:
        decoded = base64.b64decode(cursor.encode("utf-8"), validate=True).decode("utf-8")
    except (ValueError, TypeError, binascii.Error):
        return None
    if not decoded.startswith(CURSOR_PREFIX):
        return None
    try:
        return int(decoded[len(CURSOR_PREFIX):])
    except ValueError:
        return None


@dataclass(frozen=True)
class ConnectionArgs:
    first: int | None = None
    after: str | None = None
    last: int | None = None
    before: str | None = None


@dataclass(frozen=True)
class SliceEdge(Generic[T]):
    node: T
    cursor: str


@dataclass(frozen=True)
class ConnectionSlice(Generic[T]):
    """A page of an in-memory list, ready to be wrapped in a GraphQL connection."""

    edges: list[SliceEdge[T]]
    has_next_page: bool
    has_previous_page: bool
    total_count: int | None

    @property
    def start_cursor(self) -> str | None:
        return self.edges[0].cursor if self.edges else None

    @property
    def end_cursor(self) -> str | None:
        return self.edges[-1].cursor if self.edges else None

    @property
    def nodes(self) -> list[T]:
        return [edge.node for edge in self.edges]

    def with_nodes(self, nodes: Sequence[Any]) -> "ConnectionSlice":
        """Same page with each edge's node swapped for the matching entry of ``nodes``.

        Edges whose replacement is None are dropped; the rest keep their cursors.
        """
        if len(nodes) != len(self.edges):
            raise ValueError("nodes must line up with edges")
        return ConnectionSlice(
            edges=[
                SliceEdge(node=node, cursor=edge.cursor)
                for edge, node in zip(self.edges, nodes)
                if node is not None
            ],
            has_next_page=self.has_next_page,
            has_previous_page=self.has_previous_page,
            total_count=self.total_count,
        )


def connection_from_list(
    records: Sequence[T],
    args: ConnectionArgs | None = None,
    total_count: int | None = None,
) -> ConnectionSlice[T]:
    """Slices ``records`` Relay-style.

    ``after``/``before`` bound the window (exclusive), then ``first`` keeps the
    head of it and ``last`` keeps the tail of what remains. Cursors encode each
    record's absolute position in ``records``. Malformed cursors are ignored.
    ``total_count`` is passed through untouched and defaults to ``len(records)``.
    """
    args = args or ConnectionArgs()
    if args.first is not None and args.first < 0:
        raise InvalidArgumentError('Argument "first" must be a non-negative integer', "first")
    if args.last is not None and args.last < 0:
        raise InvalidArgumentError('Argument "last" must be a non-negative integer', "last")

    length = len(records)
    start, end = 0, length

    after_offset = cursor_to_offset(args.after)
    if after_offset is not None:
        start = min(max(after_offset + 1, 0), length)
    before_offset = cursor_to_offset(args.before)
    if before_offset is not None:
        end = max(min(before_offset, length), start)

    if args.first is not None:
        end = min(end, start + args.first)
    if args.last is not None:
        start = max(start, end - args.last)

    edges = [
        SliceEdge(node=records[offset], cursor=offset_to_cursor(offset))
        for offset in range(start, end)
    ]
    return ConnectionSlice(
        edges=edges,
        has_next_page=end < length,
        has_previous_page=start > 0,
        total_count=length if total_count is None else total_count,
    )
