import re
from typing import Any

import strawberry

# Values the catalog uses where a measurement is not known
MISSING_VALUES = {"", "unknown", "n/a", "none", "indefinite"}

_LEADING_NUMBER = re.compile(r"^\s*-?\d+(\.\d+)?")

TOTAL_COUNT_DESCRIPTION = """A count of the total number of objects in this connection, ignoring pagination.
This allows a client to fetch the first five objects by passing "5" as the
argument to "first", then fetch the total count so it could display "5 of 83",
for example."""

NODE_LIST_DESCRIPTION = """A list of all of the objects returned in the connection. This is a convenience
field provided for quickly exploring the API; rather than querying for
"{ edges { node } }" when no edge data is needed, this field can be be used
instead. Note that when clients like Relay need to fetch the "cursor" field on
the edge to enable efficient pagination, this shortcut cannot be used, and the
full "{ edges { node } }" version should be used instead."""


@strawberry.type(description="Information about pagination in a connection.")
class PageInfo:
    has_next_page: bool = strawberry.field(
        description="When paginating forwards, are there more items?"
    )
    has_previous_page: bool = strawberry.field(
        description="When paginating backwards, are there more items?"
    )
    start_cursor: str | None = strawberry.field(
        default=None, description="When paginating backwards, the cursor to continue."
    )
    end_cursor: str | None = strawberry.field(
        default=None, description="When paginating forwards, the cursor to continue."
    )


def to_float(value: Any) -> float | None:
    """Reads a catalog measurement like ``"1,000"`` or ``"1000km"`` as a number."""
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).replace(",", "").strip()
    if text.lower() in MISSING_VALUES:
        return None
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None
    return float(match.group(0))


def to_int(value: Any) -> int | None:
    number = to_float(value)
    return None if number is None else int(number)


def to_list(value: Any) -> list[str] | None:
    """Splits a comma-separated catalog string (``"arid, temperate"``)."""
    if value is None:
        return None
    if isinstance(value, list):
        return [str(item).strip() for item in value]
    text = str(value).strip()
    if text.lower() in MISSING_VALUES:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]
