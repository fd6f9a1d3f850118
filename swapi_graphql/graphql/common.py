import base64
import binascii

import strawberry

from swapi_graphql.core.exceptions import DecodeError, InvalidArgumentError


# --- Node Interface ---
@strawberry.interface(description="An object with an ID")
class Node:
    """An object with an ID, conforming to Relay Node interface."""

    id: strawberry.ID = strawberry.field(description="The id of the object.")


# --- Global ID Functions ---


def to_global_id(type_name: str, id: str | int) -> strawberry.ID:
    """Encodes a type name and ID into a global ID string."""
    combined = f"{type_name}:{id}"
    return strawberry.ID(base64.b64encode(combined.encode("utf-8")).decode("utf-8"))


def from_global_id(global_id: str) -> tuple[str, str]:
    """Decodes a global ID string into a type name and ID.

    Raises DecodeError unless the input decodes to a non-empty type name and a
    non-empty ID separated by the first colon.
    """
    if not global_id:
        raise DecodeError("Invalid Global ID: empty value")
    try:
        decoded_bytes = base64.b64decode(global_id.encode("utf-8"), validate=True)
        decoded_str = decoded_bytes.decode("utf-8")
    except (ValueError, TypeError, AttributeError, binascii.Error) as e:
        raise DecodeError(f"Invalid Global ID: {global_id}. Error: {e}") from e

    type_name, sep, id_str = decoded_str.partition(":")
    if not sep or not type_name or not id_str:
        raise DecodeError(f"Invalid Global ID: {global_id}")
    return type_name, id_str


def check_local_id(local_id: str, argument: str) -> str:
    """Rejects a type-local ID that is not a single catalog path segment."""
    if "/" in local_id or local_id in (".", ".."):
        raise InvalidArgumentError(f"Invalid {argument}: {local_id!r}", argument)
    return local_id
