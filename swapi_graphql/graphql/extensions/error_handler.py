import logging
from typing import Any

from graphql import GraphQLError
from strawberry.extensions import SchemaExtension

from swapi_graphql.core.exceptions import (
    DecodeError,
    InvalidArgumentError,
    MissingArgumentError,
    SwapiClientError,
    UnknownTypeError,
)

logger = logging.getLogger(__name__)

# Exception type -> extensions.code, checked in order
ERROR_CODES: list[tuple[type[Exception], str]] = [
    (DecodeError, "INVALID_GLOBAL_ID"),
    (UnknownTypeError, "UNKNOWN_TYPE"),
    (InvalidArgumentError, "BAD_USER_INPUT"),
    (MissingArgumentError, "MISSING_ARGUMENT"),
    (SwapiClientError, "UPSTREAM_ERROR"),
]

GENERIC_MESSAGE = "An unexpected error occurred. Please contact support if the issue persists."


def format_error(error: GraphQLError) -> GraphQLError:
    """Rewrites one execution error into its client-facing form."""
    original_error = error.original_error
    user_message = GENERIC_MESSAGE
    extensions: dict[str, Any] = {"code": "INTERNAL_SERVER_ERROR"}

    if original_error is None:
        # Validation / parse errors raised by graphql-core itself
        user_message = error.message
        extensions = error.extensions or {"code": "GRAPHQL_VALIDATION_FAILED"}
    elif isinstance(original_error, GraphQLError):
        user_message = original_error.message
        extensions = original_error.extensions or extensions
    else:
        for exc_type, code in ERROR_CODES:
            if isinstance(original_error, exc_type):
                user_message = str(original_error)
                extensions = {"code": code}
                break
        if isinstance(original_error, InvalidArgumentError) and original_error.argument:
            extensions["argument"] = original_error.argument
        if isinstance(original_error, SwapiClientError) and original_error.status_code:
            extensions["status"] = original_error.status_code

    return GraphQLError(
        message=user_message,
        nodes=error.nodes,
        source=error.source,
        positions=error.positions,
        path=error.path,
        original_error=None,  # Don't expose original error details to client
        extensions=extensions,
    )


class CustomErrorHandler(SchemaExtension):
    def on_operation(self):
        """Handles errors once the operation has produced a result."""
        yield  # Let the operation run first

        execution_context = self.execution_context
        result = execution_context.result if execution_context else None
        if result is None or not getattr(result, "errors", None):
            return

        processed_errors: list[GraphQLError] = []
        for error in result.errors:
            original_error = error.original_error
            log_props = {
                "path": error.path,
                "operation_name": execution_context.operation_name,
                "variables": execution_context.variables,
            }
            if original_error is None or isinstance(
                original_error, tuple(exc_type for exc_type, _ in ERROR_CODES)
            ):
                logger.info(f"GraphQL Error: {error.message}", extra={"props": log_props})
            else:
                logger.error(
                    f"GraphQL Error: {error.message}",
                    exc_info=original_error,
                    extra={"props": log_props},
                )
            processed_errors.append(format_error(error))

        # Replace original errors with processed ones
        result.errors = processed_errors
