"""GraphQL error formatting, masking and logging.

Errors leave the server in three shapes:

- ``USER_NOT_EXISTS`` errors get a human-readable message built from their
  ``userId`` extension ("User with ID 7 not exists").
- Other user-facing errors (validation, not found, depth limit, malformed
  documents) pass through with a ``code`` extension.
- Internal errors carry ``extensions.debug`` outside production and are
  replaced by a generic ``INTERNAL_ERROR`` in production.

Usage:
    # Logging happens once per error, from the schema hook:
    class DemoSchema(strawberry.Schema):
        def process_errors(self, errors, execution_context=None):
            for error in errors:
                log_error(error, execution_context)

    # Formatting happens when the HTTP response is built:
    response["errors"] = process_graphql_errors(result.errors)
"""

from __future__ import annotations

from datetime import UTC, datetime
import logging
import traceback
from typing import TYPE_CHECKING, Any

from graphql import GraphQLError, GraphQLFormattedError

from demo_service.core.exceptions import AppException, NotFoundException
from demo_service.core.settings import get_app_settings

if TYPE_CHECKING:
    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)

__all__ = [
    "ErrorCategory",
    "UserNotExistsError",
    "format_error",
    "format_validation_error",
    "is_user_facing_error",
    "log_error",
    "mask_internal_error",
    "process_graphql_errors",
]


class ErrorCategory:
    """Error codes placed in ``extensions.code``."""

    USER_NOT_EXISTS = "USER_NOT_EXISTS"
    VALIDATION = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    GRAPHQL_VALIDATION = "GRAPHQL_VALIDATION_FAILED"
    INTERNAL = "INTERNAL_ERROR"


USER_FACING_CODES = frozenset(
    {
        ErrorCategory.USER_NOT_EXISTS,
        ErrorCategory.VALIDATION,
        ErrorCategory.NOT_FOUND,
    }
)


class UserNotExistsError(GraphQLError):
    """Raised by resolvers when a requested user id resolves to nothing."""

    def __init__(self, user_id: str | int) -> None:
        super().__init__(
            f"User {user_id} does not exist",
            extensions={"code": ErrorCategory.USER_NOT_EXISTS, "userId": str(user_id)},
        )


def process_graphql_errors(
    errors: list[GraphQLError],
    *,
    is_production: bool | None = None,
) -> list[GraphQLFormattedError]:
    """Format execution errors for the client.

    Args:
        errors: Errors collected during execution.
        is_production: Override for the environment check (defaults to
            ``APP_ENVIRONMENT == "production"``).

    Returns:
        Formatted errors safe to return to the client.
    """
    if is_production is None:
        is_production = get_app_settings().is_production

    processed: list[GraphQLFormattedError] = []
    for error in errors:
        if is_user_facing_error(error):
            processed.append(format_error(_with_code(error)))
        elif is_production:
            processed.append(mask_internal_error(error))
        else:
            formatted = _with_code(error)
            if error.original_error is not None:
                formatted["extensions"]["debug"] = {
                    "exception_type": type(error.original_error).__name__,
                    "exception_message": str(error.original_error),
                }
            processed.append(formatted)
    return processed


def format_error(formatted: GraphQLFormattedError) -> GraphQLFormattedError:
    """Rewrite error messages that have a friendlier client-side form."""
    extensions = formatted.get("extensions") or {}
    if extensions.get("code") == ErrorCategory.USER_NOT_EXISTS:
        return {
            **formatted,
            "message": f"User with ID {extensions.get('userId')} not exists",
        }
    return formatted


def is_user_facing_error(error: GraphQLError) -> bool:
    """Determine if an error should be shown to the client as-is.

    User-facing errors are the ones a client can act on: unknown ids,
    invalid input, missing resources, and errors raised by GraphQL itself
    while parsing or validating the document (those have no original error).
    """
    code = (error.extensions or {}).get("code")
    if code in USER_FACING_CODES:
        return True

    original = error.original_error
    if original is None:
        return True
    if isinstance(original, GraphQLError):
        return True
    return isinstance(original, AppException) and original.status_code < 500


def mask_internal_error(error: GraphQLError) -> GraphQLFormattedError:
    """Replace internal error details with a generic message.

    Location and path are preserved so the failing field stays identifiable.
    """
    masked: dict[str, Any] = {
        "message": "An internal error occurred. Please try again later.",
        "extensions": {
            "code": ErrorCategory.INTERNAL,
            "timestamp": datetime.now(UTC).isoformat(),
        },
    }
    if error.locations:
        masked["locations"] = [location.formatted for location in error.locations]
    if error.path is not None:
        masked["path"] = error.path
    return masked  # type: ignore[return-value]


def log_error(error: GraphQLError, execution_context: ExecutionContext | None = None) -> None:
    """Log an execution error with full details for server-side debugging."""
    log_context: dict[str, Any] = {
        "error_message": error.message,
        "error_path": error.path,
        "error_code": (error.extensions or {}).get("code"),
    }

    if execution_context is not None:
        if execution_context.operation_name:
            log_context["operation_name"] = execution_context.operation_name
        correlation_id = getattr(execution_context.context, "correlation_id", None)
        if correlation_id:
            log_context["correlation_id"] = correlation_id

    user_facing = is_user_facing_error(error)
    original = error.original_error
    if original is not None:
        log_context["exception_type"] = type(original).__name__
        if not user_facing:
            log_context["stack_trace"] = "".join(
                traceback.format_exception(type(original), original, original.__traceback__)
            )

    if user_facing:
        logger.info("GraphQL user-facing error", extra=log_context)
    else:
        logger.error("GraphQL internal error", extra=log_context)


def format_validation_error(message: str, field: str | None = None) -> GraphQLError:
    """Create a validation error for invalid resolver input.

    Example:
        if input.age < 0:
            raise format_validation_error("Age cannot be negative", field="age")
    """
    extensions: dict[str, Any] = {"code": ErrorCategory.VALIDATION}
    if field:
        extensions["field"] = field
    return GraphQLError(message, extensions=extensions)


def _with_code(error: GraphQLError) -> dict[str, Any]:
    """Return ``error.formatted`` with an ``extensions.code`` filled in."""
    formatted: dict[str, Any] = dict(error.formatted)
    extensions = dict(formatted.get("extensions") or {})

    if "code" not in extensions:
        original = error.original_error
        if isinstance(original, NotFoundException):
            extensions["code"] = ErrorCategory.NOT_FOUND
            extensions.update(original.extra)
        elif isinstance(original, AppException) and original.status_code < 500:
            extensions["code"] = ErrorCategory.VALIDATION
            extensions.update(original.extra)
        elif original is None or isinstance(original, GraphQLError):
            extensions["code"] = ErrorCategory.GRAPHQL_VALIDATION
        else:
            extensions["code"] = ErrorCategory.INTERNAL

    formatted["extensions"] = extensions
    return formatted
