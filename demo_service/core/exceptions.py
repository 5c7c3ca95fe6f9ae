"""Exception classes rendered as problem details on the REST surface."""

from __future__ import annotations

from typing import Any


class AppException(Exception):
    """Base application exception.

    Rendered by app/exception_handlers.py as an RFC 7807 Problem Details
    body. GraphQL resolvers raise the same classes; error_handler.py turns
    them into ``extensions.code`` entries instead.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Problem type identifier.
        title: Short summary of the problem type.
        instance: URI of this occurrence, when known.
        extra: Fields merged into the problem body (and GraphQL extensions).
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or self._default_title(status_code)
        self.instance = instance
        self.extra = extra or {}
        super().__init__(detail)

    @staticmethod
    def _default_title(status_code: int) -> str:
        titles = {
            400: "Bad Request",
            404: "Not Found",
            500: "Internal Server Error",
        }
        return titles.get(status_code, "Error")


class NotFoundException(AppException):
    """A looked-up record does not exist.

    Example:
        raise NotFoundException(
            detail="Movie 'Titanic' not found",
            type="movie-not-found",
            extra={"movieName": "Titanic"},
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "not-found",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=404,
            detail=detail,
            type=type,
            title="Not Found",
            instance=instance,
            extra=extra,
        )
