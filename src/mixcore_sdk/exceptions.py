"""
Exception hierarchy for the Mixcore SDK.

All exceptions inherit from ``MixcoreError`` and provide ``to_dict()``
for structured logging and error reporting.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class MixcoreError(Exception):
    """Root exception for the entire SDK."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


# ── Query construction ──────────────────────────────────────────────


class QueryError(MixcoreError):
    """Base class for errors raised while building a query."""


class InvalidFilterError(QueryError):
    """A filter record could not be constructed from the given arguments."""

    def __init__(self, message: str, field_name: str | None = None) -> None:
        self.message = message
        self.field_name = field_name
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_FILTER",
            "message": self.message,
            "field": self.field_name,
        }


class OperatorNotFoundError(QueryError):
    """
    A filter named a compare operator the backend does not understand.

    Operator names are case-sensitive wire strings (``"GreaterThan"``), so
    the usual mistake is a typo or a lower-cased name; ``suggestions``
    lists the closest valid ones.  ``field_name`` is the filter that was
    being built, when known.
    """

    def __init__(
        self,
        operator: str,
        valid_operators: list[str],
        field_name: str | None = None,
    ) -> None:
        self.operator = operator
        self.field_name = field_name
        self.valid_operators = sorted(valid_operators)
        by_lower = {v.lower(): v for v in valid_operators}
        self.suggestions = [
            by_lower[m]
            for m in get_close_matches(operator.lower(), by_lower, n=3, cutoff=0.6)
        ]

        target = f" on field '{field_name}'" if field_name else ""
        message = f"Unknown compare operator '{operator}'{target}."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "field": self.field_name,
            "suggestions": self.suggestions,
            "valid_operators": self.valid_operators,
        }


# ── Transport ───────────────────────────────────────────────────────


class TransportError(MixcoreError):
    """The request never produced an HTTP response (DNS, connect, timeout)."""


class ApiError(MixcoreError):
    """
    The backend answered with a non-success status.

    ``code`` is the backend's domain error code taken from the response
    body, or ``"default"`` when the body carries none.
    """

    def __init__(
        self,
        status_code: int,
        code: str = "default",
        message: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message or f"Request failed with status {status_code}: {code}"
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "API_ERROR",
            "status_code": self.status_code,
            "code": self.code,
            "message": self.message,
        }


class AuthenticationError(ApiError):
    """The backend rejected the credentials (HTTP 401 or 403)."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(
            status_code,
            code="unauthorized" if status_code == 401 else "forbidden",
            message=message,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "AUTHENTICATION_ERROR",
            "status_code": self.status_code,
            "message": self.message,
        }


__all__: list[str] = [
    "MixcoreError",
    "QueryError",
    "InvalidFilterError",
    "OperatorNotFoundError",
    "TransportError",
    "ApiError",
    "AuthenticationError",
]
