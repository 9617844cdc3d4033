"""
Filter and sort records plus the ``FilterFactory`` that builds them.

A :class:`Filter` is one predicate ``(field, operator, value, required)``
applied to a dataset query.  Records are immutable; the builder keeps
them in an ordered list and the backend evaluates that list as a single
expression joined by the query's conjunction.

Example::

    FilterFactory.like("title", "news")
    # → Filter(field_name="title", value="news", compare_operator=LIKE)

    FilterFactory.greater_than("age", 18, is_equals=True)
    # → Filter(field_name="age", value=18, compare_operator=GREATER_THAN_OR_EQUAL)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Any, Literal

from ..exceptions import InvalidFilterError, OperatorNotFoundError
from .operators import CompareOperator, SortDirection

if TYPE_CHECKING:
    from collections.abc import Sequence

FilterValue = str | int | float | bool | date | None

# Pre-compute valid operator values for validation
_VALID_OPERATORS: dict[str, CompareOperator] = {m.value: m for m in CompareOperator}


def coerce_operator(
    op: CompareOperator | str, field_name: str | None = None
) -> CompareOperator:
    """Return *op* as a :class:`CompareOperator`, failing fast on unknown names.

    *field_name* is only used to make the error message point at the filter.
    """
    if isinstance(op, CompareOperator):
        return op
    try:
        return _VALID_OPERATORS[op]
    except KeyError:
        raise OperatorNotFoundError(
            str(op), list(_VALID_OPERATORS), field_name=field_name
        ) from None


def serialize_value(value: Any) -> Any:
    """Render dates as ISO-8601 strings; echo everything else unchanged."""
    if isinstance(value, date):
        return value.isoformat()
    return value


@dataclass(frozen=True)
class Filter:
    """
    One predicate against a named field.

    Attributes:
        field_name: Column identifier (wire name ``fieldName``).
        value: Comparison value.  ``None`` is legal and left to the backend.
        compare_operator: Comparison semantics.  Strings are coerced to
            :class:`CompareOperator`; unknown names raise
            :class:`OperatorNotFoundError`.
        is_required: Marks a mandatory predicate.  Optional predicates are
            applied at the backend's discretion (e.g. faceted search).
        display_name: Label shown by filter UIs.
        options: Selectable values shown by filter UIs.
        type: UI hint, ``"select"`` or ``"date"``.
        draft: Whether the filter is still being edited in a UI.
    """

    field_name: str
    value: FilterValue
    compare_operator: CompareOperator
    is_required: bool = False
    display_name: str | None = None
    options: list[str] | None = None
    type: Literal["select", "date"] | None = None
    draft: bool | None = None

    def __post_init__(self) -> None:
        op = coerce_operator(self.compare_operator, self.field_name)
        object.__setattr__(self, "compare_operator", op)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "fieldName": self.field_name,
            "value": serialize_value(self.value),
            "compareOperator": self.compare_operator.value,
            "isRequired": self.is_required,
        }
        if self.display_name is not None:
            result["displayName"] = self.display_name
        if self.options is not None:
            result["options"] = list(self.options)
        if self.type is not None:
            result["type"] = self.type
        if self.draft is not None:
            result["draft"] = self.draft
        return result


@dataclass(frozen=True)
class Sort:
    """A sort entry for the multi-sort ``sorts`` list."""

    column_name: str
    direction: SortDirection = SortDirection.ASC
    display_name: str | None = None
    temporary: bool | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", SortDirection(self.direction))

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "colSysName": self.column_name,
            "direction": self.direction.value,
        }
        if self.display_name is not None:
            result["displayName"] = self.display_name
        if self.temporary is not None:
            result["temporary"] = self.temporary
        return result


class FilterFactory:
    """
    Stateless constructors for :class:`Filter` records.

    Every constructor is deterministic and side-effect free.  None of
    them inspects ``value``; only the field name is checked.
    """

    @staticmethod
    def like(
        field_name: str, value: FilterValue, is_required: bool = False
    ) -> Filter:
        """Case-sensitive pattern match."""
        return _make(field_name, value, CompareOperator.LIKE, is_required)

    @staticmethod
    def equal(
        field_name: str, value: FilterValue, is_required: bool = False
    ) -> Filter:
        """Exact equality."""
        return _make(field_name, value, CompareOperator.EQUAL, is_required)

    @staticmethod
    def search(
        field_name: str, value: FilterValue, is_required: bool = False
    ) -> Filter:
        """Case-insensitive pattern match (``ILike``)."""
        return _make(field_name, value, CompareOperator.ILIKE, is_required)

    @staticmethod
    def greater_than(
        field_name: str,
        value: FilterValue,
        is_required: bool = False,
        is_equals: bool = False,
    ) -> Filter:
        """``>`` or, with ``is_equals``, ``>=``."""
        op = (
            CompareOperator.GREATER_THAN_OR_EQUAL
            if is_equals
            else CompareOperator.GREATER_THAN
        )
        return _make(field_name, value, op, is_required)

    @staticmethod
    def less_than(
        field_name: str,
        value: FilterValue,
        is_required: bool = False,
        is_equals: bool = False,
    ) -> Filter:
        """``<`` or, with ``is_equals``, ``<=``."""
        op = (
            CompareOperator.LESS_THAN_OR_EQUAL
            if is_equals
            else CompareOperator.LESS_THAN
        )
        return _make(field_name, value, op, is_required)

    @staticmethod
    def includes(
        field_name: str,
        values: Sequence[str | int | float],
        is_required: bool = False,
    ) -> Filter:
        """
        Set membership.

        Values are joined with ``","`` without escaping, so an element that
        itself contains a comma is split by the backend.  Integral floats are
        rendered without a fractional part (``1.0`` becomes ``"1"``).  An
        empty sequence produces ``""``, which the backend treats as "no rows
        match".
        """
        joined = ",".join(_render_member(v) for v in values)
        return _make(field_name, joined, CompareOperator.IN_RANGE, is_required)

    @staticmethod
    def build(
        field_name: str,
        value: FilterValue,
        compare_operator: CompareOperator | str,
        is_required: bool = False,
    ) -> Filter:
        """Generic constructor for operators without a dedicated helper."""
        op = coerce_operator(compare_operator, field_name)
        return _make(field_name, value, op, is_required)


def _render_member(value: str | int | float) -> str:
    # integral floats without the trailing ".0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _make(
    field_name: str,
    value: FilterValue,
    op: CompareOperator,
    is_required: bool,
) -> Filter:
    if not field_name:
        raise InvalidFilterError(
            f"Filter field name must be a non-empty string, got {field_name!r}",
            field_name=field_name,
        )
    return Filter(
        field_name=field_name,
        value=value,
        compare_operator=op,
        is_required=is_required,
    )


__all__: list[str] = [
    "Filter",
    "FilterFactory",
    "FilterValue",
    "Sort",
    "coerce_operator",
    "serialize_value",
]
