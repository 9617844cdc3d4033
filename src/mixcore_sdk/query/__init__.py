"""Query construction: filters, sorting, pagination and payload serialization."""

from __future__ import annotations

from .builder import QueryBuilder
from .filters import Filter, FilterFactory, FilterValue, Sort, coerce_operator
from .operators import CompareOperator, Conjunction, SearchMethod, SortDirection

__all__ = [
    # Builder
    "QueryBuilder",
    # Records
    "Filter",
    "FilterFactory",
    "FilterValue",
    "Sort",
    "coerce_operator",
    # Operators
    "CompareOperator",
    "Conjunction",
    "SearchMethod",
    "SortDirection",
]
