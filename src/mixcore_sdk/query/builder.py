"""
Fluent builder for paginated, filtered and sorted dataset queries.

Example::

    query = (
        QueryBuilder()
        .default(page_size=10)
        .sort("createdDateTime", SortDirection.DESC)
        .like("title", "news")
        .between("price", 10, 100, is_required=True)
        .where_if(
            category_id,
            lambda: QueryBuilder.filters.equal("category", category_id),
        )
    )
    await client.database.get_data("products", query)

Every mutator changes the builder in place and returns it.  A builder
is not synchronized; build one per request (or ``copy()`` a template).
"""

from __future__ import annotations

import copy as _copy
from typing import TYPE_CHECKING, Any

from .filters import Filter, FilterFactory, FilterValue, Sort, serialize_value
from .operators import Conjunction, SearchMethod, SortDirection

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence


# wire name → attribute name, for seeding from a payload-shaped mapping
_WIRE_TO_ATTR: dict[str, str] = {
    "pageIndex": "page_index",
    "pageSize": "page_size",
    "orderBy": "order_by",
    "direction": "direction",
    "selectColumns": "select_columns",
    "keyword": "keyword",
    "searchColumns": "search_columns",
    "compareOperator": "compare_operator",
    "conjunction": "conjunction",
    "queries": "queries",
    "mixDatabaseName": "mix_database_name",
    "searchMethod": "search_method",
    "parentId": "parent_id",
    "guidParentId": "guid_parent_id",
    "parentName": "parent_name",
    "status": "status",
    "filters": "filters",
    "sorts": "sorts",
    "metadataQueries": "metadata_queries",
    "loadNestedData": "load_nested_data",
    "columns": "columns",
}
_ATTRS: frozenset[str] = frozenset(_WIRE_TO_ATTR.values())

# keys always present in the payload, ``None`` when unset
_CONTRACT_KEYS: tuple[str, ...] = (
    "pageIndex",
    "pageSize",
    "orderBy",
    "direction",
    "selectColumns",
    "keyword",
    "searchColumns",
    "compareOperator",
    "conjunction",
    "queries",
    "mixDatabaseName",
)


class QueryBuilder:
    """
    Mutable accumulator of pagination, sorting, selection, keyword search
    and filter state.

    Filters appended through the builder keep their insertion order and
    are combined with a single ``conjunction`` (no nested grouping).
    ``extras`` carries arbitrary additional properties that are merged
    verbatim into :meth:`to_dict`.

    Args:
        seed: Optional initial state.  Keys may be wire names
            (``pageSize``) or attribute names (``page_size``); unknown keys
            are stored in ``extras``.
    """

    filters = FilterFactory

    def __init__(self, seed: Mapping[str, Any] | None = None) -> None:
        self.page_index: int | None = 0
        self.page_size: int | None = None
        self.order_by: str | None = None
        self.direction: SortDirection | None = None
        self.select_columns: str | None = None
        self.keyword: str | None = None
        self.search_columns: str | list[str] | None = None
        self.compare_operator: SearchMethod | None = None
        self.conjunction: Conjunction = Conjunction.AND
        self.queries: list[Filter] = []
        self.mix_database_name: str | None = None

        self.search_method: SearchMethod | None = None
        self.parent_id: int | None = None
        self.guid_parent_id: str | None = None
        self.parent_name: str | None = None
        self.status: str | None = None
        self.filters_map: dict[str, Any] | None = None
        self.sorts: list[Sort] = []
        self.metadata_queries: list[Filter] = []
        self.load_nested_data: bool | None = None
        self.columns: str | None = None

        self.extras: dict[str, Any] = {}

        if seed:
            self._apply_seed(seed)

    # -- pagination ----------------------------------------------------------

    def default(self, page_size: int = 25) -> QueryBuilder:
        """Reset to the first page with *page_size* rows."""
        self.page_index = 0
        self.page_size = page_size
        return self

    def page(self, page_index: int, page_size: int) -> QueryBuilder:
        """Select a zero-based page.  Values are not range-checked."""
        self.page_index = page_index
        self.page_size = page_size
        return self

    # -- shaping -------------------------------------------------------------

    def sort(self, column: str, direction: SortDirection | str) -> QueryBuilder:
        """Set the single active sort, replacing any previous one."""
        self.order_by = column
        self.direction = SortDirection(direction)
        return self

    def add_sort(
        self,
        column: str,
        direction: SortDirection | str = SortDirection.ASC,
        *,
        display_name: str | None = None,
        temporary: bool | None = None,
    ) -> QueryBuilder:
        """Append an entry to the multi-sort ``sorts`` list."""
        self.sorts.append(
            Sort(
                column_name=column,
                direction=SortDirection(direction),
                display_name=display_name,
                temporary=temporary,
            )
        )
        return self

    def select(self, *columns: str) -> QueryBuilder:
        """Project *columns*; replaces any previous selection."""
        self.select_columns = ", ".join(columns)
        return self

    # -- filters -------------------------------------------------------------

    def where(self, filter_: Filter) -> QueryBuilder:
        """Append a prebuilt filter."""
        self.queries.append(filter_)
        return self

    def like(
        self, field_name: str, value: FilterValue, is_required: bool = False
    ) -> QueryBuilder:
        return self.where(FilterFactory.like(field_name, value, is_required))

    def equal(
        self, field_name: str, value: FilterValue, is_required: bool = False
    ) -> QueryBuilder:
        return self.where(FilterFactory.equal(field_name, value, is_required))

    def between(
        self,
        field_name: str,
        lower: FilterValue,
        upper: FilterValue,
        is_required: bool = False,
    ) -> QueryBuilder:
        """Append ``field > lower`` then ``field < upper`` (both strict)."""
        self.queries.append(FilterFactory.greater_than(field_name, lower, is_required))
        self.queries.append(FilterFactory.less_than(field_name, upper, is_required))
        return self

    def includes(
        self,
        field_name: str,
        values: Sequence[str | int | float],
        is_required: bool = False,
    ) -> QueryBuilder:
        return self.where(FilterFactory.includes(field_name, values, is_required))

    def greater_than(
        self,
        field_name: str,
        value: FilterValue,
        is_required: bool = False,
        is_equals: bool = False,
    ) -> QueryBuilder:
        return self.where(
            FilterFactory.greater_than(field_name, value, is_required, is_equals)
        )

    def less_than(
        self,
        field_name: str,
        value: FilterValue,
        is_required: bool = False,
        is_equals: bool = False,
    ) -> QueryBuilder:
        return self.where(
            FilterFactory.less_than(field_name, value, is_required, is_equals)
        )

    def search_by_text(
        self, field_name: str, value: str, is_required: bool = False
    ) -> QueryBuilder:
        """Append a case-insensitive pattern filter."""
        return self.where(FilterFactory.search(field_name, value, is_required))

    def where_if(
        self, condition: object, fn: Callable[[], Filter]
    ) -> QueryBuilder:
        """Append ``fn()`` only when *condition* is truthy; ``fn`` is not
        called otherwise."""
        if condition:
            self.queries.append(fn())
        return self

    def where_metadata(self, filter_: Filter) -> QueryBuilder:
        """Append a filter evaluated against associated metadata."""
        self.metadata_queries.append(filter_)
        return self

    def with_conjunction(self, conjunction: Conjunction | str) -> QueryBuilder:
        self.conjunction = Conjunction(conjunction)
        return self

    # -- keyword search ------------------------------------------------------

    def search_by_keyword(
        self, keyword: str, search_columns: str | list[str]
    ) -> QueryBuilder:
        """
        Use the backend's keyword search across *search_columns*.

        This path is separate from the per-field ``queries`` list: it sets
        ``keyword``/``searchColumns``, forces ``compareOperator=Like`` and
        ``conjunction=And``, and appends no filter.
        """
        self.keyword = keyword
        self.search_columns = search_columns
        self.compare_operator = SearchMethod.LIKE
        self.conjunction = Conjunction.AND
        return self

    # -- scoping -------------------------------------------------------------

    def with_parent(
        self,
        parent_id: int | None = None,
        *,
        guid_parent_id: str | None = None,
        parent_name: str | None = None,
    ) -> QueryBuilder:
        self.parent_id = parent_id
        self.guid_parent_id = guid_parent_id
        self.parent_name = parent_name
        return self

    def with_status(self, status: str) -> QueryBuilder:
        self.status = status
        return self

    def with_nested_data(self, load: bool = True) -> QueryBuilder:
        self.load_nested_data = load
        return self

    def with_extra(self, key: str, value: Any) -> QueryBuilder:
        """Record an additional property passed through to the payload."""
        self.extras[key] = value
        return self

    # -- lifecycle -----------------------------------------------------------

    def copy(self) -> QueryBuilder:
        """Return an independent deep copy of this builder."""
        return _copy.deepcopy(self)

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the JSON body expected by the backend filter endpoint."""
        result: dict[str, Any] = {
            "pageIndex": self.page_index,
            "pageSize": self.page_size,
            "orderBy": self.order_by,
            "direction": _enum_value(self.direction),
            "selectColumns": self.select_columns,
            "keyword": self.keyword,
            "searchColumns": _copy.copy(self.search_columns),
            "compareOperator": _enum_value(self.compare_operator),
            "conjunction": self.conjunction.value,
            "queries": [q.to_dict() for q in self.queries],
            "mixDatabaseName": self.mix_database_name,
        }

        optional: dict[str, Any] = {
            "searchMethod": _enum_value(self.search_method),
            "parentId": self.parent_id,
            "guidParentId": self.guid_parent_id,
            "parentName": self.parent_name,
            "status": self.status,
            "filters": (
                {k: serialize_value(v) for k, v in self.filters_map.items()}
                if self.filters_map is not None
                else None
            ),
            "loadNestedData": self.load_nested_data,
            "columns": self.columns,
        }
        result.update({k: v for k, v in optional.items() if v is not None})
        if self.sorts:
            result["sorts"] = [s.to_dict() for s in self.sorts]
        if self.metadata_queries:
            result["metadataQueries"] = [q.to_dict() for q in self.metadata_queries]

        result.update({k: serialize_value(v) for k, v in self.extras.items()})
        return result

    def __repr__(self) -> str:
        return (
            f"QueryBuilder(page_index={self.page_index!r}, "
            f"page_size={self.page_size!r}, queries={len(self.queries)}, "
            f"conjunction={self.conjunction.value!r})"
        )

    # -- internals -----------------------------------------------------------

    def _apply_seed(self, seed: Mapping[str, Any]) -> None:
        for key, value in seed.items():
            attr = _WIRE_TO_ATTR.get(key, key if key in _ATTRS else None)
            if attr is None:
                self.extras[key] = value
            elif attr == "filters":
                self.filters_map = dict(value) if value is not None else None
            elif attr in ("queries", "metadata_queries"):
                setattr(self, attr, [_coerce_filter(f) for f in value or []])
            elif attr == "sorts":
                self.sorts = [_coerce_sort(s) for s in value or []]
            elif attr == "direction":
                self.direction = SortDirection(value) if value is not None else None
            elif attr in ("compare_operator", "search_method"):
                setattr(
                    self, attr, SearchMethod(value) if value is not None else None
                )
            elif attr == "conjunction":
                self.conjunction = Conjunction(value or Conjunction.AND)
            else:
                setattr(self, attr, value)


def _enum_value(value: Any) -> Any:
    return value.value if value is not None else None


def _coerce_filter(value: Filter | Mapping[str, Any]) -> Filter:
    if isinstance(value, Filter):
        return value
    return Filter(
        field_name=value["fieldName"],
        value=value.get("value"),
        compare_operator=value["compareOperator"],
        is_required=bool(value.get("isRequired", False)),
        display_name=value.get("displayName"),
        options=value.get("options"),
        type=value.get("type"),
        draft=value.get("draft"),
    )


def _coerce_sort(value: Sort | Mapping[str, Any]) -> Sort:
    if isinstance(value, Sort):
        return value
    return Sort(
        column_name=value["colSysName"],
        direction=SortDirection(value.get("direction", SortDirection.ASC)),
        display_name=value.get("displayName"),
        temporary=value.get("temporary"),
    )
