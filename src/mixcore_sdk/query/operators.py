from enum import Enum


class CompareOperator(str, Enum):
    """Comparison semantics of a single filter, as named by the backend."""

    # Pattern matching
    LIKE = "Like"
    ILIKE = "ILike"

    # Equality
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"

    # Ordering
    LESS_THAN = "LessThan"
    LESS_THAN_OR_EQUAL = "LessThanOrEqual"
    GREATER_THAN = "GreaterThan"
    GREATER_THAN_OR_EQUAL = "GreaterThanOrEqual"

    # Containment
    CONTAIN = "Contain"
    NOT_CONTAIN = "NotContain"

    # Set membership (comma-joined value)
    IN_RANGE = "InRange"


class SearchMethod(str, Enum):
    """Operator used by the keyword-search path."""

    LIKE = "Like"
    IN = "In"
    IN_RANGE = "InRange"
    EQUAL = "Equal"


class SortDirection(str, Enum):
    ASC = "Asc"
    DESC = "Desc"


class Conjunction(str, Enum):
    """How the whole filter list is combined."""

    AND = "And"
    OR = "Or"
