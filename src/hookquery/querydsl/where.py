"""Where-clause inputs and their normalization.

`where()` accepts three shapes, each of which has an explicit tagged form:

- `FieldEquals(field, value)`            -- `where("age", 18)`
- `FieldCompare(field, operator, value)` -- `where("age", ">=", 18)`
- `FieldMap(mapping)`                    -- `where({"age": 18, "score": [">", 5]})`

`normalize_where_input` resolves any of them into a list of `Clause` values.
"""

from collections.abc import Mapping
from typing import Any, List, NamedTuple, Union

from ..constants import Combinator
from .clause import Clause

__all__ = (
    "MISSING",
    "FieldEquals",
    "FieldCompare",
    "FieldMap",
    "WhereInput",
    "to_where_input",
    "normalize_where_input",
)

EQUALS = "="


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class FieldEquals(NamedTuple):
    field: str
    value: Any


class FieldCompare(NamedTuple):
    field: str
    operator: str
    value: Any


class FieldMap(NamedTuple):
    mapping: Mapping


WhereInput = Union[FieldEquals, FieldCompare, FieldMap]


def to_where_input(field_or_map: Any, operation: Any = MISSING, value: Any = MISSING) -> WhereInput:
    """Tag the positional arguments of `where()`.

    When `value` is omitted, `operation` holds the value and the operator is `=`.
    """
    if isinstance(field_or_map, (FieldEquals, FieldCompare, FieldMap)):
        return field_or_map
    if isinstance(field_or_map, Mapping):
        return FieldMap(field_or_map)
    if operation is MISSING:
        raise TypeError(f"where() on field {field_or_map!r} requires a value")
    if value is MISSING:
        return FieldEquals(field_or_map, operation)
    return FieldCompare(field_or_map, operation, value)


def _map_entry(field: str, entry: Any) -> FieldCompare:
    # A list/tuple entry is an [operator, value] pair
    if isinstance(entry, (list, tuple)):
        if len(entry) != 2:
            raise TypeError(f"where() entry for field {field!r} must be an [operator, value] pair, got {entry!r}")
        operator, value = entry
        return FieldCompare(field, operator, value)
    return FieldCompare(field, EQUALS, entry)


def normalize_where_input(where: WhereInput, combinator: str = Combinator.AND) -> List[Clause]:
    """Resolve a tagged where input into clauses, in insertion order.

    Operators and combinators are lower-cased. Operators are not validated.
    """
    combinator = combinator.lower()
    if isinstance(where, FieldMap):
        parts = [_map_entry(field, entry) for field, entry in where.mapping.items()]
    elif isinstance(where, FieldEquals):
        parts = [FieldCompare(where.field, EQUALS, where.value)]
    elif isinstance(where, FieldCompare):
        parts = [where]
    else:
        raise TypeError(f"where input must be FieldEquals, FieldCompare or FieldMap, got {type(where).__name__}")
    return [Clause(p.field, str(p.operator).lower(), p.value, combinator) for p in parts]
