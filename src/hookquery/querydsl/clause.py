"""Value types stored by the filter accumulator."""

from typing import Any, NamedTuple

from ..constants import Combinator

__all__ = ("Clause", "OrderSpec")


class Clause(NamedTuple):
    """One filter condition. Serialized as `[field, operator, value, combinator]`."""

    field: str
    operator: str
    value: Any
    combinator: str = Combinator.AND

    def to_wire(self) -> list:
        return [self.field, self.operator, self.value, self.combinator]


class OrderSpec(NamedTuple):
    """One sort key. Serialized as `[field, direction]`."""

    field: str
    direction: Any

    def to_wire(self) -> list:
        return [self.field, self.direction]
