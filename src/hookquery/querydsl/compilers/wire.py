"""Wire-format compiler.

Transforms accumulator state into the `QueryDescriptor` understood by the
remote collection service:

- `limit`, `offset`, `remember` when set
- `q`: clauses as `[field, operator, value, "and"|"or"]`
- `s`: ordering as `[field, direction]`
- `g`: group-by fields
- options under their short keys (`p`, `f`, `aggr`, `op`, `data`, `with`,
  `select`, `distinct`)

Key names and tuple shapes must not change; the service parses them as-is.
"""

from typing import Any, Dict

from hookquery.constants import OPTION_SHORTNAMES
from hookquery.schema import QueryDescriptor

from ..accumulator import FilterAccumulator
from .base import BaseCompiler

__all__ = (
    "WireQueryCompiler",
    "wire_compiler",
)


def _is_set(value: Any) -> bool:
    """Options are projected unless unset, `False` or an empty sequence."""
    if value is None or value is False:
        return False
    if isinstance(value, (list, tuple)) and not value:
        return False
    return True


class WireQueryCompiler(BaseCompiler):
    """Compile a `FilterAccumulator` into a `QueryDescriptor` and reset it."""

    def to_fields(self, accumulator: FilterAccumulator) -> Dict[str, Any]:
        """Project accumulator state onto descriptor keys without resetting."""
        fields: Dict[str, Any] = {}

        # apply limit / offset and remember
        if accumulator.limit is not None:
            fields["limit"] = accumulator.limit
        if accumulator.offset is not None:
            fields["offset"] = accumulator.offset
        if accumulator.remember is not None:
            fields["remember"] = accumulator.remember

        if accumulator.clauses:
            fields["q"] = [clause.to_wire() for clause in accumulator.clauses]
        if accumulator.ordering:
            fields["s"] = [order.to_wire() for order in accumulator.ordering]
        if accumulator.group:
            fields["g"] = list(accumulator.group)

        for kind, shortname in OPTION_SHORTNAMES.items():
            value = accumulator.options.get(kind)
            if _is_set(value):
                fields[shortname] = list(value) if isinstance(value, tuple) else value
        return fields

    def compile(self, accumulator: FilterAccumulator) -> QueryDescriptor:
        try:
            return QueryDescriptor.model_validate(self.to_fields(accumulator))
        finally:
            # clear state for future calls, even when the descriptor is rejected
            accumulator.reset()


wire_compiler = WireQueryCompiler()
