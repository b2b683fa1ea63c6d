"""Per-builder mutable query state.

`FilterAccumulator` collects clauses, ordering, grouping and option directives
across chained modifier calls. It performs no I/O and no validation; a
compiler turns its state into a `QueryDescriptor` and resets it.
"""

from typing import Any, Dict, Iterable, List, Optional

from ..constants import Combinator
from ..utils import normalize_direction
from .clause import Clause, OrderSpec
from .where import WhereInput, normalize_where_input

__all__ = ("FilterAccumulator",)


class FilterAccumulator:
    """Mutable state shared by every modifier of one collection builder.

    Attributes:
        clauses: Filter conditions, combined left-to-right
        ordering: Sort keys, cumulative
        group: Group-by fields, replaced on each call
        options: Option kind -> payload (see `OptionKind`)
        limit, offset, remember: Optional scalars, `None` when unset
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> "FilterAccumulator":
        """Clear all state to defaults."""
        self.clauses: List[Clause] = []
        self.ordering: List[OrderSpec] = []
        self.group: List[str] = []
        self.options: Dict[str, Any] = {}
        self.limit: Optional[int] = None
        self.offset: Optional[int] = None
        self.remember: Optional[float] = None
        return self

    def add_where(self, where: WhereInput, combinator: str = Combinator.AND) -> List[Clause]:
        clauses = normalize_where_input(where, combinator)
        self.clauses.extend(clauses)
        return clauses

    def add_order(self, field: str, direction: Any = None) -> OrderSpec:
        spec = OrderSpec(field, normalize_direction(direction))
        self.ordering.append(spec)
        return spec

    def set_group(self, fields: Iterable[str]) -> None:
        self.group = list(fields)

    def set_option(self, kind: str, payload: Any) -> None:
        self.options[kind] = payload

    def get_option(self, kind: str, default: Any = None) -> Any:
        return self.options.get(kind, default)

    @property
    def is_empty(self) -> bool:
        return not (
            self.clauses
            or self.ordering
            or self.group
            or self.options
            or self.limit is not None
            or self.offset is not None
            or self.remember is not None
        )

    def __repr__(self) -> str:
        return (
            f"<FilterAccumulator clauses={self.clauses!r} ordering={self.ordering!r} "
            f"group={self.group!r} options={self.options!r} limit={self.limit!r} "
            f"offset={self.offset!r} remember={self.remember!r}>"
        )
