"""Pydantic schemas for compiled queries and option payloads."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Aggregation(BaseModel):
    """Aggregation directive (`count`, `max`, `min`, `avg`, `sum`)."""

    method: str = Field(..., description="Aggregation method.")
    field: str = Field(..., description="Aggregated field, `*` for count.")


class Operation(BaseModel):
    """Atomic field operation (`increment`, `decrement`)."""

    method: str = Field(..., description="Operation method.")
    field: str = Field(..., description="Target field.")
    value: Any = Field(None, description="Operand.")


class QueryDescriptor(BaseModel):
    """Immutable wire-format representation of a compiled query.

    Field names are the short keys understood by the remote service; `with`
    is a Python keyword and is exposed as `with_`. Scalars are kept as given.
    Top-level keys that are unset or `None` are omitted from `to_wire()`, so
    an empty builder compiles to `{}`; nested payloads are dumped in full.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    limit: Any = Field(None, description="Maximum number of rows.")
    offset: Any = Field(None, description="Rows to skip.")
    remember: Any = Field(None, description="Cache TTL hint in minutes, forwarded as given.")
    q: Optional[List[List[Any]]] = Field(None, description="Clauses as [field, operator, value, combinator].")
    s: Optional[List[List[Any]]] = Field(None, description="Ordering as [field, direction].")
    g: Optional[List[str]] = Field(None, description="Group-by fields.")
    p: Any = Field(None, description="Page size.")
    f: Optional[int] = Field(None, description="First-row flag.")
    aggr: Optional[Aggregation] = Field(None, description="Aggregation spec.")
    op: Optional[Operation] = Field(None, description="Operation spec.")
    data: Optional[Any] = Field(None, description="Payload for bulk update / first_or_create.")
    with_: Optional[List[str]] = Field(None, alias="with", description="Relations to eager load.")
    select: Optional[List[str]] = Field(None, description="Projection.")
    distinct: Optional[bool] = Field(None, description="Distinct flag.")

    def to_wire(self) -> Dict[str, Any]:
        """Return the plain mapping sent to the transport."""
        present = {name for name in self.model_fields_set if getattr(self, name) is not None}
        return self.model_dump(by_alias=True, include=present)

    @property
    def is_empty(self) -> bool:
        return not self.to_wire()
