"""
Fluent query builder for a remote collection.

This module provides `Collection`, which accumulates filters, ordering,
grouping and options across chained modifier calls and turns each terminal
call into exactly one transport request.
"""

from concurrent.futures import Future
from typing import Any, Callable, List, Optional

from .abc import Transport
from .constants import COLLECTION_SEGMENT, DEFAULT_AGGREGATION_FIELD, Combinator, OptionKind, Verb
from .dispatcher import RequestDispatcher
from .exceptions import ChannelNotImplementedError
from .logger import Logger
from .pagination import Pagination
from .querydsl.accumulator import FilterAccumulator
from .querydsl.compilers.base import BaseCompiler
from .querydsl.compilers.wire import wire_compiler
from .querydsl.where import MISSING, to_where_input
from .schema import Aggregation, Operation, QueryDescriptor
from .settings import settings
from .types import Direction, ItemId, OnComplete, OnError, Payload
from .utils import attach, chain, flatten_args, validate_collection_name


class Collection:
    """Query builder bound to one remote collection.

    Modifiers (`where`, `sort`, `limit`, ...) mutate the builder's
    accumulator and return the builder itself. Terminal calls (`get`, `find`,
    `count`, `update_all`, ...) compile the accumulator into a wire descriptor,
    reset it, and hand the descriptor to the transport. The transport's
    `concurrent.futures.Future` is returned unmodified.

    The reset happens when the request is dispatched, not when it resolves:
    starting a new modifier chain on the same builder while a previous
    request is in flight is safe for that request, but its filters are no
    longer held by the builder.

    Example:
        >>> posts = Collection(transport, "posts")
        >>> posts.where("stars", ">=", 4).sort("created_at", -1).limit(10).get()

    Attributes:
        name: Validated collection name
        segments: Request path of the collection (`collection/<name>`)
        accumulator: Pending query state
    """

    def __init__(self, transport: Transport, name: str, compiler: BaseCompiler = wire_compiler) -> None:
        """Initialize a builder for collection `name`.

        Raises:
            ConstructionError: If `name` does not match `^[a-z_/0-9]+$`
        """
        self.name = validate_collection_name(name)
        self.segments = f"{COLLECTION_SEGMENT}/{self.name}"
        self.accumulator = FilterAccumulator()
        self._compiler = compiler
        self._dispatcher = RequestDispatcher(transport, Logger(RequestDispatcher.__name__, collection=self.name))
        self.logger = Logger(self.__class__.__name__, collection=self.name)

    @property
    def transport(self) -> Transport:
        return self._dispatcher.transport

    def __repr__(self) -> str:
        return f"<Collection {self.name}>"

    def _item_path(self, _id: ItemId) -> str:
        return f"{self.segments}/{_id}"

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------
    def where(
        self,
        field_or_map: Any,
        operation: Any = MISSING,
        value: Any = MISSING,
        combinator: str = Combinator.AND,
    ) -> "Collection":
        """Add one or more filter clauses.

        Accepted shapes:
            - `where("stars", 5)`: equality
            - `where("stars", ">=", 4)`: explicit operator, lower-cased
            - `where({"stars": 5, "views": [">", 100]})`: one clause per entry
            - a `FieldEquals` / `FieldCompare` / `FieldMap` instance

        Operators: `=`, `<`, `<=`, `>`, `>=`, `!=`, `in`, `between`, `not_in`,
        `not_between`, `like`, `not_null`. They are not validated here.
        """
        self.accumulator.add_where(to_where_input(field_or_map, operation, value), combinator)
        return self

    def or_where(self, field_or_map: Any, operation: Any = MISSING, value: Any = MISSING) -> "Collection":
        """Same as `where`, joining every added clause with `or`."""
        return self.where(field_or_map, operation, value, Combinator.OR)

    def join(self, *relations: Any) -> "Collection":
        """Eager-load relations (dotted paths allowed). Replaces any previous list."""
        self.accumulator.set_option(OptionKind.WITH, flatten_args(relations))
        return self

    def select(self, *fields: Any) -> "Collection":
        """Fields to retrieve. Replaces any previous list."""
        self.accumulator.set_option(OptionKind.SELECT, flatten_args(fields))
        return self

    def distinct(self) -> "Collection":
        self.accumulator.set_option(OptionKind.DISTINCT, True)
        return self

    def group(self, *fields: Any) -> "Collection":
        """Group-by fields. Replaces any previous list."""
        self.accumulator.set_group(flatten_args(fields))
        return self

    def sort(self, field: str, direction: Direction = None) -> "Collection":
        """Append a sort key.

        `-1` sorts descending, any other number or no direction ascending;
        strings such as `"desc"` are passed through.
        """
        self.accumulator.add_order(field, direction)
        return self

    def limit(self, value: int) -> "Collection":
        self.accumulator.limit = value
        return self

    def offset(self, value: int) -> "Collection":
        self.accumulator.offset = value
        return self

    def remember(self, minutes: float) -> "Collection":
        """Ask the service to cache this query's result for `minutes`."""
        self.accumulator.remember = minutes
        return self

    def reset(self) -> "Collection":
        """Discard every pending filter, ordering and option."""
        self.accumulator.reset()
        return self

    # ------------------------------------------------------------------
    # Compilation
    # ------------------------------------------------------------------
    def build_query(self) -> QueryDescriptor:
        """Compile pending state into a descriptor and reset the builder.

        This is a fetch-and-clear operation: calling it twice in a row yields
        an empty descriptor the second time.
        """
        descriptor = self._compiler.compile(self.accumulator)
        if self.logger.is_enabled_for("DEBUG"):
            self.logger.debug("compiled query %s", descriptor.to_wire())
        return descriptor

    def _query(self) -> dict:
        return self.build_query().to_wire()

    # ------------------------------------------------------------------
    # Terminal operations
    # ------------------------------------------------------------------
    def create(self, data: Payload) -> Future:
        """Create a new row from `data`. Pending filters are left untouched."""
        return self._dispatcher.dispatch(Verb.CREATE, self.segments, data)

    def get(self) -> Future:
        """Read every row matching the pending query."""
        return self._dispatcher.dispatch(Verb.READ, self.segments, self._query())

    def then(self, on_complete: Optional[OnComplete] = None, on_error: Optional[OnError] = None) -> Future:
        """Run `get()` and attach continuations to its future."""
        return attach(self.get(), on_complete, on_error)

    def find(
        self,
        _id: ItemId,
        on_complete: Optional[OnComplete] = None,
        on_error: Optional[OnError] = None,
    ) -> Future:
        """Read a single row by id, applying pending modifiers (e.g. `join`)."""
        future = self._dispatcher.dispatch(Verb.READ, self._item_path(_id), self._query())
        return attach(future, on_complete, on_error)

    def _aggregate(
        self,
        method: str,
        field: str,
        on_complete: Optional[OnComplete],
        on_error: Optional[OnError],
    ) -> Future:
        self.accumulator.set_option(OptionKind.AGGREGATION, Aggregation(method=method, field=field))
        return attach(self.get(), on_complete, on_error)

    def count(
        self,
        field: str = DEFAULT_AGGREGATION_FIELD,
        on_complete: Optional[OnComplete] = None,
        on_error: Optional[OnError] = None,
    ) -> Future:
        return self._aggregate("count", field, on_complete, on_error)

    def max(self, field: str, on_complete: Optional[OnComplete] = None, on_error: Optional[OnError] = None) -> Future:
        return self._aggregate("max", field, on_complete, on_error)

    def min(self, field: str, on_complete: Optional[OnComplete] = None, on_error: Optional[OnError] = None) -> Future:
        return self._aggregate("min", field, on_complete, on_error)

    def avg(self, field: str, on_complete: Optional[OnComplete] = None, on_error: Optional[OnError] = None) -> Future:
        return self._aggregate("avg", field, on_complete, on_error)

    def sum(self, field: str, on_complete: Optional[OnComplete] = None, on_error: Optional[OnError] = None) -> Future:
        return self._aggregate("sum", field, on_complete, on_error)

    def first(self, on_complete: Optional[OnComplete] = None, on_error: Optional[OnError] = None) -> Future:
        """Read the first row matching the pending query."""
        self.accumulator.set_option(OptionKind.FIRST, 1)
        return attach(self.get(), on_complete, on_error)

    def first_or_create(
        self,
        data: Payload,
        on_complete: Optional[OnComplete] = None,
        on_error: Optional[OnError] = None,
    ) -> Future:
        """Return the first row matching the pending query, creating it from `data` if none."""
        self.accumulator.set_option(OptionKind.FIRST, 1)
        self.accumulator.set_option(OptionKind.DATA, data)
        future = self._dispatcher.dispatch(Verb.CREATE, self.segments, self._query())
        return attach(future, on_complete, on_error)

    def update(self, _id: ItemId, data: Payload) -> Future:
        """Update a single row by id with `data`. Pending filters are left untouched."""
        return self._dispatcher.dispatch(Verb.UPDATE, self._item_path(_id), data)

    def update_all(self, data: Payload) -> Future:
        """Update every row matching the pending query with `data`."""
        self.accumulator.set_option(OptionKind.DATA, data)
        return self._dispatcher.dispatch(Verb.UPDATE, self.segments, self._query())

    def _operate(
        self,
        method: str,
        field: str,
        value: Any,
        on_complete: Optional[OnComplete],
        on_error: Optional[OnError],
    ) -> Future:
        self.accumulator.set_option(OptionKind.OPERATION, Operation(method=method, field=field, value=value))
        future = self._dispatcher.dispatch(Verb.UPDATE, self.segments, self._query())
        return attach(future, on_complete, on_error)

    def increment(
        self,
        field: str,
        value: Any = 1,
        on_complete: Optional[OnComplete] = None,
        on_error: Optional[OnError] = None,
    ) -> Future:
        """Increment `field` on every matching row. Resolves to the affected-row count."""
        return self._operate("increment", field, value, on_complete, on_error)

    def decrement(
        self,
        field: str,
        value: Any = 1,
        on_complete: Optional[OnComplete] = None,
        on_error: Optional[OnError] = None,
    ) -> Future:
        """Decrement `field` on every matching row. Resolves to the affected-row count."""
        return self._operate("decrement", field, value, on_complete, on_error)

    def remove(self, _id: Optional[ItemId] = None) -> Future:
        """Delete a row by id, or every row matching the pending query.

        Without an id this deletes everything the filters match (all rows when
        there are none) and cannot be undone. Pending state is cleared in
        both cases.
        """
        query = self._query()
        if _id is not None:
            return self._dispatcher.dispatch(Verb.DELETE, self._item_path(_id), None)
        return self._dispatcher.dispatch(Verb.DELETE, self.segments, query)

    def drop(self) -> Future:
        """Delete the whole collection, ignoring pending filters. Cannot be undone."""
        return self._dispatcher.dispatch(Verb.DELETE, self.segments, None)

    def each(self, visitor: Callable[[Any], Any]) -> Future:
        """Run `get()` and call `visitor` on every row, in order.

        Returns a new future resolving to the rows once all were visited.
        """

        def _visit(rows: List[Any]) -> List[Any]:
            for row in rows:
                visitor(row)
            return rows

        return chain(self.get(), _visit)

    def debug(self, level: str = "info") -> Future:
        """Run `get()` and log the result at `level`."""
        return self.then(lambda data: self.logger.log(level, "%r", data))

    def paginate(
        self,
        per_page: Optional[int] = None,
        on_complete: Optional[Callable[[Pagination], Any]] = None,
        on_error: Optional[OnError] = None,
    ) -> Pagination:
        """Read one page of the pending query.

        Args:
            per_page: Page size, defaults to `settings.HOOK_PER_PAGE`
            on_complete: Called with the filled `Pagination`
            on_error: Called with the transport failure
        """
        if per_page is None:
            per_page = settings.HOOK_PER_PAGE
        pagination = Pagination(self, per_page)
        self.accumulator.set_option(OptionKind.PAGINATE, per_page)

        def _complete(data: Any) -> None:
            pagination.fetch_complete(data)
            if on_complete is not None:
                on_complete(pagination)

        def _failed(exc: BaseException) -> None:
            pagination.fetch_failed(exc)
            if on_error is not None:
                on_error(exc)

        pagination.future = self.then(_complete, _failed)
        return pagination

    def channel(self, options: Any = None) -> Any:
        """Real-time channel for this collection. Not implemented."""
        raise ChannelNotImplementedError("Not implemented.", collection=self.name)
