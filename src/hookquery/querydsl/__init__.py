"""Query DSL module.

Exports the filter accumulator, its value types and the where-input tags.
Compiled representations are handled by the `compilers` subpackage.
"""

from .accumulator import FilterAccumulator
from .clause import Clause, OrderSpec
from .where import FieldCompare, FieldEquals, FieldMap, normalize_where_input

__all__ = (
    "FilterAccumulator",
    "Clause",
    "OrderSpec",
    "FieldEquals",
    "FieldCompare",
    "FieldMap",
    "normalize_where_input",
)
