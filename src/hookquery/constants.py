"""
Wire-level constants shared by the query builder and compiler.
"""

import re

COLLECTION_SEGMENT = "collection"

COLLECTION_NAME_PATTERN = re.compile(r"^[a-z_/0-9]+$")


class Combinator:
    AND = "and"
    OR = "or"


class SortDirection:
    ASC = "asc"
    DESC = "desc"


class OptionKind:
    PAGINATE = "paginate"
    FIRST = "first"
    AGGREGATION = "aggregation"
    OPERATION = "operation"
    DATA = "data"
    WITH = "with"
    SELECT = "select"
    DISTINCT = "distinct"


# Order matters: options are projected onto the descriptor in this order.
OPTION_SHORTNAMES = {
    OptionKind.PAGINATE: "p",  # pagination (per page)
    OptionKind.FIRST: "f",  # first / first_or_create
    OptionKind.AGGREGATION: "aggr",  # min / max / count / avg / sum
    OptionKind.OPERATION: "op",  # increment / decrement
    OptionKind.DATA: "data",  # update_all / first_or_create
    OptionKind.WITH: "with",  # join / relationships
    OptionKind.SELECT: "select",  # fields to return
    OptionKind.DISTINCT: "distinct",  # use distinct operation
}

DEFAULT_AGGREGATION_FIELD = "*"


class Verb:
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
