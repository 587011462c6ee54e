# pg_querybuilder - parameterized PostgreSQL SELECT/UPDATE statements
from pg_querybuilder.base import QueryBuilder, QueryBuilderWithWhere
from pg_querybuilder.bucket import ParamBucket
from pg_querybuilder.clauses import Join, JoinKind, Order
from pg_querybuilder.select_builder import SelectBuilder
from pg_querybuilder.update_builder import UpdateBuilder
from pg_querybuilder.statement import Statement

__version__ = "0.1.0"
__all__ = [
    "QueryBuilder", "QueryBuilderWithWhere", "ParamBucket", "Join", "JoinKind", "Order",
    "SelectBuilder", "UpdateBuilder", "Statement",
]
