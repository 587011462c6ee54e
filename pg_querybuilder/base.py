"""
Shared machinery for the SELECT and UPDATE builders.

Only values are bound as `$N` placeholders. Table names, column names and raw
fragments are written into the SQL text unchanged, so they must come from
trusted code and never from user input.
"""
import logging
from abc import ABC, abstractmethod

from pg_querybuilder.bucket import ParamBucket
from pg_querybuilder.statement import Statement


class QueryBuilder(ABC):
    logger = logging.getLogger("pg_querybuilder")

    def __init__(self, table):
        if not table:
            raise ValueError(f"Table name must not be empty: {table!r}")
        self.table = table
        self.params = ParamBucket()

    def add_param(self, value):
        """Bind a value and return its placeholder index (1-based)."""
        return self.params.push(value)

    @abstractmethod
    def get_query(self):
        """Render the statement. Must not mutate the builder."""
        pass

    def get_ref_params(self):
        return self.params.values()

    def build(self):
        statement = Statement(query=self.get_query(), params=self.get_ref_params())
        self._log(statement)
        return statement

    def _log(self, statement):
        msg = f"[SQL BUILD]: {statement.query}"
        if statement.params:
            msg += f" | [PARAMS]: {statement.params}"
        self.logger.debug(msg)

    def __repr__(self):
        return f"<{type(self).__name__} {self.get_query()!r}>"


class QueryBuilderWithWhere:
    """AND-joined WHERE predicates. Expects `self.conditions` and `add_param`."""

    def where_condition(self, raw):
        """Append a predicate verbatim.

        Placeholders inside `raw` are the caller's business; reserve them with
        `add_param` first. Wrap disjunctions in parentheses yourself, since
        predicates are joined with AND as written.
        """
        self.conditions.append(raw)
        return self

    def where_eq(self, column, value):
        index = self.add_param(value)
        return self.where_condition(f"{column} = ${index}")

    def where_ne(self, column, value):
        index = self.add_param(value)
        return self.where_condition(f"{column} <> ${index}")

    def _where_to_query(self):
        if self.conditions:
            return "WHERE " + " AND ".join(self.conditions)
        return None


def _check_count(name, value):
    # bool is an int subclass; LIMIT True is never what the caller meant
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value
