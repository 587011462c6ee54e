"""
Join and ORDER BY terms for SelectBuilder.
Table names and constraints are rendered as given, without quoting.
"""
from enum import Enum


class JoinKind(Enum):
    INNER = "INNER JOIN"
    LEFT = "LEFT JOIN"
    LEFT_OUTER = "LEFT OUTER JOIN"


class Join:
    def __init__(self, kind, table, constraint):
        self.kind = kind
        self.table = table
        self.constraint = constraint

    def to_sql(self):
        return f"{self.kind.value} {self.table} ON {self.constraint}"

    def __repr__(self):
        return f"<Join {self.to_sql()}>"


class Order:
    """A single ORDER BY term"""
    def __init__(self, column, direction="ASC"):
        self.column = column
        self.direction = direction.upper()
        if self.direction not in ('ASC', 'DESC'):
            raise ValueError("Direction must be 'ASC' or 'DESC'")

    @classmethod
    def asc(cls, column):
        return cls(column, "ASC")

    @classmethod
    def desc(cls, column):
        return cls(column, "DESC")

    def to_sql(self):
        return f"{self.column} {self.direction}"

    def __eq__(self, other):
        if not isinstance(other, Order):
            return NotImplemented
        return (self.column, self.direction) == (other.column, other.direction)

    def __hash__(self):
        return hash((self.column, self.direction))

    def __repr__(self):
        return f"<Order {self.to_sql()}>"
