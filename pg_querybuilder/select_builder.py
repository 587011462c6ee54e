from pg_querybuilder.base import QueryBuilder, QueryBuilderWithWhere, _check_count
from pg_querybuilder.clauses import Join, JoinKind


class SelectBuilder(QueryBuilderWithWhere, QueryBuilder):
    """
    Builds `SELECT ... FROM <table>` statements.

        builder = SelectBuilder("users")
        builder.select("id").select("email").where_eq("password", "123456")
        builder.get_query()       # SELECT id, email FROM users WHERE password = $1
        builder.get_ref_params()  # ["123456"]
    """

    def __init__(self, table):
        super().__init__(table)
        self.columns = []
        self.joins = []
        self.conditions = []
        self.groups = []
        self.order = []
        self._limit = None
        self._offset = None

    def select(self, column):
        self.columns.append(column)
        return self

    def add_where_raw(self, raw):
        return self.where_condition(raw)

    def inner_join(self, table, constraint):
        self.joins.append(Join(JoinKind.INNER, table, constraint))
        return self

    def left_join(self, table, constraint):
        self.joins.append(Join(JoinKind.LEFT, table, constraint))
        return self

    def left_outer_join(self, table, constraint):
        self.joins.append(Join(JoinKind.LEFT_OUTER, table, constraint))
        return self

    def group_by(self, column):
        self.groups.append(column)
        return self

    def order_by(self, order):
        self.order.append(order)
        return self

    def limit(self, value: int):
        self._limit = _check_count("limit", value)
        return self

    def offset(self, value: int):
        self._offset = _check_count("offset", value)
        return self

    def get_query(self):
        sections = [
            f"SELECT {', '.join(self.columns) if self.columns else '*'}",
            f"FROM {self.table}",
        ]
        sections.extend(join.to_sql() for join in self.joins)

        where = self._where_to_query()
        if where:
            sections.append(where)
        if self.groups:
            sections.append("GROUP BY " + ", ".join(self.groups))
        if self.order:
            sections.append("ORDER BY " + ", ".join(o.to_sql() for o in self.order))
        if self._limit is not None:
            sections.append(f"LIMIT {self._limit}")
        if self._offset is not None:
            sections.append(f"OFFSET {self._offset}")

        return " ".join(sections)
