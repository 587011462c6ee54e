from pg_querybuilder.base import QueryBuilder, QueryBuilderWithWhere


class UpdateBuilder(QueryBuilderWithWhere, QueryBuilder):
    """
    Builds `UPDATE <table> SET ... WHERE ...` statements.

    Placeholders are numbered in call order, so `where_eq` before `set`
    yields `SET id = $2 WHERE name = $1`.
    """

    def __init__(self, table):
        super().__init__(table)
        self.fields = []
        self.conditions = []

    def set(self, column, value):
        index = self.add_param(value)
        self.fields.append(f"{column} = ${index}")
        return self

    def set_computed(self, column, expression):
        """Assign a raw SQL expression, e.g. `set_computed("updated_at", "now()")`."""
        self.fields.append(f"{column} = {expression}")
        return self

    def get_query(self):
        result = [f"UPDATE {self.table}"]
        if self.fields:
            result.append("SET " + ", ".join(self.fields))
        where = self._where_to_query()
        if where:
            result.append(where)
        return " ".join(result)
