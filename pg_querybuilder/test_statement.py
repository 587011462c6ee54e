import logging

import pytest
from pydantic import ValidationError

from pg_querybuilder.bucket import ParamBucket
from pg_querybuilder.clauses import Order
from pg_querybuilder.select_builder import SelectBuilder
from pg_querybuilder.statement import Statement
from pg_querybuilder.update_builder import UpdateBuilder


def test_bucket_indexes_are_one_based():
    bucket = ParamBucket()
    assert bucket.push("a") == 1
    assert bucket.push(2) == 2
    assert len(bucket) == 2
    assert bucket.values() == ["a", 2]


def test_bucket_values_is_a_copy():
    bucket = ParamBucket()
    bucket.push(1)
    bucket.values().append(99)
    assert bucket.values() == [1]


def test_build_returns_statement():
    statement = SelectBuilder("users").select("id").where_eq("email", "a@b.c").build()
    assert statement == Statement(query="SELECT id FROM users WHERE email = $1", params=["a@b.c"])
    assert statement.as_args() == ("SELECT id FROM users WHERE email = $1", "a@b.c")
    assert str(statement) == statement.query


def test_statement_is_frozen():
    statement = UpdateBuilder("users").set("name", "x").build()
    with pytest.raises(ValidationError):
        statement.query = "DROP TABLE users"


def test_build_logs_query_and_params(caplog):
    with caplog.at_level(logging.DEBUG, logger="pg_querybuilder"):
        UpdateBuilder("users").set("name", "rick").where_eq("id", 1).build()
    assert "[SQL BUILD]: UPDATE users SET name = $1 WHERE id = $2 | [PARAMS]: ['rick', 1]" in caplog.text


def test_order_direction_validated():
    assert Order("name", "desc").to_sql() == "name DESC"
    with pytest.raises(ValueError):
        Order("name", "sideways")
