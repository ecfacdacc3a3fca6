"""Tests for parameter marshalling into named-argument SQL calls."""

from __future__ import annotations

from tao.persistence.memory_backend import MemoryDatabase
from tao.persistence.sql import function_call, named_args, param_args, param_literal
from tests.fakes import FakeParam

quote = MemoryDatabase().quote


class TestNamedArgs:
    def test_quotes_only_text_values(self):
        result = named_args({"name": "Ann", "age": 42, "score": 9.5}, quote)
        assert result == "p_name := 'Ann', p_age := 42, p_score := 9.5"

    def test_escapes_embedded_quotes(self):
        assert named_args({"name": "O'Brien"}, quote) == "p_name := 'O''Brien'"

    def test_empty_mapping_is_empty_string(self):
        assert named_args({}, quote) == ""

    def test_none_and_bool_render_sql_literals(self):
        result = named_args({"deleted": None, "active": True, "admin": False}, quote)
        assert result == "p_deleted := NULL, p_active := TRUE, p_admin := FALSE"

    def test_bytes_render_bytea(self):
        assert named_args({"data": b"\x00\xff"}, quote) == "p_data := '\\x00ff'::bytea"


class TestParamLiteral:
    def test_null_type_ignores_value(self):
        assert param_literal(FakeParam("x", "ignored", "null"), quote) == "NULL"

    def test_boolean_type(self):
        assert param_literal(FakeParam("x", True, "boolean"), quote) == "TRUE"
        assert param_literal(FakeParam("x", False, "boolean"), quote) == "FALSE"

    def test_boolean_from_text(self):
        assert param_literal(FakeParam("x", "false", "boolean"), quote) == "FALSE"
        assert param_literal(FakeParam("x", "true", "boolean"), quote) == "TRUE"

    def test_string_is_quoted(self):
        assert param_literal(FakeParam("x", "abc", "string"), quote) == "'abc'"

    def test_array_and_object_are_json_quoted(self):
        assert param_literal(FakeParam("x", [1, 2], "array"), quote) == "'[1, 2]'"
        assert param_literal(FakeParam("x", {"a": "b"}, "object"), quote) == """'{"a": "b"}'"""

    def test_array_already_text_is_quoted_as_is(self):
        assert param_literal(FakeParam("x", "{1,2}", "array"), quote) == "'{1,2}'"

    def test_binary_is_hex_bytea(self):
        literal = param_literal(FakeParam("data", b"ab'c", "binary"), quote)
        assert literal == "'\\x61622763'::bytea"

    def test_binary_from_text_is_utf8_encoded(self):
        assert param_literal(FakeParam("data", "é", "binary"), quote) == "'\\xc3a9'::bytea"

    def test_numbers_use_default_string_form(self):
        assert param_literal(FakeParam("x", 7, "integer"), quote) == "7"
        assert param_literal(FakeParam("x", 1.25, "float"), quote) == "1.25"


class TestParamArgs:
    def test_joins_tokens_in_order(self):
        params = [
            FakeParam("name", "Ann", "string"),
            FakeParam("age", 42, "integer"),
            FakeParam("active", True, "boolean"),
            FakeParam("nick", None, "null"),
        ]
        assert param_args(params, quote) == (
            "p_name := 'Ann', p_age := 42, p_active := TRUE, p_nick := NULL"
        )

    def test_no_params_is_empty_string(self):
        assert param_args([], quote) == ""


class TestFunctionCall:
    def test_with_args(self):
        assert function_call("get_user", "p_id := 1") == "SELECT * FROM get_user(p_id := 1)"

    def test_without_args_degenerates_to_empty_call(self):
        assert function_call("list_users", named_args({}, quote)) == "SELECT * FROM list_users()"
