"""Tests for the parser facade."""

import pytest
from unittest.mock import patch, Mock
from sqlescape.lib.parser.base import EscapeParser, native_sql
from sqlescape.lib.parser.errors import EscapeSyntaxError
from sqlescape.models.dataModel import ParseResult


@pytest.fixture
def parser(handler_map):
    return EscapeParser(handler_map)


def test_basic_substitution(parser):
    result = parser.parse("SELECT * FROM t {limit 10}")
    assert result == ParseResult(text="SELECT * FROM t limit 10", error=None, success=True)


def test_empty_input(parser):
    result = parser.parse("")
    assert result.success
    assert result.text == ""


def test_syntax_error_is_reported(parser):
    with patch("sqlescape.lib.parser.base.LOG") as mock_log:
        result = parser.parse("{foo bar}")
    assert not result.success
    assert result.text == ""
    assert "Unknown escape keyword" in result.error
    mock_log.assert_called_once()


def test_custom_handler():
    handler = Mock()
    handler.process.return_value = "replaced"
    result = EscapeParser({"x": handler}).parse("a {x b} c")
    handler.process.assert_called_once_with("x", "b")
    assert result.text == "a replaced c"


def test_rejects_non_handlers():
    with pytest.raises(TypeError, match="'x'"):
        EscapeParser({"x": "not a handler"})


def test_split(parser):
    assert parser.split("a, (b, c)") == ["a", "(b, c)"]


def test_native_sql():
    sql = "SELECT {fn ucase(name)} FROM t WHERE d > {d '2013-01-01'} {limit 5}"
    assert native_sql(sql) == "SELECT UPPER(name) FROM t WHERE d > '2013-01-01' limit 5"


def test_native_sql_raises():
    with pytest.raises(EscapeSyntaxError):
        native_sql("SELECT {top 5} * FROM t")


def test_deep_unterminated_input(parser):
    result = parser.parse("{limit " * 2000 + "1")
    assert not result.success
    assert result.error.startswith("Unterminated escape sequence")
