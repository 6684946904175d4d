"""Tests for escape handlers and the handler registry."""

import pytest
from sqlescape.lib.parser.handlers import (
    HANDLER_MAP,
    EscapeHandler,
    FunctionEscapeHandler,
    PassthruEscapeHandler,
    handlerMap_build,
)


def test_passthru_with_keyword():
    handler = PassthruEscapeHandler(True)
    assert handler.process("limit", "10") == "limit 10"
    assert handler.process("limit", "") == "limit"


def test_passthru_args_only():
    handler = PassthruEscapeHandler(False)
    assert handler.process("d", "'2013-01-01'") == "'2013-01-01'"
    assert handler.process("d", "") == ""


def test_handlers_satisfy_protocol():
    assert isinstance(PassthruEscapeHandler(True), EscapeHandler)
    assert isinstance(FunctionEscapeHandler(), EscapeHandler)
    assert not isinstance(object(), EscapeHandler)


@pytest.mark.parametrize(
    "args, expected",
    [
        ("ucase(name)", "UPPER(name)"),
        ("lcase (name)", "LOWER(name)"),
        ("char_length(name)", "LENGTH(name)"),
        ("OCTET_LENGTH(name)", "LENGTH(name)"),
        ("substring(name, 1, 2)", "SUBSTR(name, 1, 2)"),
        ("user()", "''"),
        ("user", "''"),
        ("concat(a, 'b, c', d)", "a || 'b, c' || d"),
        ("concat(f(a, b), c)", "f(a, b) || c"),
        ("concat", "concat"),
        ("abs(-1)", "abs(-1)"),
        ("1 + 1", "1 + 1"),
    ],
)
def test_function_handler(args, expected):
    assert FunctionEscapeHandler().process("fn", args) == expected


def test_standard_registry():
    assert set(HANDLER_MAP) == {"limit", "escape", "fn", "d", "t", "ts", "oj"}
    assert HANDLER_MAP["limit"].process("limit", "5") == "limit 5"
    assert HANDLER_MAP["ts"].process("ts", "'x'") == "'x'"
    with pytest.raises(TypeError):
        HANDLER_MAP["foo"] = PassthruEscapeHandler(True)


def test_handler_map_build():
    handlers = handlerMap_build(passthru=["top"], arg_only=["call"])
    assert handlers["top"].process("top", "5") == "top 5"
    assert handlers["call"].process("call", "p()") == "p()"
    assert "fn" in handlers
    assert "top" not in HANDLER_MAP


def test_handler_map_build_without_defaults():
    extra = {"x": PassthruEscapeHandler(False)}
    handlers = handlerMap_build(passthru=["x"], defaults=False, extra=extra)
    assert set(handlers) == {"x"}
    assert handlers["x"].process("x", "1") == "x 1"
