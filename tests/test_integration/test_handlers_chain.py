"""
Integration tests for the configuration to transform chain.

Tests cover:
- Handlers declared in the settings' handlers file
- Combination with the standard registry
- Parser results for nested and malformed input
"""

import json
import pytest
from unittest.mock import Mock
from sqlescape.config import settings
from sqlescape.config.settings import handlers_load
from sqlescape.lib.parser import EscapeParser, handlerMap_build


@pytest.fixture
def configured_parser(tmp_path, monkeypatch):
    path = tmp_path / "handlers.json"
    spec = {"top": {"include_keyword": True}, "call": {"include_keyword": False}}
    path.write_text(json.dumps(spec))
    monkeypatch.setattr(settings.appsettings, "handlersFile", path)
    extra = handlers_load(settings.appsettings.handlersFile)
    return EscapeParser(handlerMap_build(extra=extra))


def test_configured_and_standard_keywords(configured_parser):
    result = configured_parser.parse(
        "SELECT {top 3} {fn concat(a, {fn ucase(b)})} FROM t "
        "{oj t LEFT OUTER JOIN u ON t.id = u.id} {limit 3}"
    )
    assert result.success
    assert result.text == (
        "SELECT top 3 a || UPPER(b) FROM t "
        "t LEFT OUTER JOIN u ON t.id = u.id limit 3"
    )


def test_configured_arg_only(configured_parser):
    assert configured_parser.parse("{call proc('a, b')}").text == "proc('a, b')"


def test_malformed_input_reports_failure(configured_parser):
    result = configured_parser.parse("SELECT {top 3 FROM t")
    assert not result.success
    assert result.error.startswith("Unterminated escape sequence")


def test_clause_dispatch_is_logged(configured_parser, monkeypatch):
    mock_logger = Mock()
    monkeypatch.setattr("sqlescape.lib.log.app_logger", mock_logger)
    configured_parser.parse("{top 1}")
    mock_logger.opt.return_value.debug.assert_called_once()


def test_quiet_logging(configured_parser, monkeypatch):
    mock_logger = Mock()
    monkeypatch.setattr("sqlescape.lib.log.app_logger", mock_logger)
    monkeypatch.setattr(settings.appsettings, "beQuiet", True)
    configured_parser.parse("{top 1}")
    mock_logger.opt.assert_not_called()
