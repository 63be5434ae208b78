"""
Unit tests for the pqerrors CLI.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
from loguru import logger
from typer.testing import CliRunner

from pqerrors import (
    ErrorClass,
    ErrorCode,
    PQConnectionError,
    PQResultError,
    UnknownErrorCode,
)
from pqerrors.cli import app
from pqerrors.config import get_settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI callback reconfigures loguru; put it back after each test."""
    get_settings.cache_clear()
    yield
    logger.remove()
    logger.disable("pqerrors")
    get_settings.cache_clear()


class TestLookup:
    def test_known_code(self):
        result = runner.invoke(app, ["lookup", "42601"])

        assert result.exit_code == 0
        row = json.loads(result.stdout)
        assert row == {
            "sqlstate": "42601",
            "constant": "SYNTAX_ERROR",
            "name": "SyntaxError",
            "class": "42",
            "class_description": "Syntax Error or Access Rule Violation",
        }

    def test_lowercase_input(self):
        result = runner.invoke(app, ["lookup", "40p01"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["name"] == "DeadlockDetected"

    def test_unknown_code(self):
        result = runner.invoke(app, ["lookup", "ZZ000"])
        assert result.exit_code == 1


class TestListings:
    def test_classes(self):
        result = runner.invoke(app, ["classes"])

        assert result.exit_code == 0
        rows = {r["class"]: r for r in map(json.loads, result.stdout.splitlines())}
        assert len(rows) == len(ErrorClass)
        assert rows["23"]["constant"] == "INTEGRITY_CONSTRAINT_VIOLATION"
        assert rows["23"]["codes"] == 7

    def test_codes_for_class(self):
        result = runner.invoke(app, ["codes", "--class", "23"])

        assert result.exit_code == 0
        rows = [json.loads(line) for line in result.stdout.splitlines()]
        assert [r["sqlstate"] for r in rows] == [c.value for c in ErrorClass("23").codes]

    def test_all_codes(self):
        result = runner.invoke(app, ["codes"])
        assert len(result.stdout.splitlines()) == len(ErrorCode)

    def test_unknown_class(self):
        result = runner.invoke(app, ["codes", "--class", "ZZ"])
        assert result.exit_code == 1


SYNTAX_ERROR = PQResultError(
    ErrorClass.SYNTAX_ERROR_OR_ACCESS_RULE_VIOLATION,
    ErrorCode.SYNTAX_ERROR,
    'syntax error at or near "SELORCT"\n',
)


class TestCheck:
    @patch("pqerrors.cli.execute")
    @patch("pqerrors.cli.connect")
    def test_ok(self, mock_connect, mock_execute, mock_dsn):
        mock_connect.return_value = MagicMock()
        mock_execute.return_value = [(1,)]

        result = runner.invoke(app, ["check", "SELECT 1", "--dsn", mock_dsn])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"ok": True, "rows": 1}

    @patch("pqerrors.cli.execute")
    @patch("pqerrors.cli.connect")
    def test_server_error_display(self, mock_connect, mock_execute, mock_dsn):
        mock_connect.return_value = MagicMock()
        mock_execute.side_effect = SYNTAX_ERROR

        result = runner.invoke(app, ["check", "SELORCT NUUL;", "--dsn", mock_dsn])

        assert result.exit_code == 1
        assert result.stdout.strip() == 'SyntaxError: syntax error at or near "SELORCT"'

    @patch("pqerrors.cli.execute")
    @patch("pqerrors.cli.connect")
    def test_server_error_debug(self, mock_connect, mock_execute, mock_dsn):
        mock_connect.return_value = MagicMock()
        mock_execute.side_effect = SYNTAX_ERROR

        result = runner.invoke(app, ["check", "SELORCT NUUL;", "--dsn", mock_dsn, "--debug"])

        assert result.exit_code == 1
        assert result.stdout.strip() == repr(SYNTAX_ERROR)

    @patch("pqerrors.cli.execute")
    @patch("pqerrors.cli.connect")
    def test_verbose_flag_passed_through(self, mock_connect, mock_execute, mock_dsn):
        mock_connect.return_value = MagicMock()
        mock_execute.return_value = []

        runner.invoke(app, ["check", "SELECT 1", "--dsn", mock_dsn, "--verbose"])

        assert mock_execute.call_args.kwargs["include_verbose"] is True

    @patch("pqerrors.cli.execute")
    @patch("pqerrors.cli.connect")
    def test_verbose_default_from_settings(
        self, mock_connect, mock_execute, mock_dsn, monkeypatch
    ):
        monkeypatch.setenv("PQERRORS_VERBOSE_ERRORS", "true")
        mock_connect.return_value = MagicMock()
        mock_execute.return_value = []

        runner.invoke(app, ["check", "SELECT 1", "--dsn", mock_dsn])

        assert mock_execute.call_args.kwargs["include_verbose"] is True

    @patch("pqerrors.cli.connect")
    def test_connection_error(self, mock_connect, mock_dsn):
        mock_connect.side_effect = PQConnectionError("connection refused\n")

        result = runner.invoke(app, ["check", "SELECT 1", "--dsn", mock_dsn])

        assert result.exit_code == 1
        assert result.stdout.strip() == "connection refused"

    @patch("pqerrors.cli.execute")
    @patch("pqerrors.cli.connect")
    def test_unknown_code(self, mock_connect, mock_execute, mock_dsn):
        mock_connect.return_value = MagicMock()
        mock_execute.side_effect = UnknownErrorCode("ZZ000")

        result = runner.invoke(app, ["check", "SELECT 1", "--dsn", mock_dsn])

        assert result.exit_code == 1

    @patch("pqerrors.cli.execute")
    @patch("pqerrors.cli.connect")
    def test_unknown_code_logs_server_report(self, mock_connect, mock_execute, mock_dsn):
        mock_connect.return_value = MagicMock()
        err = UnknownErrorCode("ZZ000")
        err.__cause__ = RuntimeError("could not extend file: disk full\n")
        mock_execute.side_effect = err

        result = runner.invoke(app, ["check", "SELECT 1", "--dsn", mock_dsn])

        assert result.exit_code == 1
        assert "Server reported: could not extend file: disk full" in result.output

    def test_missing_dsn(self, monkeypatch):
        monkeypatch.delenv("PQERRORS_DATABASE_URL", raising=False)

        result = runner.invoke(app, ["check", "SELECT 1"])

        assert result.exit_code == 2

    @patch("pqerrors.cli.execute")
    @patch("pqerrors.cli.connect")
    def test_dsn_from_settings(self, mock_connect, mock_execute, mock_dsn, monkeypatch):
        monkeypatch.setenv("PQERRORS_DATABASE_URL", mock_dsn)
        mock_connect.return_value = MagicMock()
        mock_execute.return_value = []

        result = runner.invoke(app, ["check", "SELECT 1"])

        assert result.exit_code == 0
        assert mock_connect.call_args.args[0] == mock_dsn
