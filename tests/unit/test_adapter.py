"""
Unit tests for the psycopg collaborator.

Tests:
- PsycopgTransport reads psycopg errors, libpq results and connections
- Verbose reports follow libpq's verbose layout
- map_db_error picks the right exception family
- connect/execute/parse_conninfo raise pqerrors exceptions
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import psycopg
import psycopg.errors as E
import pytest
from psycopg.pq import DiagnosticField as F

from pqerrors import (
    SQLSTATE_FIELD,
    ClientConnectionError,
    ClientResultError,
    ConninfoParseError,
    ErrorCode,
    PQConnectionError,
    PQResultError,
    PsycopgTransport,
    UnknownErrorCode,
    connect,
    execute,
    format_verbose,
    map_db_error,
    parse_conninfo,
)

SYNTAX_INFO = {
    F.SEVERITY: b"ERROR",
    F.SQLSTATE: b"42601",
    F.MESSAGE_PRIMARY: b'syntax error at or near "SELORCT"',
    F.STATEMENT_POSITION: b"1",
    F.SOURCE_FILE: b"scan.l",
    F.SOURCE_LINE: b"1188",
    F.SOURCE_FUNCTION: b"scanner_yyerror",
}

SYNTAX_VERBOSE = (
    'ERROR:  42601: syntax error at or near "SELORCT" at character 1\n'
    "LOCATION:  scanner_yyerror, scan.l:1188\n"
)


def make_diag(**fields):
    """Diagnostic stand-in with every field unset unless given."""
    values = {f.name.lower(): None for f in F}
    values.update(fields)
    return SimpleNamespace(**values)


class FakePGresult:
    """libpq-level result: raw error message plus diagnostic fields."""

    def __init__(self, message: bytes, fields: dict):
        self.error_message = message
        self._fields = fields

    def error_field(self, field):
        return self._fields.get(field)


@pytest.fixture
def transport():
    return PsycopgTransport()


@pytest.fixture
def syntax_error():
    return E.SyntaxError('syntax error at or near "SELORCT"', info=SYNTAX_INFO)


class TestFormatVerbose:
    def test_syntax_error(self):
        diag = make_diag(
            severity="ERROR",
            sqlstate="42601",
            message_primary='syntax error at or near "SELORCT"',
            statement_position="1",
            source_file="scan.l",
            source_line="1188",
            source_function="scanner_yyerror",
        )
        assert format_verbose(diag) == SYNTAX_VERBOSE

    def test_detail_and_object_names(self):
        diag = make_diag(
            severity="ERROR",
            sqlstate="23505",
            message_primary='duplicate key value violates unique constraint "users_email_key"',
            message_detail="Key (email)=(a@b.c) already exists.",
            schema_name="public",
            table_name="users",
            constraint_name="users_email_key",
            source_file="nbtinsert.c",
            source_line="666",
            source_function="_bt_check_unique",
        )
        assert format_verbose(diag) == (
            'ERROR:  23505: duplicate key value violates unique constraint "users_email_key"\n'
            "DETAIL:  Key (email)=(a@b.c) already exists.\n"
            "SCHEMA NAME:  public\n"
            "TABLE NAME:  users\n"
            "CONSTRAINT NAME:  users_email_key\n"
            "LOCATION:  _bt_check_unique, nbtinsert.c:666\n"
        )

    def test_minimal(self):
        diag = make_diag(message_primary="oops")
        assert format_verbose(diag) == "ERROR:  oops\n"


class TestPsycopgTransportErrors:
    def test_brief_message(self, transport, syntax_error):
        assert transport.error_message(syntax_error) == 'syntax error at or near "SELORCT"'

    def test_verbose_message(self, transport, syntax_error):
        assert transport.error_message(syntax_error, verbose=True) == SYNTAX_VERBOSE

    def test_sqlstate_from_diagnostics(self, transport, syntax_error):
        assert transport.error_field(syntax_error, SQLSTATE_FIELD) == "42601"

    def test_sqlstate_from_class(self, transport):
        err = E.UniqueViolation('duplicate key value violates unique constraint "k"')
        assert transport.error_field(err, SQLSTATE_FIELD) == "23505"

    def test_verbose_falls_back_to_brief(self, transport):
        err = E.UniqueViolation("duplicate key")
        assert transport.error_message(err, verbose=True) == "duplicate key"

    def test_other_fields(self, transport, syntax_error):
        assert transport.error_field(syntax_error, F.SOURCE_FUNCTION) == "scanner_yyerror"
        assert transport.error_field(syntax_error, F.MESSAGE_HINT) == ""

    def test_no_sqlstate(self, transport):
        assert transport.error_field(psycopg.OperationalError("boom"), SQLSTATE_FIELD) == ""


class TestPsycopgTransportHandles:
    def test_pgresult(self, transport):
        result = FakePGresult(
            b'ERROR:  syntax error at or near "SELORCT"\n',
            {int(k): v for k, v in SYNTAX_INFO.items()},
        )
        assert transport.error_message(result) == 'ERROR:  syntax error at or near "SELORCT"\n'
        assert transport.error_message(result, verbose=True) == SYNTAX_VERBOSE
        assert transport.error_field(result, SQLSTATE_FIELD) == "42601"

    def test_pgconn(self, transport):
        pgconn = SimpleNamespace(error_message=b"FATAL:  database \"nope\" does not exist\n")
        assert transport.error_message(pgconn) == 'FATAL:  database "nope" does not exist\n'
        assert transport.error_field(pgconn, SQLSTATE_FIELD) == ""

    def test_connection(self, transport):
        conn = MagicMock(spec=psycopg.Connection)
        conn.pgconn = SimpleNamespace(error_message=b"server closed the connection\n")
        assert transport.error_message(conn) == "server closed the connection\n"

    def test_no_message(self, transport):
        assert transport.error_message(SimpleNamespace(error_message=b"")) == ""
        assert transport.error_message(object()) == ""

    def test_encoding(self):
        pgconn = SimpleNamespace(error_message="FATAL:  rôle inconnu\n".encode("latin-1"))
        transport = PsycopgTransport(encoding="latin-1")
        assert transport.error_message(pgconn) == "FATAL:  rôle inconnu\n"


class TestMapDbError:
    def test_server_error(self, syntax_error):
        err = map_db_error(syntax_error)
        assert isinstance(err, PQResultError)
        assert err.error_code is ErrorCode.SYNTAX_ERROR
        assert err.verbose_message is None

    def test_server_error_verbose(self, syntax_error):
        err = map_db_error(syntax_error, include_verbose=True)
        assert err.verbose_message == SYNTAX_VERBOSE
        assert str(err).startswith("SyntaxError: ERROR:  42601:")

    def test_operational_without_sqlstate(self):
        err = map_db_error(psycopg.OperationalError("connection refused\n"))
        assert isinstance(err, PQConnectionError)
        assert str(err) == "connection refused"

    def test_interface_error(self):
        err = map_db_error(psycopg.InterfaceError("the cursor is closed"))
        assert isinstance(err, ClientResultError)

    def test_unregistered_sqlstate(self):
        exc = psycopg.DatabaseError("novel", info={F.SQLSTATE: b"ZZ000"})
        with pytest.raises(UnknownErrorCode) as exc_info:
            map_db_error(exc)
        assert exc_info.value.code == "ZZ000"
        assert exc_info.value.__cause__ is exc


class TestParseConninfo:
    def test_valid(self):
        assert parse_conninfo("dbname=test user=postgres") == {
            "dbname": "test",
            "user": "postgres",
        }

    @patch("pqerrors.adapter.conninfo_to_dict")
    def test_malformed(self, mock_parse):
        mock_parse.side_effect = psycopg.ProgrammingError(
            'missing "=" after "dbname" in connection info string\n'
        )
        with pytest.raises(ConninfoParseError) as exc_info:
            parse_conninfo("host=localhost dbname")
        assert str(exc_info.value) == 'missing "=" after "dbname" in connection info string'
        assert isinstance(exc_info.value.__cause__, psycopg.ProgrammingError)


class TestConnect:
    @patch("pqerrors.adapter.conninfo_to_dict", return_value={})
    @patch("pqerrors.adapter.psycopg.connect")
    def test_success(self, mock_connect, _mock_parse, mock_dsn):
        mock_connect.return_value = sentinel = MagicMock()
        assert connect(mock_dsn, autocommit=True) is sentinel
        mock_connect.assert_called_once_with(mock_dsn, autocommit=True)

    @patch("pqerrors.adapter.conninfo_to_dict", return_value={})
    @patch("pqerrors.adapter.psycopg.connect")
    def test_failure(self, mock_connect, _mock_parse, mock_dsn):
        mock_connect.side_effect = psycopg.OperationalError(
            "connection failed: Connection refused\n"
        )
        with pytest.raises(PQConnectionError) as exc_info:
            connect(mock_dsn)
        assert str(exc_info.value) == "connection failed: Connection refused"

    @patch("pqerrors.adapter.conninfo_to_dict")
    @patch("pqerrors.adapter.psycopg.connect")
    def test_parse_failure_skips_connect(self, mock_connect, mock_parse):
        mock_parse.side_effect = psycopg.ProgrammingError("invalid connection option")
        with pytest.raises(ConninfoParseError):
            connect("bogus=1")
        mock_connect.assert_not_called()


@pytest.fixture
def mock_conn():
    conn = MagicMock()
    conn.closed = False
    return conn


class TestExecute:
    def test_returns_rows(self, mock_conn):
        cur = mock_conn.cursor.return_value.__enter__.return_value
        cur.description = [("x",)]
        cur.fetchall.return_value = [(1,)]

        assert execute(mock_conn, "SELECT 1") == [(1,)]
        cur.execute.assert_called_once_with("SELECT 1", None)

    def test_statement_without_rows(self, mock_conn):
        cur = mock_conn.cursor.return_value.__enter__.return_value
        cur.description = None

        assert execute(mock_conn, "SET search_path = public") == []
        cur.fetchall.assert_not_called()

    def test_server_error(self, mock_conn):
        cur = mock_conn.cursor.return_value.__enter__.return_value
        cause = E.UndefinedTable('relation "nope" does not exist')
        cur.execute.side_effect = cause

        with pytest.raises(PQResultError) as exc_info:
            execute(mock_conn, "SELECT * FROM nope")

        assert exc_info.value.error_code is ErrorCode.UNDEFINED_TABLE
        assert exc_info.value.__cause__ is cause

    def test_unregistered_sqlstate_keeps_server_report(self, mock_conn):
        cur = mock_conn.cursor.return_value.__enter__.return_value
        cause = psycopg.DatabaseError(
            "could not extend file: disk full", info={F.SQLSTATE: b"ZZ000"}
        )
        cur.execute.side_effect = cause

        with pytest.raises(UnknownErrorCode) as exc_info:
            execute(mock_conn, "INSERT INTO t VALUES (1)")

        assert exc_info.value.__cause__ is cause
        assert "disk full" in str(exc_info.value.__cause__)

    def test_closed_connection(self, mock_conn):
        mock_conn.closed = True
        with pytest.raises(ClientConnectionError):
            execute(mock_conn, "SELECT 1")
        mock_conn.cursor.assert_not_called()
