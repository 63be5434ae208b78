"""
psycopg collaborator for pqerrors.

`PsycopgTransport` reads error reports from psycopg exceptions and from
libpq-level ``PGconn``/``PGresult`` objects. The functions below wrap the
points of the connection and query lifecycle where errors originate, and
re-raise them as pqerrors exceptions.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import psycopg
from loguru import logger
from psycopg.conninfo import conninfo_to_dict
from psycopg.errors import Diagnostic
from psycopg.pq import DiagnosticField

from .construct import (
    SQLSTATE_FIELD,
    Transport,
    connection_error,
    conninfo_parse_error,
    result_error,
)
from .errors import ClientConnectionError, ClientResultError, PQException, UnknownErrorCode

# DiagnosticField.MESSAGE_HINT -> Diagnostic.message_hint, etc.
_FIELD_ATTRS = {field: field.name.lower() for field in DiagnosticField}

_VERBOSE_FIELDS = (
    ("DETAIL", "message_detail"),
    ("HINT", "message_hint"),
    ("QUERY", "internal_query"),
    ("CONTEXT", "context"),
    ("SCHEMA NAME", "schema_name"),
    ("TABLE NAME", "table_name"),
    ("COLUMN NAME", "column_name"),
    ("DATATYPE NAME", "datatype_name"),
    ("CONSTRAINT NAME", "constraint_name"),
)


def format_verbose(diag: Any) -> str:
    """Lay out diagnostic fields the way libpq's verbose error mode does.

    Example:
        ERROR:  42601: syntax error at or near "SELORCT" at character 1
        LOCATION:  scanner_yyerror, scan.l:1188
    """
    head = f"{diag.severity or 'ERROR'}:  "
    if diag.sqlstate:
        head += f"{diag.sqlstate}: "
    head += diag.message_primary or ""
    position = diag.statement_position or diag.internal_position
    if position:
        head += f" at character {position}"

    lines = [head]
    for label, attr in _VERBOSE_FIELDS:
        value = getattr(diag, attr)
        if value:
            lines.append(f"{label}:  {value}")

    function = diag.source_function
    source = ""
    if diag.source_file and diag.source_line:
        source = f"{diag.source_file}:{diag.source_line}"
    if function and source:
        lines.append(f"LOCATION:  {function}, {source}")
    elif function or source:
        lines.append(f"LOCATION:  {function or source}")

    return "".join(f"{line}\n" for line in lines)


class PsycopgTransport:
    """Transport over psycopg exceptions, connections and libpq handles."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def _diagnostic(self, handle: Any) -> Optional[Any]:
        if isinstance(handle, psycopg.Error):
            return handle.diag
        if callable(getattr(handle, "error_field", None)):
            return Diagnostic(handle, encoding=self.encoding)
        return None

    def error_message(self, handle: Any, verbose: bool = False) -> str:
        if verbose:
            diag = self._diagnostic(handle)
            if diag is not None and diag.message_primary is not None:
                return format_verbose(diag)

        if isinstance(handle, psycopg.Error):
            return str(handle)
        if isinstance(handle, psycopg.Connection):
            handle = handle.pgconn

        raw = getattr(handle, "error_message", None)
        if not raw:
            return ""
        if isinstance(raw, bytes):
            return raw.decode(self.encoding, "replace")
        return str(raw)

    def error_field(self, handle: Any, field: int) -> str:
        diag = self._diagnostic(handle)
        if diag is None:
            return ""
        attr = _FIELD_ATTRS.get(field)
        value = getattr(diag, attr, None) if attr else None
        if value is None and field == SQLSTATE_FIELD and isinstance(handle, psycopg.Error):
            # errors raised without a server report still know their class' code
            value = handle.sqlstate
        return value or ""


def map_db_error(
    e: psycopg.Error,
    *,
    include_verbose: bool = False,
    transport: Optional[Transport] = None,
) -> PQException:
    """Translate a psycopg error into the matching pqerrors exception.

    A SQLSTATE makes it a PQResultError (or raises UnknownErrorCode if the code
    is not registered, chained to ``e`` so the server report stays reachable);
    an OperationalError without one is a connection failure; anything else
    was detected on the client side.
    """
    if transport is None:
        transport = PsycopgTransport()

    if transport.error_field(e, SQLSTATE_FIELD):
        try:
            return result_error(e, include_verbose, transport=transport)
        except UnknownErrorCode as unknown:
            raise unknown from e
    if isinstance(e, psycopg.OperationalError):
        return connection_error(e, transport=transport)
    return ClientResultError(str(e))


def parse_conninfo(conninfo: str) -> dict[str, Any]:
    """Parse a libpq connection string, raising ConninfoParseError if malformed."""
    try:
        return conninfo_to_dict(conninfo)
    except psycopg.ProgrammingError as e:
        raise conninfo_parse_error(str(e)) from e


def connect(
    conninfo: str = "", *, transport: Optional[Transport] = None, **kwargs: Any
) -> psycopg.Connection:
    parse_conninfo(conninfo)
    try:
        return psycopg.connect(conninfo, **kwargs)
    except psycopg.OperationalError as e:
        logger.debug(f"Connection failed: {e}")
        raise connection_error(e, transport=transport) from e


def execute(
    conn: psycopg.Connection,
    query: Any,
    params: Optional[Sequence[Any]] = None,
    *,
    include_verbose: bool = False,
    transport: Optional[Transport] = None,
) -> list:
    """Run a query and return its rows (``[]`` for statements without rows).

    psycopg errors are re-raised as pqerrors exceptions, chained to the
    original.
    """
    if conn.closed:
        raise ClientConnectionError("the connection is closed")

    try:
        with conn.cursor() as cur:
            cur.execute(query, params)
            return cur.fetchall() if cur.description is not None else []
    except psycopg.Error as e:
        logger.debug(f"Query failed: {e!r}")
        raise map_db_error(e, include_verbose=include_verbose, transport=transport) from e
