"""
Error construction.

Turns the failure report held by a connection or result handle into the
matching pqerrors exception. Handles are read through a `Transport`; they are
never closed, reset or otherwise modified here.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

from loguru import logger
from psycopg.pq import DiagnosticField

from .errors import ConninfoParseError, PQConnectionError, PQResultError, UnknownErrorCode
from .registry import class_of, lookup_code

SQLSTATE_FIELD = DiagnosticField.SQLSTATE


class Transport(Protocol):
    """Read-only access to the error report of a connection or result.

    Neither method may raise: a missing message or field is returned as ``""``.
    """

    def error_message(self, handle: Any, verbose: bool = False) -> str:
        ...

    def error_field(self, handle: Any, field: int) -> str:
        ...


def _default_transport() -> Transport:
    from .adapter import PsycopgTransport

    return PsycopgTransport()


def connection_error(connection: Any, *, transport: Optional[Transport] = None) -> PQConnectionError:
    """Wrap the error message currently set on a connection."""
    if transport is None:
        transport = _default_transport()
    return PQConnectionError(transport.error_message(connection, verbose=False) or "")


def conninfo_parse_error(message: str) -> ConninfoParseError:
    return ConninfoParseError(message)


def result_error(
    result: Any,
    include_verbose: bool = False,
    *,
    transport: Optional[Transport] = None,
) -> PQResultError:
    """Build a PQResultError tagged with the SQLSTATE of a failed result.

    The verbose message is only fetched when ``include_verbose`` is true.
    Raise `UnknownErrorCode` when the SQLSTATE is missing or not registered;
    no error value is produced in that case.
    """
    if transport is None:
        transport = _default_transport()

    msg = transport.error_message(result, verbose=False) or ""
    verbose_msg = transport.error_message(result, verbose=True) if include_verbose else None
    sqlstate = transport.error_field(result, SQLSTATE_FIELD)

    if not sqlstate:
        logger.warning("Failed result carries no SQLSTATE")
        raise UnknownErrorCode("")

    try:
        error_class = class_of(sqlstate)
        error_code = lookup_code(sqlstate)
    except UnknownErrorCode:
        logger.warning(f"Server reported unregistered SQLSTATE {sqlstate!r}")
        raise

    logger.debug(f"Classified SQLSTATE {sqlstate} as {error_code.display_name}")
    return PQResultError(error_class, error_code, msg, verbose_msg)
