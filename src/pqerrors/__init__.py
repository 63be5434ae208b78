"""
pqerrors: typed PostgreSQL error classification

Turns the (message, SQLSTATE) pair reported by the server into exceptions
that can be matched on without parsing strings.

Usage:
    from pqerrors import connect, execute, ErrorClass, ErrorCode, PQResultError

    with connect("postgresql://...") as conn:
        try:
            execute(conn, "INSERT INTO users (email) VALUES (%s)", ["a@b.c"])
        except PQResultError as err:
            if err.error_code is ErrorCode.UNIQUE_VIOLATION:
                ...
            elif err.error_class is ErrorClass.INTEGRITY_CONSTRAINT_VIOLATION:
                ...
"""

from loguru import logger

from .errors import (
    ClientConnectionError,
    ClientException,
    ClientResultError,
    ConninfoParseError,
    PostgreSQLException,
    PQConnectionError,
    PQException,
    PQResultError,
    RegistryError,
    UnknownErrorCode,
    debug_repr,
    display,
)
from .registry import ErrorClass, ErrorCode, class_of, codes_in, error_name, lookup_class, lookup_code
from .construct import SQLSTATE_FIELD, Transport, connection_error, conninfo_parse_error, result_error
from .adapter import PsycopgTransport, connect, execute, format_verbose, map_db_error, parse_conninfo

# Library default: silent until the application enables it.
logger.disable("pqerrors")

__version__ = "1.0.0"
__all__ = [
    "PQException",
    "PostgreSQLException",
    "ClientException",
    "PQConnectionError",
    "ConninfoParseError",
    "PQResultError",
    "ClientConnectionError",
    "ClientResultError",
    "RegistryError",
    "UnknownErrorCode",
    "display",
    "debug_repr",
    "ErrorClass",
    "ErrorCode",
    "class_of",
    "codes_in",
    "error_name",
    "lookup_class",
    "lookup_code",
    "SQLSTATE_FIELD",
    "Transport",
    "connection_error",
    "conninfo_parse_error",
    "result_error",
    "PsycopgTransport",
    "connect",
    "execute",
    "format_verbose",
    "map_db_error",
    "parse_conninfo",
]
