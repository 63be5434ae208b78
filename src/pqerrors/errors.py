"""
pqerrors exceptions

The hierarchy separates errors reported by the server from errors detected
by this library::

    PQException
    |__PostgreSQLException
    |  |__PQConnectionError
    |  |__ConninfoParseError
    |  |__PQResultError
    |__ClientException
       |__ClientConnectionError
       |__ClientResultError
       |__RegistryError
          |__UnknownErrorCode

All exceptions are immutable after construction and picklable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Tuple

from .utils import chomp

if TYPE_CHECKING:
    from .registry import ErrorClass, ErrorCode


class PQException(Exception):
    """Base exception for all the errors pqerrors will raise."""

    __module__ = "pqerrors"

    def __init__(self, msg: str):
        super().__init__(msg)
        self._msg = msg

    @property
    def message(self) -> str:
        """The message as reported, trailing newline included."""
        return self._msg

    def __str__(self) -> str:
        return chomp(self._msg)

    def __repr__(self) -> str:
        return f"{self.__module__}.{type(self).__name__}({self._msg!r})"


class PostgreSQLException(PQException):
    """An exception with an error message generated by PostgreSQL."""

    __module__ = "pqerrors"


class ClientException(PQException):
    """An exception generated by pqerrors itself, never tagged with a SQLSTATE."""

    __module__ = "pqerrors"


class PQConnectionError(PostgreSQLException):
    """An error regarding a connection reported by PostgreSQL."""

    __module__ = "pqerrors"


class ConninfoParseError(PostgreSQLException):
    """A connection string that could not be parsed."""

    __module__ = "pqerrors"


class ClientConnectionError(ClientException):
    """An error regarding a connection detected by pqerrors."""

    __module__ = "pqerrors"


class ClientResultError(ClientException):
    """An error regarding a query result detected by pqerrors."""

    __module__ = "pqerrors"


class RegistryError(ClientException):
    """The error-code registry is inconsistent or was asked for something it lacks."""

    __module__ = "pqerrors"


class UnknownErrorCode(RegistryError, LookupError):
    """A SQLSTATE (or class prefix) that is not in the registry."""

    __module__ = "pqerrors"

    def __init__(self, code: str):
        if code:
            msg = f"Unknown SQLSTATE error code {code!r}"
        else:
            msg = "Missing SQLSTATE error code"
        super().__init__(msg)
        self._code = code

    @property
    def code(self) -> str:
        return self._code

    def __repr__(self) -> str:
        return f"{self.__module__}.{type(self).__name__}({self._code!r})"

    def __reduce__(self) -> Tuple[Any, ...]:
        return (type(self), (self._code,))


class PQResultError(PostgreSQLException):
    """
    An error regarding a query result generated by PostgreSQL.

    Every instance is tagged with the `ErrorClass` and `ErrorCode` decoded from
    the SQLSTATE the server reported, as listed in Appendix A of the PostgreSQL
    documentation. Match on the tags rather than on the message::

        try:
            execute(conn, "SELORCT NUUL;")
        except PQResultError as err:
            if err.error_code is ErrorCode.SYNTAX_ERROR:
                ...

    ``str(err)`` gives ``"SyntaxError: syntax error at or near ..."``, and
    ``repr(err)`` gives ``pqerrors.SyntaxError('ERROR:  syntax error ...\\n')``.
    """

    __module__ = "pqerrors"

    def __init__(
        self,
        error_class: ErrorClass,
        error_code: ErrorCode,
        msg: str,
        verbose_msg: Optional[str] = None,
    ):
        if error_code.error_class is not error_class:
            raise RegistryError(
                f"SQLSTATE {error_code.value} does not belong to class {error_class.value}"
            )
        super().__init__(msg)
        self._error_class = error_class
        self._error_code = error_code
        self._verbose_msg = verbose_msg

    @property
    def error_class(self) -> ErrorClass:
        return self._error_class

    @property
    def error_code(self) -> ErrorCode:
        return self._error_code

    @property
    def verbose_message(self) -> Optional[str]:
        """The verbose report, or None when it was not requested."""
        return self._verbose_msg

    @property
    def name(self) -> str:
        """Registry display name of the (class, code) pair."""
        return self._error_code.display_name

    def __str__(self) -> str:
        msg = self._msg if self._verbose_msg is None else self._verbose_msg
        return f"{self.name}: {chomp(msg)}"

    def __repr__(self) -> str:
        args = repr(self._msg)
        if self._verbose_msg is not None:
            args += f", {self._verbose_msg!r}"
        return f"{self.__module__}.{self.name}({args})"

    def __reduce__(self) -> Tuple[Any, ...]:
        return (
            type(self),
            (self._error_class, self._error_code, self._msg, self._verbose_msg),
        )


def display(err: PQException) -> str:
    """Short form for logs and consoles: trimmed message, named for result errors."""
    return str(err)


def debug_repr(err: PQException) -> str:
    """Constructor-style form with the raw, untrimmed messages."""
    return repr(err)
