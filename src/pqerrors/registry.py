"""
Error-code registry.

Builds the `ErrorClass` and `ErrorCode` enums from the tables in
`pqerrors.codes` and checks the tables once, at import, so that every lookup
afterwards is a plain read. Nothing here is mutated after import.

    >>> lookup_code("42601")
    <ErrorCode.SYNTAX_ERROR: '42601'>
    >>> class_of("42601") == "42"
    True
    >>> error_name("42601")
    'SyntaxError'
"""

from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from .codes import ERROR_CLASSES, ERROR_CODES
from .errors import RegistryError, UnknownErrorCode

_CLASS_RE = re.compile(r"[0-9A-Z]{2}")
_CODE_RE = re.compile(r"[0-9A-Z]{5}")


class _ErrorClassBase(str, Enum):
    """A two-character SQLSTATE class, e.g. ``"42"``."""

    @property
    def description(self) -> str:
        return _CLASS_DESCRIPTIONS[self]

    @property
    def codes(self) -> tuple:
        return _CODES_BY_CLASS[self]

    def __str__(self) -> str:
        return self.value


class _ErrorCodeBase(str, Enum):
    """A five-character SQLSTATE, e.g. ``"42601"``."""

    @property
    def error_class(self) -> "ErrorClass":
        return ErrorClass(self.value[:2])

    @property
    def display_name(self) -> str:
        return _ERROR_NAMES[self]

    def __str__(self) -> str:
        return self.value


def _validate(
    classes: Iterable[tuple[str, str, str]], codes: Iterable[tuple[str, str, str]]
) -> None:
    """Reject malformed, duplicated or orphaned table rows."""
    prefixes: set[str] = set()
    class_constants: set[str] = set()
    for prefix, constant, description in classes:
        if not _CLASS_RE.fullmatch(prefix):
            raise RegistryError(f"Malformed error class {prefix!r}")
        if prefix in prefixes:
            raise RegistryError(f"Duplicate error class {prefix!r}")
        if constant in class_constants:
            raise RegistryError(f"Duplicate error class constant {constant!r}")
        if not description:
            raise RegistryError(f"Error class {prefix!r} has no description")
        prefixes.add(prefix)
        class_constants.add(constant)

    sqlstates: set[str] = set()
    constants: set[str] = set()
    names: set[str] = set()
    for sqlstate, constant, name in codes:
        if not _CODE_RE.fullmatch(sqlstate):
            raise RegistryError(f"Malformed error code {sqlstate!r}")
        if sqlstate in sqlstates:
            raise RegistryError(f"Duplicate error code {sqlstate!r}")
        if sqlstate[:2] not in prefixes:
            raise RegistryError(f"Error code {sqlstate!r} has no registered class")
        if constant in constants:
            raise RegistryError(f"Duplicate error code constant {constant!r}")
        if not name:
            raise RegistryError(f"Error code {sqlstate!r} has no display name")
        if name in names:
            raise RegistryError(f"Duplicate display name {name!r}")
        sqlstates.add(sqlstate)
        constants.add(constant)
        names.add(name)


_validate(ERROR_CLASSES, ERROR_CODES)

ErrorClass = _ErrorClassBase(
    "ErrorClass",
    [(constant, prefix) for prefix, constant, _ in ERROR_CLASSES],
    module=__name__,
    qualname="ErrorClass",
)

ErrorCode = _ErrorCodeBase(
    "ErrorCode",
    [(constant, sqlstate) for sqlstate, constant, _ in ERROR_CODES],
    module=__name__,
    qualname="ErrorCode",
)

_CLASS_DESCRIPTIONS: Mapping = MappingProxyType(
    {ErrorClass(prefix): description for prefix, _, description in ERROR_CLASSES}
)
_ERROR_NAMES: Mapping = MappingProxyType(
    {ErrorCode(sqlstate): name for sqlstate, _, name in ERROR_CODES}
)
_CODES_BY_CLASS: Mapping = MappingProxyType(
    {cls: tuple(code for code in ErrorCode if code.value[:2] == cls.value) for cls in ErrorClass}
)

if set(_ERROR_NAMES) != set(ErrorCode):
    raise RegistryError("Display names do not cover every error code")


def lookup_class(prefix: Union[str, ErrorClass]) -> ErrorClass:
    """Return the class registered for a two-character prefix.

    Raise `UnknownErrorCode` if the prefix is not registered.
    """
    try:
        return ErrorClass(prefix)
    except ValueError:
        raise UnknownErrorCode(str(prefix) if prefix is not None else "") from None


def lookup_code(code: Union[str, ErrorCode]) -> ErrorCode:
    """Return the code registered for an exact five-character SQLSTATE.

    Raise `UnknownErrorCode` if the SQLSTATE is not registered.
    """
    try:
        return ErrorCode(code)
    except ValueError:
        raise UnknownErrorCode(str(code) if code is not None else "") from None


def class_of(code: Union[str, ErrorCode]) -> ErrorClass:
    """Return the class owning a registered SQLSTATE (its first two characters)."""
    return lookup_code(code).error_class


def error_name(code: Union[str, ErrorCode]) -> str:
    """Return the display name of a registered SQLSTATE, e.g. ``"SyntaxError"``."""
    return _ERROR_NAMES[lookup_code(code)]


def codes_in(error_class: Union[str, ErrorClass]) -> tuple:
    """Return the codes registered under a class, in appendix order."""
    return _CODES_BY_CLASS[lookup_class(error_class)]
