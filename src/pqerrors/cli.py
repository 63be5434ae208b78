from __future__ import annotations

import json
from typing import Optional

import typer
from loguru import logger

from .adapter import PsycopgTransport, connect, execute
from .config import get_settings
from .errors import PQException, UnknownErrorCode, debug_repr, display
from .registry import ErrorClass, ErrorCode, codes_in, lookup_class, lookup_code
from .utils import chomp, configure_logging

app = typer.Typer(help="pqerrors: PostgreSQL error classification CLI")


def dsn_opt() -> Optional[str]:
    return typer.Option(
        None, "--dsn", help="PostgreSQL DSN (default: PQERRORS_DATABASE_URL)"
    )


def _code_row(code: ErrorCode) -> dict:
    return {
        "sqlstate": code.value,
        "constant": code.name,
        "name": code.display_name,
        "class": code.error_class.value,
        "class_description": code.error_class.description,
    }


def _class_row(error_class: ErrorClass) -> dict:
    return {
        "class": error_class.value,
        "constant": error_class.name,
        "description": error_class.description,
        "codes": len(error_class.codes),
    }


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level for stderr"),
):
    configure_logging(log_level or get_settings().LOG_LEVEL)


# ---------------------------
# Registry
# ---------------------------


@app.command("lookup")
def lookup(sqlstate: str = typer.Argument(..., help="Five-character SQLSTATE, e.g. 42601")):
    """Show the class, constant and display name of a SQLSTATE."""
    try:
        code = lookup_code(sqlstate.strip().upper())
    except UnknownErrorCode as e:
        logger.error(f"{e}")
        raise typer.Exit(1)
    typer.echo(json.dumps(_code_row(code), indent=2))


@app.command("classes")
def classes():
    """List every error class."""
    for error_class in ErrorClass:
        typer.echo(json.dumps(_class_row(error_class)))


@app.command("codes")
def codes(
    class_: Optional[str] = typer.Option(None, "--class", help="Only codes of this class, e.g. 23"),
):
    """List every error code, optionally for a single class."""
    if class_ is None:
        selected = list(ErrorCode)
    else:
        try:
            selected = list(codes_in(lookup_class(class_.strip().upper())))
        except UnknownErrorCode as e:
            logger.error(f"{e}")
            raise typer.Exit(1)
    for code in selected:
        typer.echo(json.dumps(_code_row(code)))


# ---------------------------
# Live check
# ---------------------------


@app.command("check")
def check(
    sql: str = typer.Argument(..., help="Statement to run"),
    dsn: Optional[str] = dsn_opt(),
    verbose: Optional[bool] = typer.Option(
        None, "--verbose/--brief", help="Fetch the verbose server report"
    ),
    debug: bool = typer.Option(False, "--debug", help="Print the constructor-style form"),
):
    """Run a statement and print how its failure is classified."""
    settings = get_settings()
    dsn = dsn or settings.database_url
    if not dsn:
        logger.error("No DSN given (use --dsn or PQERRORS_DATABASE_URL)")
        raise typer.Exit(2)

    include_verbose = settings.VERBOSE_ERRORS if verbose is None else verbose
    transport = PsycopgTransport(encoding=settings.CLIENT_ENCODING)
    try:
        with connect(dsn, transport=transport) as conn:
            rows = execute(conn, sql, include_verbose=include_verbose, transport=transport)
    except PQException as err:
        if isinstance(err, UnknownErrorCode):
            logger.error(f"Could not classify failure: {err}")
            if err.__cause__ is not None:
                logger.error(f"Server reported: {chomp(str(err.__cause__))}")
        typer.echo(debug_repr(err) if debug else display(err))
        raise typer.Exit(1)

    typer.echo(json.dumps({"ok": True, "rows": len(rows)}))


if __name__ == "__main__":
    app()
