"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from semtag.core.errors import ErrorCode
from semtag.core.result import Err, Result
from semtag.output.console import Style

if TYPE_CHECKING:
    from semtag.cli.context import CLIContext


def exit_on_error[T, E](
    result: Result[T, E],
    ctx: CLIContext,
    error_code: ErrorCode = ErrorCode.GIT_ERROR,
) -> None:
    """Exit with ``error_code`` if result is Err, otherwise return.

    Expects error objects to have a 'message' attribute; a 'command' attribute
    is shown as a dim hint.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        command: str | None = getattr(error, "command", None)
        ctx.console.error(message)
        if command:
            ctx.console.print(f"command: git {command}", Style.DIM)
        raise typer.Exit(code=int(error_code))
