"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Get the display format from the command's context chain.

    Falls back to yaml when no context in the chain carries the flag, e.g.
    when a sub-app runs without the main callback.
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(func: F, ctx: typer.Context | None = None) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as YAML or JSON)

    Args:
        func: Command function returning a StageResult
        ctx: Context of the invoked Typer command; the main callback stores
            the `--display` choice on the root context
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format(ctx))

    return wrapper  # type: ignore[return-value]
