"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from typing import TypeVar

from urikit.cli.display.Display import Display

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str,
) -> None:
    """Run command once and display result.

    Commands must handle their expected exceptions internally and report
    errors via their output schema.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        display.info(f"Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Stage 3: Result
    for warning in result.output.get("warnings", []):
        display.warning(warning)
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
