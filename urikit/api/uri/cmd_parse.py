"""Parse command - decomposes a URI string into its components."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .URI import URI
from .uri_cmd_output import uri_cmd_output
from .UriCmdOutput import UriCmdOutput


def cmd_parse(value: str) -> StageResult:
    """Parse a URI string.

    Args:
        value: URI string

    Returns:
        StageResult with the components in output
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Parsing URI...")
        try:
            uri = URI.parse(value)
        except (TypeError, ValueError) as e:
            result_obj.output = UriCmdOutput(errors=[str(e)]).model_dump(mode="python")
            result_obj.result = f"Invalid URI: {e}"
            result_obj.success = False
            yield (1.0, "Failed")
            return

        result_obj.output = uri_cmd_output(uri)
        result_obj.result = f"Parsed {uri}"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Parsing {value}...",
        progress_callback=do_work,
    )
