"""Dirname command - strips the last segment of a URI path."""

from collections.abc import Iterator

from ..StageResult import StageResult
from ..uri.URI import URI
from ..uri.uri_cmd_output import uri_cmd_output
from ..uri.UriCmdOutput import UriCmdOutput
from .dirname import dirname


def cmd_dirname(uri: str) -> StageResult:
    """Compute the parent URI."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Computing directory...")
        try:
            base = URI.parse(uri)
        except (TypeError, ValueError) as e:
            result_obj.output = UriCmdOutput(errors=[str(e)]).model_dump(mode="python")
            result_obj.result = f"Invalid URI: {e}"
            result_obj.success = False
            yield (1.0, "Failed")
            return

        parent = dirname(base)
        warnings = [] if parent is not base else ["Path has no directory part; URI unchanged"]
        result_obj.output = uri_cmd_output(parent, warnings)
        result_obj.result = f"Directory is {parent}"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Computing directory of {uri}...",
        progress_callback=do_work,
    )
