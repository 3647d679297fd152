"""Join command - appends path fragments to a URI."""

from collections.abc import Iterator

from ..StageResult import StageResult
from ..uri.URI import URI
from ..uri.uri_cmd_output import uri_cmd_output
from ..uri.UriCmdOutput import UriCmdOutput
from .join_path import join_path


def cmd_join(uri: str, segments: list[str]) -> StageResult:
    """Join path fragments onto the path of a URI.

    Args:
        uri: Base URI string
        segments: Fragments to append

    Returns:
        StageResult with the joined URI in output
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Parsing base URI...")
        try:
            base = URI.parse(uri)
            yield (0.6, "Joining path...")
            joined = join_path(base, *segments)
        except (TypeError, ValueError) as e:
            result_obj.output = UriCmdOutput(errors=[str(e)]).model_dump(mode="python")
            result_obj.result = f"Join failed: {e}"
            result_obj.success = False
            yield (1.0, "Failed")
            return

        result_obj.output = uri_cmd_output(joined)
        result_obj.result = f"Joined to {joined}"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Joining {len(segments)} segment(s) onto {uri}...",
        progress_callback=do_work,
    )
