"""Resolve command - resolves path fragments against a URI."""

from collections.abc import Iterator

from ..StageResult import StageResult
from ..uri.URI import URI
from ..uri.uri_cmd_output import uri_cmd_output
from ..uri.UriCmdOutput import UriCmdOutput
from .resolve_path import resolve_path


def cmd_resolve(uri: str, segments: list[str]) -> StageResult:
    """Resolve path fragments against the path of a URI."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Parsing base URI...")
        try:
            base = URI.parse(uri)
            yield (0.6, "Resolving path...")
            resolved = resolve_path(base, *segments)
        except (TypeError, ValueError) as e:
            result_obj.output = UriCmdOutput(errors=[str(e)]).model_dump(mode="python")
            result_obj.result = f"Resolve failed: {e}"
            result_obj.success = False
            yield (1.0, "Failed")
            return

        result_obj.output = uri_cmd_output(resolved)
        result_obj.result = f"Resolved to {resolved}"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Resolving {len(segments)} segment(s) against {uri}...",
        progress_callback=do_work,
    )
