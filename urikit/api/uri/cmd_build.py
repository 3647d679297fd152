"""Build command - assembles a URI from individual components."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .URI import URI
from .uri_cmd_output import uri_cmd_output
from .UriCmdOutput import UriCmdOutput


def cmd_build(
    scheme: str | None = None,
    authority: str | None = None,
    path: str | None = None,
    query: str | None = None,
    fragment: str | None = None,
) -> StageResult:
    """Build a URI from decoded components.

    Args:
        scheme: Scheme, e.g. 'http'
        authority: Authority, e.g. 'example.com:8080'
        path: Decoded path
        query: Decoded query
        fragment: Decoded fragment

    Returns:
        StageResult with the URI in output
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Validating components...")
        try:
            uri = URI.from_components(
                {"scheme": scheme, "authority": authority, "path": path, "query": query, "fragment": fragment}
            )
        except (TypeError, ValueError) as e:
            result_obj.output = UriCmdOutput(errors=[str(e)]).model_dump(mode="python")
            result_obj.result = f"Invalid components: {e}"
            result_obj.success = False
            yield (1.0, "Failed")
            return

        result_obj.output = uri_cmd_output(uri)
        result_obj.result = f"Built {uri}"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Building URI from components...",
        progress_callback=do_work,
    )
