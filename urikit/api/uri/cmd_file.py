"""File command - builds a file URI from a filesystem path."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .URI import URI
from .uri_cmd_output import uri_cmd_output


def cmd_file(path: str) -> StageResult:
    """Convert a filesystem or UNC path into a `file` URI.

    No filesystem access happens; the path does not need to exist.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Converting path...")
        uri = URI.file(path)

        warnings = []
        if "://" in path:
            warnings.append(f"Path looks like a URI already: {path}")

        result_obj.output = uri_cmd_output(uri, warnings)
        result_obj.result = f"Converted to {uri}"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Converting {path} to a file URI...",
        progress_callback=do_work,
    )
