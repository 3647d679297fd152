from collections.abc import Callable, Iterator

from ..StageResult import StageResult
from ..uri.URI import URI
from .PathNameCmdOutput import PathNameCmdOutput


def _cmd_path_name(uri: str, label: str, extract: Callable[[URI], str]) -> StageResult:
    """Shared body of the basename and extname commands."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, f"Computing {label}...")
        try:
            base = URI.parse(uri)
        except (TypeError, ValueError) as e:
            result_obj.output = PathNameCmdOutput(errors=[str(e)]).model_dump(mode="python")
            result_obj.result = f"Invalid URI: {e}"
            result_obj.success = False
            yield (1.0, "Failed")
            return

        value = extract(base)
        result_obj.output = PathNameCmdOutput(uri=base.to_string(), value=value).model_dump(mode="python")
        result_obj.result = f"{label.capitalize()}: {value!r}"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Computing {label} of {uri}...",
        progress_callback=do_work,
    )
