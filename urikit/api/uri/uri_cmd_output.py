from .URI import URI
from .UriCmdOutput import UriCmdOutput


def uri_cmd_output(uri: URI, warnings: list[str] | None = None) -> dict:
    """Dump a URI into the UriCmdOutput structure."""
    return UriCmdOutput(
        errors=[],
        warnings=warnings or [],
        uri=uri.to_string(),
        readable=uri.to_string(skip_encoding=True),
        scheme=uri.scheme,
        authority=uri.authority,
        path=uri.path,
        query=uri.query,
        fragment=uri.fragment,
        fs_path=uri.fs_path,
    ).model_dump(mode="python")
