from .RawComponents import RawComponents
from .URI_PATTERN import URI_PATTERN


def split_components(value: str) -> RawComponents:
    """Split a URI string into scheme, authority, path, query and fragment.

    No decoding and no validation happens here.

    Examples:
        >>> split_components("foo://example.com:8042/over/there?name=ferret#nose")
        RawComponents(scheme='foo', authority='example.com:8042', path='/over/there', query='name=ferret', fragment='nose')
    """
    match = URI_PATTERN.match(value)
    if match is None:
        return RawComponents()
    return RawComponents(
        scheme=match.group(2) or "",
        authority=match.group(4) or "",
        path=match.group(5) or "",
        query=match.group(7) or "",
        fragment=match.group(9) or "",
    )
