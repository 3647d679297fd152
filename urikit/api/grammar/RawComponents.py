from dataclasses import dataclass


@dataclass(frozen=True)
class RawComponents:
    """The five components of a URI string, still percent-encoded.

    Components absent from the string are empty strings, never None.
    """

    scheme: str = ""
    authority: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""
