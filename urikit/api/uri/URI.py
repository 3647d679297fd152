from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..codec.decode_component import decode_component
from ..grammar.split_components import split_components
from ..platform.get_platform_config import get_platform_config
from ._coerce_components import _coerce_components
from ._validate_components import _validate_components
from .compute_fs_path import compute_fs_path
from .format_uri import format_uri
from .UriComponents import UriComponents


@dataclass(frozen=True)
class URI:
    """Uniform Resource Identifier (RFC 3986) value object.

    Holds the five decoded components of the generic syntax. Instances are
    immutable; derived URIs come from `with_changes` or the path helpers in
    `urikit.api.path`.

          foo://example.com:8042/over/there?name=ferret#nose
          \\_/   \\______________/\\_________/ \\_________/ \\__/
           |           |            |            |        |
        scheme     authority       path        query   fragment

    Equality and hashing only look at the five components. The canonical
    string and the filesystem path are computed lazily and cached.
    """

    scheme: str = ""
    authority: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""

    _formatted: str | None = field(default=None, init=False, repr=False, compare=False)
    _fs_paths: dict[bool, str] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        for name in ("scheme", "authority", "path", "query", "fragment"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"URI {name} must be a string")
        _validate_components(self.authority, self.path)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"URI('{self.to_string()}')"

    # ---- construction ---------------------------------------------------

    @classmethod
    def parse(cls, value: str) -> "URI":
        """Create a URI from its string form.

        The scheme is taken verbatim; authority, path, query and fragment are
        percent-decoded.

        Raises:
            TypeError: If value is not a string
            UriError: If the authority/path combination is invalid
        """
        if not isinstance(value, str):
            raise TypeError("URI value must be a string")

        raw = split_components(value)
        return cls(
            scheme=raw.scheme,
            authority=decode_component(raw.authority),
            path=decode_component(raw.path),
            query=decode_component(raw.query),
            fragment=decode_component(raw.fragment),
        )

    @classmethod
    def from_components(cls, components: UriComponents | Mapping[str, Any]) -> "URI":
        """Create a URI from a component record.

        Raises:
            TypeError: If components is None or not a valid record
            UriError: If the authority/path combination is invalid
        """
        if components is None:
            raise TypeError("URI components must not be None")
        return cls().with_changes(components)

    @classmethod
    def file(cls, path: str) -> "URI":
        """Create a `file` URI from a filesystem or UNC path.

        Backslashes are treated as separators. A leading `//host` becomes the
        authority, and the resulting path always starts with `/`.

        Examples:
            >>> URI.file("c:\\\\win\\\\path").path
            '/c:/win/path'
            >>> URI.file("\\\\\\\\server\\\\share\\\\doc.txt").authority
            'server'
        """
        if not isinstance(path, str):
            raise TypeError("File path must be a string")

        path = path.replace("\\", "/")
        authority = ""
        if path.startswith("//"):
            idx = path.find("/", 2)
            if idx == -1:
                authority = path[2:]
                path = ""
            else:
                authority = path[2:idx]
                path = path[idx:]

        if not path.startswith("/"):
            path = "/" + path

        return cls(scheme="file", authority=authority, path=path)

    # ---- derivation -----------------------------------------------------

    def with_changes(self, change: UriComponents | Mapping[str, Any] | None = None, /, **fields: str | None) -> "URI":
        """Derive a URI with some components replaced.

        Empty or missing values keep the current component, so a component
        cannot be cleared this way. Returns `self` when nothing changes.

        Examples:
            >>> URI.parse("before:some/file/path").with_changes(scheme="after")
            URI('after:some/file/path')

        Raises:
            TypeError: If the change record is malformed
            UriError: If the result violates the authority/path rules
        """
        if change is None and not fields:
            return self

        overrides = _coerce_components(change, fields)
        scheme = overrides.scheme or self.scheme
        authority = overrides.authority or self.authority
        path = overrides.path or self.path
        query = overrides.query or self.query
        fragment = overrides.fragment or self.fragment

        if (
            scheme == self.scheme
            and authority == self.authority
            and path == self.path
            and query == self.query
            and fragment == self.fragment
        ):
            return self

        return URI(scheme=scheme, authority=authority, path=path, query=query, fragment=fragment)

    # ---- serialization --------------------------------------------------

    def to_string(self, skip_encoding: bool = False) -> str:
        """Return the string form of this URI.

        Args:
            skip_encoding: Keep characters human-readable instead of
                percent-encoding them. Only the encoded form is cached.
        """
        if skip_encoding:
            return format_uri(self.scheme, self.authority, self.path, self.query, self.fragment, skip_encoding=True)
        if self._formatted is None:
            object.__setattr__(
                self, "_formatted", format_uri(self.scheme, self.authority, self.path, self.query, self.fragment)
            )
        return self._formatted

    @property
    def fs_path(self) -> str:
        """Filesystem path for this URI using the process platform config.

        Handles UNC authorities and lower-cases drive letters. Does not look
        at the scheme beyond UNC detection and does not validate the path.
        """
        return self.to_fs_path()

    def to_fs_path(self, windows_paths: bool | None = None) -> str:
        """Filesystem path for this URI.

        The result is cached once per separator convention and never
        replaced afterwards.

        Args:
            windows_paths: Use backslash separators. Defaults to the process
                platform config.
        """
        if windows_paths is None:
            windows_paths = get_platform_config().windows_paths

        cached = self._fs_paths.get(windows_paths)
        if cached is None:
            cached = self._fs_paths.setdefault(
                windows_paths, compute_fs_path(self.scheme, self.authority, self.path, windows_paths)
            )
        return cached

    def to_json(self) -> dict[str, str]:
        """Structural snapshot for serialization boundaries."""
        return {
            "scheme": self.scheme,
            "authority": self.authority,
            "path": self.path,
            "fsPath": self.fs_path,
            "query": self.query,
            "fragment": self.fragment,
        }
