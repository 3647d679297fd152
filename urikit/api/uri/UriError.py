"""Error raised when URI components violate RFC 3986 section 3.3."""

from typing import Literal

UriRule = Literal["authority_path", "double_slash_path"]


class UriError(ValueError):
    """A URI whose authority and path cannot be serialized unambiguously.

    Attributes:
        rule: Which structural rule failed. `authority_path` when an authority
            is present but the path is non-empty and does not start with `/`;
            `double_slash_path` when there is no authority but the path starts
            with `//`.
    """

    def __init__(self, rule: UriRule, message: str):
        super().__init__(f"[UriError]: {message}")
        self.rule = rule
