"""Component record used to build or derive URIs."""

from pydantic import BaseModel, ConfigDict, Field


class UriComponents(BaseModel):
    """Optional per-field values for `URI.from_components` and `URI.with_changes`.

    A field left as None (or set to an empty string) keeps the current value
    of the URI it is applied to.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    scheme: str | None = Field(None, description="e.g. 'http' or 'file'")
    authority: str | None = Field(None, description="e.g. 'www.example.com:8080'")
    path: str | None = Field(None, description="Decoded path, e.g. '/some/path'")
    query: str | None = Field(None, description="Decoded query without '?'")
    fragment: str | None = Field(None, description="Decoded fragment without '#'")
