"""Output schema for commands that produce a URI."""

from pydantic import BaseModel, ConfigDict, Field


class UriCmdOutput(BaseModel):
    """A URI with its components, as reported by CLI commands."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    uri: str = Field("", description="Canonical (encoded) string")
    readable: str = Field("", description="String with encoding skipped")
    scheme: str = ""
    authority: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""
    fs_path: str = ""
