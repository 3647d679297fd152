"""Output schema for commands that extract a name from a URI path."""

from pydantic import BaseModel, ConfigDict, Field


class PathNameCmdOutput(BaseModel):
    """A string derived from a URI path (basename or extension)."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    uri: str = Field("", description="Input URI in canonical form")
    value: str = Field("", description="Extracted name")
