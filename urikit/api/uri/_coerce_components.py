from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .UriComponents import UriComponents


def _coerce_components(change: UriComponents | Mapping[str, Any] | None, fields: dict[str, Any]) -> UriComponents:
    """Merge a change record and keyword overrides into one UriComponents.

    Raises:
        TypeError: If the record is neither a mapping nor UriComponents, has
            unknown keys, or holds non-string values
    """
    if change is None:
        merged: dict[str, Any] = {}
    elif isinstance(change, UriComponents):
        merged = change.model_dump(exclude_none=True)
    elif isinstance(change, Mapping):
        merged = {key: value for key, value in change.items() if value is not None}
    else:
        raise TypeError(f"URI components must be a mapping or UriComponents, got {type(change).__name__}")

    merged.update({key: value for key, value in fields.items() if value is not None})

    try:
        return UriComponents.model_validate(merged)
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(x) for x in first.get("loc", ()))
        raise TypeError(f"Invalid URI components: {loc}: {first.get('msg', str(e))}") from e
