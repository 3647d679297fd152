def encode_noop(value: str) -> str:
    """Return the value unchanged (used for human-readable output)."""
    return value
