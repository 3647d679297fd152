def percent_encode_char(ch: str) -> str:
    """Escape a single ASCII character as `%XX` with upper-case hex digits."""
    return f"%{ord(ch):02X}"
