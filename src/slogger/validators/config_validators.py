def to_uppercase(value: str | None) -> str | None:
    """
    Converts a string to uppercase if it's not None.
    """
    if value is None:
        return None
    return value.strip().upper()

def to_lowercase(value: str | None) -> str | None:
    """
    Converts a string to lowercase if it's not None.
    """
    if value is None:
        return None
    return value.strip().lower()

def normalize_level_name(value: str | None) -> str | None:
    """
    Map level aliases onto the four names the renderer knows.

    "WARNING" is accepted because that is what the stdlib calls it.
    """
    value = to_uppercase(value)
    if value == "WARNING":
        return "WARN"
    return value
