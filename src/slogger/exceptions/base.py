"""
Custom exceptions for record rendering.
"""


class FormatError(Exception):
    """
    Raised when a log record cannot be rendered.

    The only failure path of the renderer is attribute serialization: a value
    that JSON cannot represent (a socket, a lock, a cyclic dict, ...).

    - message: human-friendly message
    - key: the attribute key that could not be serialized, when it is known
    """

    def __init__(self, message: str, *, key: str | None = None):
        super().__init__(message)
        self.message = message
        self.key = key

    def __str__(self) -> str:
        if self.key:
            return f"{self.message} (key: {self.key})"
        return self.message


__all__ = ["FormatError"]
