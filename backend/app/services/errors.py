"""Errors raised by the record store and domain views."""


class ValidationRejected(Exception):
    """A draft record failed its domain's validation rules."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DeserializationFailed(Exception):
    """A persisted snapshot could not be decoded into records."""

    def __init__(self, key: str, reason: str = ""):
        message = f"Malformed snapshot under '{key}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.key = key
        self.reason = reason
