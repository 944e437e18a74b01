"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class SignatureError(UtilError):
    """Raised when a signed payload fails verification."""

    pass
