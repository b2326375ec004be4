"""
Freight Errors

Raised for bad input and bad configuration. None of these are transient:
callers should fix the input rather than retry.
"""


class FreightError(Exception):
    """Base class for all freight calculation errors."""


class ValidationError(FreightError, ValueError):
    """A delivery record field is missing or invalid."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class UnsupportedFreightTypeError(FreightError, LookupError):
    """No strategy is registered for a freight code."""

    def __init__(self, code: str | None):
        super().__init__(f"Unsupported freight type: {code}")
        self.code = code


class DuplicateFreightCodeError(FreightError, ValueError):
    """Two strategies were registered under the same freight code."""

    def __init__(self, code: str, existing: str, duplicate: str):
        super().__init__(
            f"Freight code '{code}' is registered twice ({existing} and {duplicate})"
        )
        self.code = code
