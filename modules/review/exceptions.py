"""
Review module exceptions.
"""

from shared.exceptions import ValidationError


class MissingCodeError(ValidationError):
    """Raised when a review request has no usable ``code`` text."""

    def __init__(self, message: str = "code required"):
        super().__init__(message, code="MISSING_CODE")
