"""
Domain exceptions shared by every bounded context.
"""


class DomainException(Exception):
    """Base exception for domain layer. ``code`` defaults to the class name."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Raised when input cannot be accepted; ``field`` names the offending input."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field
