"""
Contacts domain exceptions.
"""
from shared.domain.exceptions import ValidationError


class InvalidContactPayloadError(ValidationError):
    """Raised when a contact payload cannot be read into a domain object."""

    def __init__(self, field: str, detail: str):
        super().__init__(message=f"Invalid contact payload for '{field}': {detail}", field=field)
        self.detail = detail
