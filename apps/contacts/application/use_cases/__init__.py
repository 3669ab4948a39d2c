# Use cases
from .update_office_contact import UpdateOfficeContactUseCase

__all__ = ['UpdateOfficeContactUseCase']
