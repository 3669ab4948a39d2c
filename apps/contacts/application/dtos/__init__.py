# DTOs
from .contact_dto import TelephoneNumberDTO, PersonDTO, OfficeContactUpdateDTO

__all__ = ['TelephoneNumberDTO', 'PersonDTO', 'OfficeContactUpdateDTO']
