# Contacts domain
from .entities import Person
from .value_objects import TelephoneNumber
from .exceptions import InvalidContactPayloadError

__all__ = ['Person', 'TelephoneNumber', 'InvalidContactPayloadError']
