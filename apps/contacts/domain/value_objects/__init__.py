# Value objects
from .telephone_number import TelephoneNumber

__all__ = ['TelephoneNumber']
