# Shared domain module
from .base_value_object import ValueObject
from .exceptions import DomainException, ValidationError

__all__ = [
    'ValueObject',
    'DomainException',
    'ValidationError',
]
