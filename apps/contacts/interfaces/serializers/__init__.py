# Serializers
from .telephone_number_serializer import TelephoneNumberSerializer
from .person_serializer import PersonSerializer
from .parsers import parse_telephone_number, parse_person

__all__ = [
    'TelephoneNumberSerializer',
    'PersonSerializer',
    'parse_telephone_number',
    'parse_person',
]
