"""
Payload parsing into contact domain objects.
"""
import logging

from ...domain.entities.person import Person
from ...domain.exceptions import InvalidContactPayloadError
from ...domain.value_objects.telephone_number import TelephoneNumber
from .person_serializer import PersonSerializer
from .telephone_number_serializer import TelephoneNumberSerializer

logger = logging.getLogger(__name__)


def _parse(serializer_class, payload):
    serializer = serializer_class(data=payload)
    if not serializer.is_valid():
        field, errors = next(iter(serializer.errors.items()))
        detail = str(errors[0])
        logger.warning(f"{serializer_class.__name__} rejected payload: {field}: {detail}")
        raise InvalidContactPayloadError(field=field, detail=detail)
    return serializer.save()


def parse_telephone_number(payload) -> TelephoneNumber:
    """Build a TelephoneNumber from a payload dict."""
    return _parse(TelephoneNumberSerializer, payload)


def parse_person(payload) -> Person:
    """Build a Person from a payload dict."""
    return _parse(PersonSerializer, payload)
