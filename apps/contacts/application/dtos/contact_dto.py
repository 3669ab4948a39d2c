"""
Contact DTOs.
"""
from dataclasses import dataclass
from typing import Optional

from ...domain.entities.person import Person
from ...domain.value_objects.telephone_number import TelephoneNumber


@dataclass
class TelephoneNumberDTO:
    """DTO for telephone number output."""
    area_code: Optional[str]
    number: Optional[str]

    @classmethod
    def from_entity(cls, telephone_number: TelephoneNumber) -> 'TelephoneNumberDTO':
        """Create DTO from value object."""
        return cls(
            area_code=telephone_number.area_code,
            number=telephone_number.number,
        )


@dataclass
class PersonDTO:
    """DTO for person output."""
    office_area_code: Optional[str]
    office_number: Optional[str]

    @classmethod
    def from_entity(cls, person: Person) -> 'PersonDTO':
        """Create DTO from entity."""
        return cls(
            office_area_code=person.office_area_code,
            office_number=person.office_number,
        )


@dataclass
class OfficeContactUpdateDTO:
    """DTO for updating office contact fields."""
    office_area_code: Optional[str] = None
    office_number: Optional[str] = None
