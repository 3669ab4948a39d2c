"""
Person entity.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Person:
    """Person holding office contact fields."""
    office_area_code: Optional[str] = None
    office_number: Optional[str] = None

    def update_office_contact(
        self,
        office_area_code: Optional[str] = None,
        office_number: Optional[str] = None,
    ) -> None:
        """Update office contact fields that were provided."""
        if office_area_code is not None:
            self.office_area_code = office_area_code
        if office_number is not None:
            self.office_number = office_number
