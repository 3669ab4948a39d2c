"""
Telephone number value object.
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import ValueObject


@dataclass(eq=False)
class TelephoneNumber(ValueObject):
    """
    Telephone number made of an area code and a subscriber number.

    Both parts are stored as opaque strings. No format is enforced and
    either part may be reassigned after construction.
    """
    area_code: Optional[str] = None
    number: Optional[str] = None
