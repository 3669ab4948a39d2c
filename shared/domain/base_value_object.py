"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ValueObject(ABC):
    """
    Base value object class.
    Value objects of the same concrete type are compared by their attributes,
    not by identity.
    Fields stay assignable, so instances are not hashable.
    """

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return False
        return self.__dict__ == other.__dict__

    __hash__ = None

    def equals(self, other: Any) -> bool:
        """Check structural equality against another value object."""
        return self == other
