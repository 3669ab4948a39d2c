"""
Pytest configuration and fixtures.
"""
import pytest

from apps.contacts.domain import Person, TelephoneNumber


@pytest.fixture
def telephone_number():
    """Create a populated telephone number."""
    return TelephoneNumber('123', '456')


@pytest.fixture
def person():
    """Create a person with office contact fields set."""
    return Person(office_area_code='020', office_number='7946 0018')
