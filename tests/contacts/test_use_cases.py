"""
Contacts use case tests.
"""
import logging

from apps.contacts.application.dtos import (
    OfficeContactUpdateDTO,
    PersonDTO,
    TelephoneNumberDTO,
)
from apps.contacts.application.use_cases import UpdateOfficeContactUseCase
from apps.contacts.domain import Person


class TestContactDTOs:

    def test_telephone_number_dto_from_entity(self, telephone_number):
        dto = TelephoneNumberDTO.from_entity(telephone_number)

        assert dto == TelephoneNumberDTO(area_code='123', number='456')

    def test_person_dto_from_entity(self, person):
        dto = PersonDTO.from_entity(person)

        assert dto.office_area_code == '020'
        assert dto.office_number == '7946 0018'


class TestUpdateOfficeContactUseCase:

    def test_updates_both_fields(self):
        person = Person()
        use_case = UpdateOfficeContactUseCase(person=person)

        result = use_case.execute(
            OfficeContactUpdateDTO(office_area_code='123', office_number='456')
        )

        assert result.success is True
        assert result.data == PersonDTO(office_area_code='123', office_number='456')
        assert person.office_area_code == '123'
        assert person.office_number == '456'

    def test_partial_update_leaves_other_field(self, person):
        use_case = UpdateOfficeContactUseCase(person=person)

        result = use_case.execute(OfficeContactUpdateDTO(office_area_code='0161'))

        assert result.data.office_area_code == '0161'
        assert result.data.office_number == '7946 0018'

    def test_logs_update(self, person, caplog):
        use_case = UpdateOfficeContactUseCase(person=person)

        with caplog.at_level(logging.INFO, logger='apps.contacts'):
            use_case.execute(OfficeContactUpdateDTO(office_number='555'))

        assert 'Office contact updated' in caplog.text

    def test_run_returns_ok_result(self, person):
        result = UpdateOfficeContactUseCase(person=person).run(
            OfficeContactUpdateDTO(office_area_code='', office_number='')
        )

        assert result.success is True
        assert result.data == PersonDTO(office_area_code='', office_number='')
