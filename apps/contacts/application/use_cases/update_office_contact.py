"""
Update office contact use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.entities.person import Person
from ..dtos.contact_dto import OfficeContactUpdateDTO, PersonDTO

logger = logging.getLogger(__name__)


@dataclass
class UpdateOfficeContactUseCase(UseCase[OfficeContactUpdateDTO, PersonDTO]):
    """Use case for changing a person's office contact fields."""

    person: Person

    def execute(self, input_dto: OfficeContactUpdateDTO) -> UseCaseResult[PersonDTO]:
        self.person.update_office_contact(
            office_area_code=input_dto.office_area_code,
            office_number=input_dto.office_number,
        )
        logger.info(
            f"Office contact updated: area_code={self.person.office_area_code}, "
            f"number={self.person.office_number}"
        )
        return UseCaseResult.ok(PersonDTO.from_entity(self.person))
