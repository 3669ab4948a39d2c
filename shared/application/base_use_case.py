"""
Base use case classes.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar, Optional

from shared.domain.exceptions import DomainException

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')

logger = logging.getLogger(__name__)


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """Result wrapper for use cases."""
    success: bool
    data: Optional[OutputDTO] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def ok(cls, data: OutputDTO) -> 'UseCaseResult[OutputDTO]':
        """Create a successful result."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, error_code: str = None) -> 'UseCaseResult[OutputDTO]':
        """Create a failed result."""
        return cls(success=False, error=error, error_code=error_code)


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """
    Base use case class.

    ``execute`` may raise domain exceptions; ``run`` reports them as a
    failed result instead.
    """

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case."""
        pass

    def run(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case, turning domain errors into a failed result."""
        try:
            return self.execute(input_dto)
        except DomainException as e:
            logger.warning(f"{self.__class__.__name__} failed: [{e.code}] {e.message}")
            return UseCaseResult.fail(e.message, error_code=e.code)
