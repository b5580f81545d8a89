"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """
    Result wrapper for use cases.

    Use cases signal failure by raising a DomainException, which the API
    exception handler maps to a response; a returned result is a success.
    """
    data: Optional[OutputDTO] = None
    success: bool = True

    @classmethod
    def ok(cls, data: OutputDTO) -> 'UseCaseResult[OutputDTO]':
        """Create a successful result."""
        return cls(data=data)


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case; raise a DomainException on failure."""
