"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Application flow that coordinates domain services and repositories.

    A use case takes one request model and returns one response model.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
