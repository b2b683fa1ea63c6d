"""Base compiler interface.

Defines the abstract contract query compilers must follow.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..accumulator import FilterAccumulator

__all__ = ("BaseCompiler",)


class BaseCompiler(ABC):
    """Abstract base class for query compilers.

    `compile` is a fetch-and-clear operation: it returns a read-only
    descriptor of the accumulator's current state and resets the accumulator
    before returning.
    """

    @abstractmethod
    def compile(self, accumulator: FilterAccumulator) -> Any:
        """Convert accumulator state into a descriptor, then reset it."""
        raise NotImplementedError
