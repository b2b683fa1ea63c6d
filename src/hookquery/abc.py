"""Abstract transport interface.

Defines the contract a transport must follow to carry collection requests to
the remote service. Every verb returns a `concurrent.futures.Future`; failures
are reported through the future's exception channel, never raised from the
call itself.
"""

from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Optional

from .types import Payload, WireQuery

__all__ = ("Transport",)


class Transport(ABC):
    """Abstract base class for request transports (HTTP or equivalent)."""

    @abstractmethod
    def get(self, path: str, query: Optional[WireQuery] = None) -> Future:
        """Read `path`, passing the compiled query descriptor."""
        raise NotImplementedError

    @abstractmethod
    def post(self, path: str, payload: Payload = None) -> Future:
        """Create at `path` with `payload` (raw data or a compiled descriptor)."""
        raise NotImplementedError

    @abstractmethod
    def put(self, path: str, payload: Payload = None) -> Future:
        """Update at `path` with `payload` (raw data or a compiled descriptor)."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, path: str, query: Optional[WireQuery] = None) -> Future:
        """Delete at `path`, optionally scoped by a compiled query descriptor."""
        raise NotImplementedError
