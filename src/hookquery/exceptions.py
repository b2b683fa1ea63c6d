"""Custom exceptions for the hookquery library.

This module defines the exceptions raised by collection builders, plus the
error type transports are expected to report through a future's failure
channel.
"""

from typing import Any, Dict


# Base exception
class HookQueryError(Exception):
    """Base exception for all hookquery errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        """Initialize exception with message and additional details.

        Args:
            message: Human-readable error message
            **kwargs: Additional context (e.g., name, path, status)
        """
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message with details."""
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        """Return detailed representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# Construction exceptions
class ConstructionError(HookQueryError):
    """Raised when a collection builder cannot be constructed.

    Example:
        >>> raise ConstructionError("Invalid name", name="Posts")
    """


# Capability exceptions
class ChannelNotImplementedError(HookQueryError, NotImplementedError):
    """Raised when the real-time channel of a collection is requested.

    Example:
        >>> raise ChannelNotImplementedError("Not implemented.", collection="posts")
    """


# Transport exceptions
class TransportError(HookQueryError):
    """Failure reported by a transport through a future's exception channel.

    The builder never raises or inspects it; it reaches callers unmodified.

    Example:
        >>> raise TransportError("Not found", status=404, path="collection/posts/7")
    """

    @property
    def status(self) -> Any:
        return self.details.get("status")
