"""Type aliases for the hookquery package.

This module provides reusable type definitions to ensure consistency
across the codebase and improve code readability.
"""

from typing import Any, Callable, Dict, Optional, Union

# Wire descriptor / payload handed to the transport
WireQuery = Dict[str, Any]
Payload = Any

# Item identifiers are appended to the collection path verbatim
ItemId = Union[str, int]

# Sort direction as accepted by `sort()`: -1 / 1, "asc" / "desc", or any verbatim value
Direction = Optional[Union[int, float, str]]

# Continuations attached to a transport future
OnComplete = Callable[[Any], Any]
OnError = Callable[[BaseException], Any]
