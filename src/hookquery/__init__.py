"""
This __init__.py file makes the hookquery directory a Python package
and exposes the `Client`, `Collection` and transport contract for easy access.
"""

from .abc import Transport
from .client import Client
from .collection import Collection
from .exceptions import ChannelNotImplementedError, ConstructionError, HookQueryError, TransportError
from .pagination import Pagination
from .schema import QueryDescriptor

__version__ = "0.1.0"

__all__ = [
    "Client",
    "Collection",
    "Transport",
    "Pagination",
    "QueryDescriptor",
    "HookQueryError",
    "ConstructionError",
    "ChannelNotImplementedError",
    "TransportError",
]
