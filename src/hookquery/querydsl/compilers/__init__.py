from .base import BaseCompiler
from .wire import WireQueryCompiler, wire_compiler

__all__ = (
    "BaseCompiler",
    "WireQueryCompiler",
    "wire_compiler",
)
