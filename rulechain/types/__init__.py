"""Schema types and the explicit type registry."""
from .base import BaseType
from .string import StringType, String
from .registry import TypeRegistry, TypeFactory, default_registry

__all__ = [
    "BaseType",
    "StringType",
    "String",
    "TypeRegistry",
    "TypeFactory",
    "default_registry",
]
