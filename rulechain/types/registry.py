"""Type registry - explicit name -> factory table for schema types.

There is no process-wide registry: callers build one (usually through
default_registry()) and pass it to the validation entry point, so separate
registries never see each other's registrations.
"""
from __future__ import annotations

from typing import Any, Callable, Iterator, Mapping

from rulechain.core.errors import (
    AppError,
    ErrorCode,
    Ok,
    Result,
    configuration_error,
    raise_result,
    unknown_type,
    ConfigurationError,
)
from rulechain.core.logging import schema_logger
from .base import BaseType, reject
from .string import StringType

log = schema_logger()

TypeFactory = Callable[[], BaseType]


class TypeRegistry:
    """Registry of schema type factories keyed by name."""

    __slots__ = ("_factories",)

    def __init__(self, factories: Mapping[str, TypeFactory] | None = None):
        self._factories: dict[str, TypeFactory] = {}
        for name, factory in (factories or {}).items():
            self.register(name, factory)

    def register(self, name: str, factory: TypeFactory, *, replace: bool = False) -> None:
        """Register a type factory under a name."""
        if not isinstance(name, str) or not name:
            reject(configuration_error(f"Type name must be a non-empty string, got {name!r}",
                code=ErrorCode.E7004_INVALID_ARGUMENT, combinator="register", argument=name))
        if not callable(factory):
            reject(configuration_error(f"Factory for type '{name}' is not callable",
                code=ErrorCode.E7004_INVALID_ARGUMENT, combinator="register", argument=factory))
        if name in self._factories and not replace:
            reject(configuration_error(f"Type '{name}' is already registered",
                code=ErrorCode.E7011_DUPLICATE_TYPE, combinator="register", type_name=name))
        self._factories[name] = factory
        log.debug("type_registered", type_name=name, replaced=replace)

    def lookup(self, name: str) -> Result[TypeFactory, AppError]:
        """Find the factory for a type name."""
        if name not in self._factories:
            return unknown_type(name, self.names(), origin="type_registry")
        return Ok(self._factories[name])

    def create(self, name: str) -> BaseType:
        """Build a fresh, unconstrained node of the named type."""
        return raise_result(self.lookup(name), ConfigurationError)()

    def resolve(self, node: Any) -> BaseType:
        """Turn a schema node reference (node instance or type name) into a node."""
        if isinstance(node, BaseType): return node
        if isinstance(node, str): return self.create(node)
        reject(configuration_error(f"Schema node must be a type or a registered type name, got {type(node).__name__}",
            code=ErrorCode.E7004_INVALID_ARGUMENT, combinator="resolve", argument=node))

    def names(self) -> list[str]:
        return sorted(self._factories)

    def copy(self) -> TypeRegistry:
        return TypeRegistry(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._factories)


def default_registry() -> TypeRegistry:
    """A new registry holding the built-in types."""
    return TypeRegistry({"string": StringType})
