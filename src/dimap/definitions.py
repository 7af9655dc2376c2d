from __future__ import annotations

import importlib
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from dimap.exceptions import DIMapInvalidCallError, DIMapInvalidDefinitionError
from dimap.markers import Argument

Factory: TypeAlias = Callable[..., Any]
"""A class or function that builds a service from positional arguments."""

FactoryIdentifier: TypeAlias = Factory | str
"""A factory, or an import path such as ``"package.module:Name"``."""

RawServiceDefinition: TypeAlias = "ServiceDefinition | Mapping[str, Any]"
"""A service definition object or the plain mapping an assembler produces."""

RawCallDefinition: TypeAlias = "CallDefinition | Mapping[str, Any]"
"""A call definition object or its plain mapping form."""

CLASS_KEY = "class"
ARGUMENTS_KEY = "arguments"
CALLS_KEY = "calls"
METHOD_KEY = "method"


@dataclass(frozen=True, kw_only=True)
class CallDefinition:
    """Describe a method invoked on a service right after it is constructed."""

    method: str
    """Name of the method to call on the new instance."""
    arguments: tuple[Argument, ...] = ()
    """Positional arguments, resolved the same way as constructor arguments."""

    @classmethod
    def from_value(cls, name: str, value: RawCallDefinition) -> CallDefinition:
        """Normalize a raw call definition of service ``name``.

        Raises:
            DIMapInvalidCallError: If ``value`` has no string method name or
                its arguments are not a sequence.

        """
        if isinstance(value, CallDefinition):
            return value
        if not isinstance(value, Mapping) or METHOD_KEY not in value:
            raise DIMapInvalidCallError(
                name,
                None,
                f"calls must be mappings containing a '{METHOD_KEY}' key, got {value!r}.",
            )

        method = value[METHOD_KEY]
        if not isinstance(method, str) or not method:
            raise DIMapInvalidCallError(name, method, f"call has an invalid method name: {method!r}.")

        arguments = value.get(ARGUMENTS_KEY, ())
        if not _is_argument_sequence(arguments):
            raise DIMapInvalidCallError(
                name,
                method,
                f"call to '{method}' must declare arguments as a sequence, got {arguments!r}.",
            )
        return cls(method=method, arguments=tuple(arguments))


@dataclass(frozen=True, kw_only=True)
class ServiceDefinition:
    """Describe how a single named service is built.

    Raw mappings passed to ``Container`` use the ``"class"``, ``"arguments"``
    and ``"calls"`` keys; ``ServiceDefinition.from_value`` turns them into this
    form. Call definitions are kept raw and checked one by one while the
    service is initialized.
    """

    factory: FactoryIdentifier
    """Class, factory function, or import path of the service."""
    arguments: tuple[Argument, ...] = ()
    """Positional constructor arguments in declared order."""
    calls: tuple[RawCallDefinition, ...] = ()
    """Post-construction calls in declared order."""

    @classmethod
    def from_value(cls, name: str, value: RawServiceDefinition) -> ServiceDefinition:
        """Normalize a raw definition of service ``name``.

        Raises:
            DIMapInvalidDefinitionError: If ``value`` is not a mapping with a
                ``"class"`` key, or if its arguments or calls are not sequences.

        """
        if isinstance(value, ServiceDefinition):
            return value
        if not isinstance(value, Mapping) or CLASS_KEY not in value:
            raise DIMapInvalidDefinitionError(
                name,
                f"service entry must be a mapping containing a '{CLASS_KEY}' key.",
            )

        arguments = value.get(ARGUMENTS_KEY, ())
        if not _is_argument_sequence(arguments):
            raise DIMapInvalidDefinitionError(name, f"arguments must be a sequence, got {arguments!r}.")

        calls = value.get(CALLS_KEY, ())
        if not _is_argument_sequence(calls):
            raise DIMapInvalidDefinitionError(name, f"calls must be a sequence, got {calls!r}.")

        return cls(factory=value[CLASS_KEY], arguments=tuple(arguments), calls=tuple(calls))

    def resolve_factory(self, name: str) -> Factory:
        """Return the callable that builds service ``name``.

        String identifiers are imported on first use, either as
        ``"package.module:Name"`` or as ``"package.module.Name"``.

        Raises:
            DIMapInvalidDefinitionError: If the identifier cannot be imported
                or does not refer to a callable.

        """
        factory = self.factory
        if isinstance(factory, str):
            factory = _import_object(name, factory)
        if not callable(factory):
            raise DIMapInvalidDefinitionError(name, f"service class is not callable: {factory!r}.")
        return factory


class ServiceDefinitions(Mapping[str, RawServiceDefinition]):
    """Store raw service definitions indexed by service name.

    The table is snapshotted at construction: definition mappings, their
    argument and call lists, and call mappings are copied, so later changes to
    the caller's objects are not observed. Literal argument values are kept
    by identity.

    Definitions are normalized lazily by ``definition``, so a malformed entry
    only fails when that service is requested.
    """

    def __init__(self, definitions: Mapping[str, RawServiceDefinition] | None = None) -> None:
        self._definitions: dict[str, RawServiceDefinition] = {
            name: _snapshot_definition(value) for name, value in (definitions or {}).items()
        }

    def definition(self, name: str) -> ServiceDefinition:
        """Return the normalized definition of ``name``.

        Raises:
            KeyError: If ``name`` is not declared.
            DIMapInvalidDefinitionError: If the stored entry is malformed.

        """
        return ServiceDefinition.from_value(name, self._definitions[name])

    def __getitem__(self, name: str) -> RawServiceDefinition:
        return self._definitions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)


def _snapshot_definition(value: RawServiceDefinition) -> RawServiceDefinition:
    if not isinstance(value, Mapping):
        return value

    snapshot = dict(value)
    if _is_argument_sequence(snapshot.get(ARGUMENTS_KEY)):
        snapshot[ARGUMENTS_KEY] = tuple(snapshot[ARGUMENTS_KEY])
    if _is_argument_sequence(snapshot.get(CALLS_KEY)):
        snapshot[CALLS_KEY] = tuple(_snapshot_call(call) for call in snapshot[CALLS_KEY])
    return snapshot


def _snapshot_call(value: RawCallDefinition) -> RawCallDefinition:
    if not isinstance(value, Mapping):
        return value

    snapshot = dict(value)
    if _is_argument_sequence(snapshot.get(ARGUMENTS_KEY)):
        snapshot[ARGUMENTS_KEY] = tuple(snapshot[ARGUMENTS_KEY])
    return snapshot


def _is_argument_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _import_object(name: str, identifier: str) -> Any:
    if ":" in identifier:
        module_name, _, attribute_path = identifier.partition(":")
    else:
        module_name, _, attribute_path = identifier.rpartition(".")

    if not module_name or not attribute_path:
        raise DIMapInvalidDefinitionError(name, f"service class does not exist: {identifier}.")

    try:
        target: Any = importlib.import_module(module_name)
        for attribute in attribute_path.split("."):
            target = getattr(target, attribute)
    except (ImportError, AttributeError) as error:
        raise DIMapInvalidDefinitionError(
            name,
            f"service class does not exist: {identifier}.",
        ) from error
    return target
