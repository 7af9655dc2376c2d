from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from dimap.container_interface import IContainer
from dimap.definitions import CallDefinition, RawCallDefinition, RawServiceDefinition, ServiceDefinitions
from dimap.exceptions import DIMapInvalidCallError, DIMapServiceNotFoundError
from dimap.markers import Argument, ParameterReference, ServiceReference
from dimap.parameters import ParameterStore
from dimap.resolution_stack import constructing

if TYPE_CHECKING:
    from pydantic import BaseModel
    from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Container(IContainer):
    """Lazily build named services from declarative definitions and parameters.

    Each service is described by a factory (usually a class), an ordered list
    of constructor arguments and an optional ordered list of method calls run
    right after construction. Arguments are ``ServiceReference`` markers,
    ``ParameterReference`` markers or literal values.

    Services are singletons: the first ``get`` constructs and caches the
    instance, later calls return the same object. An instance is cached only
    after its constructor and every post-construction call succeed.

    Examples:
        .. code-block:: python

            container = Container(
                services={
                    "transport": {
                        "class": SmtpTransport,
                        "arguments": [ParameterReference("mailer.host")],
                    },
                    "mailer": {
                        "class": Mailer,
                        "arguments": [ServiceReference("transport")],
                        "calls": [{"method": "set_sender", "arguments": ["noreply@example.com"]}],
                    },
                },
                parameters={"mailer": {"host": "smtp.example.com"}},
            )
            mailer = container.get("mailer")

    """

    def __init__(
        self,
        services: Mapping[str, RawServiceDefinition] | None = None,
        parameters: Mapping[str, Any] | BaseModel | type[BaseSettings] | None = None,
    ) -> None:
        """Initialize a container from a definition table and a parameter store.

        Both inputs are copied; later changes to the caller's objects are not
        observed. Definitions are validated lazily on first ``get``.

        Args:
            services: Mapping of service name to a ``ServiceDefinition`` or a
                mapping with ``"class"``, ``"arguments"`` and ``"calls"`` keys.
            parameters: Nested parameter mapping, ``ParameterStore``, or a
                pydantic settings object or ``BaseSettings`` subclass.

        """
        self._services = ServiceDefinitions(services)
        if isinstance(parameters, ParameterStore):
            self._parameters = parameters
        elif parameters is None or isinstance(parameters, Mapping):
            self._parameters = ParameterStore(parameters)
        else:
            self._parameters = ParameterStore.from_settings(parameters)
        self._instances: dict[str, Any] = {}

    # region Parameters

    def get_parameter(self, path: str) -> Any:
        """Return the parameter stored at a dot-delimited path.

        Args:
            path: Path such as ``"database.primary.dsn"``.

        Returns:
            The value found at ``path``, which may be a nested mapping.

        Raises:
            DIMapParameterNotFoundError: If any segment of ``path`` is absent.

        """
        return self._parameters.get_parameter(path)

    def has_parameter(self, path: str) -> bool:
        """Return whether ``get_parameter(path)`` would succeed. Never raises."""
        return self._parameters.has_parameter(path)

    # endregion Parameters

    # region Services

    def has(self, name: str) -> bool:
        """Return whether service ``name`` is declared.

        Reflects the definition table, not whether the service has already
        been constructed.
        """
        return name in self._services

    def __contains__(self, name: object) -> bool:
        return name in self._services

    def get(self, name: str) -> Any:
        """Return service ``name``, constructing it on first access.

        Args:
            name: Declared service name.

        Returns:
            The single instance of the service for this container.

        Raises:
            DIMapServiceNotFoundError: If ``name`` is not declared.
            DIMapInvalidDefinitionError: If the definition is malformed or its
                class cannot be resolved.
            DIMapCircularDependencyError: If ``name`` depends on itself.
            DIMapInvalidCallError: If a post-construction call is malformed or
                names an uncallable method.

        """
        if name not in self._services:
            raise DIMapServiceNotFoundError(name)

        if name not in self._instances:
            self._instances[name] = self._create_service(name)

        return self._instances[name]

    def _create_service(self, name: str) -> Any:
        definition = self._services.definition(name)
        factory = definition.resolve_factory(name)

        with constructing(self, name):
            arguments = self._resolve_arguments(name, definition.arguments)
            logger.debug("Constructing service '%s' with %d argument(s)", name, len(arguments))
            service = factory(*arguments)

            if definition.calls:
                self._initialize_service(service, name, definition.calls)

        return service

    def _resolve_arguments(self, name: str, argument_definitions: Sequence[Argument]) -> list[Any]:
        """Turn argument definitions of service ``name`` into concrete values."""
        arguments: list[Any] = []
        for argument_definition in argument_definitions:
            if isinstance(argument_definition, ServiceReference):
                arguments.append(self.get(argument_definition.name))
            elif isinstance(argument_definition, ParameterReference):
                arguments.append(self.get_parameter(argument_definition.name))
            else:
                arguments.append(argument_definition)
        return arguments

    def _initialize_service(
        self,
        service: Any,
        name: str,
        call_definitions: Sequence[RawCallDefinition],
    ) -> None:
        for raw_call_definition in call_definitions:
            call_definition = CallDefinition.from_value(name, raw_call_definition)
            method = getattr(service, call_definition.method, None)
            if not callable(method):
                raise DIMapInvalidCallError(
                    name,
                    call_definition.method,
                    f"asks for call to uncallable method: {call_definition.method}.",
                )

            arguments = self._resolve_arguments(name, call_definition.arguments)
            logger.debug("Calling '%s.%s' after construction", name, call_definition.method)
            method(*arguments)

    # endregion Services
