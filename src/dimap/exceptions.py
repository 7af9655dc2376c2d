from __future__ import annotations

from collections.abc import Sequence


class DIMapError(Exception):
    """Represent a base class for all dimap-specific failures.

    Catch this type when you want to handle any container error path without
    matching each concrete exception class individually. Malformed
    definitions, circular references and uncallable post-construction methods
    are all reported through subclasses of this type.
    """


class DIMapServiceNotFoundError(DIMapError):
    """Signal that a service name has no definition.

    Raised by ``Container.get`` and by service references that point at an
    undeclared name. Nothing is constructed when this error is raised.

    Typical fix is declaring the service in the definition table passed to
    ``Container``, or checking ``Container.has`` before calling ``get``.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Service '{name}' is not defined.")


class DIMapParameterNotFoundError(DIMapError):
    """Signal that a dot-delimited parameter path cannot be resolved.

    Raised by ``Container.get_parameter`` and by parameter references when any
    segment of the path is absent. ``Container.has_parameter`` converts this
    error into ``False``.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Parameter '{path}' is not defined.")


class DIMapInvalidDefinitionError(DIMapError):
    """Signal a malformed service definition.

    Raised on the first ``Container.get`` of a service whose definition is not
    a mapping with a ``class`` key, or whose class identifier does not resolve
    to a callable factory.

    Typical fixes include providing a class or factory function under
    ``class``, or a valid ``"package.module:Name"`` import path.
    """

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"Service '{name}' has an invalid definition: {reason}")


class DIMapCircularDependencyError(DIMapError):
    """Signal that a service depends on itself through its arguments or calls.

    ``chain`` lists the service names from the outermost one being constructed
    down to the repeated name.
    """

    def __init__(self, name: str, chain: Sequence[str]) -> None:
        self.name = name
        self.chain = tuple(chain)
        super().__init__(
            f"Service '{name}' contains a circular reference: {' -> '.join(self.chain)}",
        )


class DIMapInvalidCallError(DIMapError):
    """Signal an invalid post-construction call.

    Raised when a call definition has no method name, or when the named method
    is not callable on the constructed instance. The instance is not cached.
    """

    def __init__(self, name: str, method: object, reason: str) -> None:
        self.name = name
        self.method = method
        super().__init__(f"Service '{name}' {reason}")
