from dimap.container import Container
from dimap.container_interface import IContainer
from dimap.definitions import CallDefinition, ServiceDefinition
from dimap.exceptions import (
    DIMapCircularDependencyError,
    DIMapError,
    DIMapInvalidCallError,
    DIMapInvalidDefinitionError,
    DIMapParameterNotFoundError,
    DIMapServiceNotFoundError,
)
from dimap.markers import ParameterReference, ServiceReference
from dimap.parameters import ParameterStore

__all__ = [
    "CallDefinition",
    "Container",
    "DIMapCircularDependencyError",
    "DIMapError",
    "DIMapInvalidCallError",
    "DIMapInvalidDefinitionError",
    "DIMapParameterNotFoundError",
    "DIMapServiceNotFoundError",
    "IContainer",
    "ParameterReference",
    "ParameterStore",
    "ServiceDefinition",
    "ServiceReference",
]
