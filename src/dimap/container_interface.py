from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class IContainer(ABC):
    """Interface for container-like objects."""

    @abstractmethod
    def has(self, name: str) -> bool:
        """Return whether a service named ``name`` is declared."""

    @abstractmethod
    def get(self, name: str) -> Any:
        """Return the service named ``name``, constructing it on first access."""

    @abstractmethod
    def get_parameter(self, path: str) -> Any:
        """Return the parameter stored at the dot-delimited ``path``."""

    @abstractmethod
    def has_parameter(self, path: str) -> bool:
        """Return whether ``get_parameter(path)`` would succeed."""
