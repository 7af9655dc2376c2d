from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from typing_extensions import Self

from dimap.exceptions import DIMapParameterNotFoundError

if TYPE_CHECKING:
    from pydantic import BaseModel
    from pydantic_settings import BaseSettings

PATH_SEPARATOR = "."


class ParameterStore(Mapping[str, Any]):
    """Read-only nested mapping queried by dot-delimited path.

    The whole tree is deep-copied at construction, so later changes to the
    caller's mappings, nested ones included, are not observed.
    """

    def __init__(self, parameters: Mapping[str, Any] | None = None) -> None:
        self._parameters: dict[str, Any] = copy.deepcopy(dict(parameters or {}))

    @classmethod
    def from_settings(cls, settings: BaseModel | type[BaseSettings] | Mapping[str, Any]) -> Self:
        """Build a store from a pydantic settings object or model.

        Args:
            settings: ``pydantic_settings.BaseSettings`` subclass or instance,
                any ``pydantic.BaseModel`` instance, or a plain mapping.

        Returns:
            A store holding the model's dumped fields.

        """
        from dimap.integrations.pydantic_settings import parameters_from_settings

        return cls(parameters_from_settings(settings))

    def get_parameter(self, path: str) -> Any:
        """Return the value stored at ``path``.

        Args:
            path: Dot-delimited path such as ``"mailer.transport.host"``.

        Returns:
            The leaf value or nested mapping found at ``path``. No coercion
            is applied.

        Raises:
            DIMapParameterNotFoundError: If any segment is absent.

        """
        context: Any = self._parameters
        for token in path.split(PATH_SEPARATOR):
            if not isinstance(context, Mapping) or token not in context:
                raise DIMapParameterNotFoundError(path)
            context = context[token]

        return context

    def has_parameter(self, path: str) -> bool:
        try:
            self.get_parameter(path)
        except DIMapParameterNotFoundError:
            return False
        return True

    def __getitem__(self, key: str) -> Any:
        return self._parameters[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._parameters!r})"
