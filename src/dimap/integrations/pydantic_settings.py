from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


def is_pydantic_settings_subclass(candidate: object) -> bool:
    """Return true when candidate is a class deriving from ``pydantic_settings.BaseSettings``."""
    return isinstance(candidate, type) and issubclass(candidate, BaseSettings)


def parameters_from_settings(
    settings: BaseModel | type[BaseSettings] | Mapping[str, Any],
) -> dict[str, Any]:
    """Convert a settings object into a nested parameter mapping.

    Nested models become nested dictionaries, so a field ``mailer.host``
    declared on a ``MailerSettings`` sub-model is reachable with the dotted
    path ``"mailer.host"``. A ``BaseSettings`` subclass is instantiated with
    no arguments first, which reads its values from the environment.

    Args:
        settings: ``BaseSettings`` subclass, ``BaseSettings``/``BaseModel``
            instance, or a plain mapping which is copied as is.

    Returns:
        A new dictionary with the settings values.

    Raises:
        TypeError: If ``settings`` is neither a pydantic model nor a mapping.

    """
    if is_pydantic_settings_subclass(settings):
        settings = settings()  # type: ignore[operator]

    if isinstance(settings, BaseModel):
        parameters = settings.model_dump()
        logger.debug(
            "Loaded %d top-level parameters from %s",
            len(parameters),
            type(settings).__qualname__,
        )
        return parameters
    if isinstance(settings, Mapping):
        return dict(settings)

    msg = f"Expected a pydantic model or a mapping, got {type(settings).__qualname__}."
    raise TypeError(msg)


__all__ = [
    "is_pydantic_settings_subclass",
    "parameters_from_settings",
]
