from __future__ import annotations

from typing import Any, NamedTuple, TypeAlias


class ServiceReference(NamedTuple):
    """Point an argument at another named service.

    The container resolves the reference with ``Container.get`` when the
    depending service is constructed.

    Examples:
        .. code-block:: python

            services = {
                "mailer": {"class": Mailer, "arguments": [ServiceReference("transport")]},
                "transport": {"class": SmtpTransport},
            }

    """

    name: str


class ParameterReference(NamedTuple):
    """Point an argument at a dot-delimited path in the parameter store.

    Examples:
        .. code-block:: python

            {"class": SmtpTransport, "arguments": [ParameterReference("mailer.host")]}

    """

    name: str


Argument: TypeAlias = ServiceReference | ParameterReference | Any
"""A constructor or method argument: a reference or a literal value."""
