"""Shared pytest fixtures for dimap tests."""

from __future__ import annotations

from typing import Any

import pytest

from dimap.container import Container
from dimap.markers import ParameterReference, ServiceReference
from tests.services import Mailer, Transport


@pytest.fixture()
def parameters() -> dict[str, Any]:
    """Nested parameter store used by most container tests."""
    return {
        "mailer": {
            "transport": {"host": "smtp.example.com", "port": 2525},
            "sender": "noreply@example.com",
        },
        "debug": False,
    }


@pytest.fixture()
def container(parameters: dict[str, Any]) -> Container:
    """Container with a transport and a mailer wired through parameters."""
    return Container(
        services={
            "transport": {
                "class": Transport,
                "arguments": [
                    ParameterReference("mailer.transport.host"),
                    ParameterReference("mailer.transport.port"),
                ],
            },
            "mailer": {
                "class": Mailer,
                "arguments": [ServiceReference("transport")],
                "calls": [
                    {"method": "set_sender", "arguments": [ParameterReference("mailer.sender")]},
                    {"method": "enable"},
                ],
            },
        },
        parameters=parameters,
    )
