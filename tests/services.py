"""Plain service classes shared by the container tests."""

from __future__ import annotations

from typing import Any


class Transport:
    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port


class Mailer:
    def __init__(self, transport: Transport) -> None:
        self.transport = transport
        self.sender: str | None = None
        self.events: list[str] = []

    def set_sender(self, sender: str) -> None:
        self.sender = sender
        self.events.append(f"sender={sender}")

    def enable(self) -> None:
        self.events.append(f"enabled with sender={self.sender}")


class Node:
    def __init__(self, *dependencies: Any) -> None:
        self.dependencies = dependencies
