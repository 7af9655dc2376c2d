"""Errors: missing services, missing parameters and circular references.

Every failure is a ``DIMapError`` subclass, raised at the point of detection.
"""

from __future__ import annotations

from dimap import (
    Container,
    DIMapCircularDependencyError,
    DIMapParameterNotFoundError,
    DIMapServiceNotFoundError,
    ServiceReference,
)


class Node:
    def __init__(self, *dependencies: object) -> None:
        self.dependencies = dependencies


def main() -> None:
    container = Container(
        services={
            "a": {"class": Node, "arguments": [ServiceReference("b")]},
            "b": {"class": Node, "arguments": [ServiceReference("a")]},
        },
        parameters={"app": {"name": "demo"}},
    )

    try:
        container.get("c")
    except DIMapServiceNotFoundError as error:
        print(f"missing={error.name}")  # => missing=c

    try:
        container.get_parameter("app.version")
    except DIMapParameterNotFoundError as error:
        print(f"parameter={error.path}")  # => parameter=app.version

    print(f"has_parameter={container.has_parameter('app.name')}")  # => has_parameter=True

    try:
        container.get("a")
    except DIMapCircularDependencyError as error:
        print(f"cycle={' -> '.join(error.chain)}")  # => cycle=a -> b -> a


if __name__ == "__main__":
    main()
