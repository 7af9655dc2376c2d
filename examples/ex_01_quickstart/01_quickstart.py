"""Quickstart: named services wired from a definition map and parameters.

Declare services by name, point their arguments at other services or at
dotted parameter paths, and let the container build the chain on first use.
"""

from __future__ import annotations

from dimap import Container, ParameterReference, ServiceReference


class Database:
    def __init__(self, dsn: str) -> None:
        self.dsn = dsn


class UserRepository:
    def __init__(self, database: Database, table: str) -> None:
        self.database = database
        self.table = table


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository
        self.admins: list[str] = []

    def add_admin(self, name: str) -> None:
        self.admins.append(name)


def main() -> None:
    container = Container(
        services={
            "database": {
                "class": Database,
                "arguments": [ParameterReference("database.dsn")],
            },
            "users.repository": {
                "class": UserRepository,
                "arguments": [ServiceReference("database"), "users"],
            },
            "users.service": {
                "class": UserService,
                "arguments": [ServiceReference("users.repository")],
                "calls": [
                    {"method": "add_admin", "arguments": ["alice"]},
                    {"method": "add_admin", "arguments": ["bob"]},
                ],
            },
        },
        parameters={"database": {"dsn": "sqlite:///app.db"}},
    )

    service = container.get("users.service")

    print(f"dsn={service.repository.database.dsn}")  # => dsn=sqlite:///app.db
    print(f"table={service.repository.table}")  # => table=users
    print(f"admins={','.join(service.admins)}")  # => admins=alice,bob
    print(f"singleton={service is container.get('users.service')}")  # => singleton=True


if __name__ == "__main__":
    main()
