from __future__ import annotations

from collections import OrderedDict

import pytest

from dimap.definitions import CallDefinition, ServiceDefinition, ServiceDefinitions
from dimap.exceptions import DIMapInvalidCallError, DIMapInvalidDefinitionError
from dimap.markers import ParameterReference, ServiceReference


def test_from_value_normalizes_mapping() -> None:
    definition = ServiceDefinition.from_value(
        "service",
        {
            "class": OrderedDict,
            "arguments": [ServiceReference("a"), ParameterReference("b.c"), 3],
            "calls": [{"method": "clear"}],
        },
    )

    assert definition.factory is OrderedDict
    assert definition.arguments == (ServiceReference("a"), ParameterReference("b.c"), 3)
    assert definition.calls == ({"method": "clear"},)


def test_from_value_defaults_arguments_and_calls() -> None:
    definition = ServiceDefinition.from_value("service", {"class": OrderedDict})

    assert definition.arguments == ()
    assert definition.calls == ()


def test_from_value_returns_definition_objects_unchanged() -> None:
    definition = ServiceDefinition(factory=OrderedDict)

    assert ServiceDefinition.from_value("service", definition) is definition


def test_from_value_rejects_missing_class() -> None:
    with pytest.raises(DIMapInvalidDefinitionError, match="'class' key"):
        ServiceDefinition.from_value("service", {"arguments": []})


def test_resolve_factory_imports_string_identifiers() -> None:
    definition = ServiceDefinition(factory="collections:OrderedDict")

    assert definition.resolve_factory("service") is OrderedDict


def test_resolve_factory_imports_nested_attributes() -> None:
    definition = ServiceDefinition(factory="collections:OrderedDict.fromkeys")

    assert definition.resolve_factory("service") == OrderedDict.fromkeys


def test_resolve_factory_rejects_non_callables() -> None:
    definition = ServiceDefinition(factory="string:ascii_letters")

    with pytest.raises(DIMapInvalidDefinitionError, match="not callable"):
        definition.resolve_factory("service")


def test_resolve_factory_chains_import_error() -> None:
    definition = ServiceDefinition(factory="no_such_module_for_dimap.Thing")

    with pytest.raises(DIMapInvalidDefinitionError, match="does not exist") as exc_info:
        definition.resolve_factory("service")

    assert isinstance(exc_info.value.__cause__, ImportError)


def test_call_definition_from_value() -> None:
    call = CallDefinition.from_value("service", {"method": "setup", "arguments": [1, 2]})

    assert call == CallDefinition(method="setup", arguments=(1, 2))


@pytest.mark.parametrize(
    "value",
    [
        "setup",
        {"arguments": []},
        {"method": ""},
        {"method": 42},
        {"method": "setup", "arguments": "ab"},
    ],
)
def test_call_definition_rejects_malformed_values(value: object) -> None:
    with pytest.raises(DIMapInvalidCallError):
        CallDefinition.from_value("service", value)  # type: ignore[arg-type]


def test_service_definitions_is_a_lazy_table() -> None:
    table = ServiceDefinitions({"good": {"class": OrderedDict}, "bad": {}})

    assert set(table) == {"good", "bad"}
    assert len(table) == 2
    assert table.definition("good").factory is OrderedDict
    with pytest.raises(DIMapInvalidDefinitionError):
        table.definition("bad")
    with pytest.raises(KeyError):
        table.definition("missing")
