"""Tests for the FIX message type registry."""

import pytest

from fixprint.features.fix import FixMessageRegistry
from fixprint.features.fix.adapters import FIX42_MESSAGE_TYPES, field_name
from fixprint.features.stream import TypeNameRegistryPort, UnknownMessageTypeError


def test_lookup_known_types() -> None:
    registry = FixMessageRegistry()

    assert isinstance(registry, TypeNameRegistryPort)
    assert registry.lookup("D") == "NewOrderSingle"
    assert registry.lookup("8") == "ExecutionReport"
    assert registry.lookup("j") == "BusinessMessageReject"
    assert len(registry) == len(FIX42_MESSAGE_TYPES)


def test_lookup_miss_raises() -> None:
    registry = FixMessageRegistry()

    with pytest.raises(UnknownMessageTypeError) as excinfo:
        _ = registry.lookup("ZZ")

    assert excinfo.value.tag == "ZZ"
    assert isinstance(excinfo.value, LookupError)


def test_custom_registry_mapping() -> None:
    registry = FixMessageRegistry({"U1": "CustomMessage"})

    assert "U1" in registry
    assert "D" not in registry
    assert registry.lookup("U1") == "CustomMessage"


def test_field_names() -> None:
    assert field_name(35) == "MsgType"
    assert field_name(424242) is None
