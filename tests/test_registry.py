import pytest

from gedcomx7.core.exceptions import RegistryError
from gedcomx7.gedcom7.node import g7
from gedcomx7.gedcom7.registry import (
    IdentityRegistry,
    couple_key,
    media_key,
    person_key,
    source_key,
)


def test_record_keys():
    assert person_key("P1") == "#P1"
    assert source_key("S1") == "SOUR:S1"
    assert media_key("http://x/y.kml") == "OBJE:http://x/y.kml"


def test_couple_key_is_order_independent():
    assert couple_key("A", "B") == couple_key("B", "A") == "FAM:A+B"
    assert couple_key("A", None) == couple_key(None, "A") == "FAM:+A"


def test_resolve_builds_once():
    registry = IdentityRegistry()
    calls = []

    def factory():
        calls.append(1)
        return g7("INDI")

    first = registry.resolve("#P1", factory)
    second = registry.resolve("#P1", factory)

    assert first is second
    assert len(calls) == 1
    assert "#P1" in registry
    assert len(registry) == 1


def test_registration_order_is_kept():
    registry = IdentityRegistry()
    registry.resolve("#B", lambda: g7("INDI"))
    registry.resolve("#A", lambda: g7("INDI"))
    registry.resolve("SOUR:1", lambda: g7("SOUR"))

    assert registry.keys() == ["#B", "#A", "SOUR:1"]
    assert registry.count_by_tag() == {"INDI": 2, "SOUR": 1}


def test_factory_may_resolve_other_keys():
    registry = IdentityRegistry()

    def family():
        husband = registry.resolve("#H", lambda: g7("INDI"))
        return g7("FAM", None, g7("HUSB", husband))

    fam = registry.resolve("FAM:+H", family)

    assert registry.keys() == ["#H", "FAM:+H"]
    assert fam.find_first("HUSB").reference is registry.get("#H")


def test_reentrant_factory_raises():
    registry = IdentityRegistry()

    def loop():
        return registry.resolve("#P1", loop)

    with pytest.raises(RegistryError):
        registry.resolve("#P1", loop)

    assert "#P1" not in registry


def test_register_keeps_first():
    registry = IdentityRegistry()
    first = registry.register("#P1", g7("INDI"))
    second = registry.register("#P1", g7("INDI"))

    assert first is second
