import pytest

from apps.generate.registry import (
    ServiceRegistry,
    load_plugin,
    registry_from_refs,
)
from tests.fakes import BrokenService, EchoService


def test_lookup_is_exact():
    reg = ServiceRegistry([EchoService(), BrokenService()])
    assert isinstance(reg.get("eiffel3"), EchoService)
    assert reg.get("Eiffel3") is None
    assert reg.get("") is None
    assert reg.names() == ["eiffel3", "broken"]
    assert "broken" in reg and len(reg) == 2


def test_duplicate_names_rejected():
    with pytest.raises(ValueError, match="duplicate message protocol names: eiffel3"):
        ServiceRegistry([EchoService(), EchoService()])


def test_non_service_rejected():
    with pytest.raises(ValueError, match="not a MsgService"):
        ServiceRegistry([object()])


def test_empty_name_rejected():
    svc = EchoService()
    svc.name = ""
    with pytest.raises(ValueError, match="empty name"):
        ServiceRegistry([svc])


def test_load_plugin_from_class():
    assert isinstance(load_plugin("tests.fakes:EchoService"), EchoService)


@pytest.mark.parametrize(
    "ref",
    ["tests.fakes", "tests.fakes:", "tests.no_such_module:X", "tests.fakes:Missing", "tests.fakes:TEMPLATES"],
)
def test_load_plugin_bad_reference(ref):
    with pytest.raises(ValueError):
        load_plugin(ref)


def test_registry_from_refs_keeps_order():
    reg = registry_from_refs(["tests.fakes:BrokenService", "tests.fakes:EchoService"])
    assert reg.names() == ["broken", "eiffel3"]
