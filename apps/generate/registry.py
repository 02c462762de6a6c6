"""Registry of message-protocol generator services.

The registry is built once at start-up from the configured plugin references
and is read-only afterwards, so request handlers may share it freely.
"""

from __future__ import annotations

import importlib
from types import MappingProxyType
from typing import Any, Iterable, Iterator, List, Mapping, Optional

from lib.contracts.msg_service import MsgService
from lib.telemetry.logger import get_logger
from lib.utils.validation import duplicates, ensure, ensure_instance

logger = get_logger(__name__)


class ServiceRegistry:
    """Immutable ``protocol name -> MsgService`` mapping."""

    def __init__(self, services: Iterable[MsgService] = ()):
        services = list(services)
        for svc in services:
            ensure_instance(svc, MsgService, "registered service")
            ensure(bool(svc.name), f"service {svc!r} has an empty name")
        dup = duplicates(s.name for s in services)
        ensure(not dup, f"duplicate message protocol names: {', '.join(dup)}")
        self._by_name: Mapping[str, MsgService] = MappingProxyType(
            {s.name: s for s in services}
        )
        for name in self._by_name:
            logger.info("registered message protocol %s", name)

    def get(self, name: str) -> Optional[MsgService]:
        return self._by_name.get(name)

    def names(self) -> List[str]:
        return list(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[MsgService]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)


# ---------------------------------------------------------------------------
# Plugin loading
# ---------------------------------------------------------------------------

def load_plugin(ref: str) -> MsgService:
    """Import ``module:attribute`` and return a service instance.

    The attribute may be a :class:`MsgService` subclass, which is instantiated
    without arguments, or an already constructed instance.
    """

    module_name, sep, attr = ref.partition(":")
    ensure(bool(module_name and sep and attr), f"plugin reference must be 'module:attribute', got {ref!r}")
    try:
        target: Any = getattr(importlib.import_module(module_name), attr)
    except (ImportError, AttributeError) as exc:
        raise ValueError(f"cannot load plugin {ref!r}: {exc}") from exc
    if isinstance(target, type):
        ensure(issubclass(target, MsgService), f"plugin {ref!r} is not a MsgService subclass")
        target = target()
    ensure_instance(target, MsgService, f"plugin {ref!r}")
    return target


def registry_from_refs(refs: Iterable[str]) -> ServiceRegistry:
    return ServiceRegistry(load_plugin(r) for r in refs)
