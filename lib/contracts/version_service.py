"""Version reporting for the generate service and its loaded protocols."""
from __future__ import annotations

from importlib import metadata
from typing import Dict, Iterable, Protocol

from .msg_service import MsgService

DIST_NAME = "msg-generate-service"


class VersionService(Protocol):
    def get_messaging_versions(self) -> Dict[str, Dict[str, str]]: ...


class DefaultVersionService:
    """Report the installed service version and each plugin's own version."""

    def __init__(self, services: Iterable[MsgService] = ()):
        self._services = list(services)

    def _service_version(self) -> str:
        try:
            return metadata.version(DIST_NAME)
        except metadata.PackageNotFoundError:
            return "unknown"

    def get_messaging_versions(self) -> Dict[str, Dict[str, str]]:
        endpoints = {s.name: s.version for s in self._services if s.version}
        return {
            "serviceVersion": {"serviceVersion": self._service_version()},
            "endpointVersions": endpoints,
        }
