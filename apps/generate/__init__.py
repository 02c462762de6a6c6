"""Generate service.

:class:`GenerateController` is the request dispatcher behind the HTTP layer.
It looks a message protocol up in a :class:`~apps.generate.registry.ServiceRegistry`,
delegates to the matching :class:`~lib.contracts.msg_service.MsgService` and
turns whatever comes back into an :class:`~apps.generate.models.Outcome`.
Rendering the outcome as an HTTP response is left to :mod:`apps.generate.main`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional

from lib.config.generate_loader import GenerateConfig, load_generate_config
from lib.contracts.msg_service import MsgService
from lib.contracts.version_service import DefaultVersionService, VersionService
from lib.telemetry.logger import get_logger

from .models import HTML, JSON, TEXT, Outcome, OutcomeKind
from .negotiation import html_wrap, pretty_json, wants_html
from .registry import ServiceRegistry, registry_from_refs

logger = get_logger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


@dataclass
class GenerateController:
    """Dispatch generate, event type and template requests to plugins.

    Parameters
    ----------
    registry: the services to dispatch to.  When omitted the plugins listed in
        the configuration are imported and registered.
    versions: collaborator answering ``GET /versions``.  Defaults to a
        :class:`DefaultVersionService` over the registry.
    config: parsed configuration; loaded from ``config_path`` when omitted.
    """

    registry: Optional[ServiceRegistry] = None
    versions: Optional[VersionService] = None
    config: Optional[GenerateConfig] = None
    config_path: Optional[str] = None
    _unavailable: Dict[str, Any] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        if self.config is None:
            self.config = load_generate_config(self.config_path)
        if self.registry is None:
            self.registry = registry_from_refs(self.config.services)
        if self.versions is None:
            self.versions = DefaultVersionService(self.registry)
        self._unavailable = dict(self.config.no_service_error)

    @property
    def error_field(self) -> str:
        return self.config.error_field

    def get_service(self, protocol: str) -> Optional[MsgService]:
        return self.registry.get(protocol)

    def _no_service(self, protocol: str) -> Outcome:
        logger.warning("no message service registered for protocol %r", protocol)
        return Outcome(OutcomeKind.NO_SERVICE, 503, dict(self._unavailable))

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def generate(self, protocol: str, msg_type: str, body: Dict[str, Any]) -> Outcome:
        """Generate a ``msg_type`` event with the ``protocol`` service.

        The plugin answers with JSON text.  An object carrying the error field
        is a rejected request (400); any other object is the event (200).
        Exceptions, including a reply that is not a strict JSON object
        (``NaN`` and ``Infinity`` are refused), are logged and reduced to an
        empty 500.
        """

        service = self.get_service(protocol)
        if service is None:
            return self._no_service(protocol)
        try:
            parsed = json.loads(
                service.generate_msg(msg_type, body), parse_constant=_reject_constant
            )
            if not isinstance(parsed, dict):
                raise TypeError(f"expected a JSON object, got {type(parsed).__name__}")
        except Exception:
            logger.exception("generating %s with protocol %s failed", msg_type, protocol)
            return Outcome(OutcomeKind.FAULT, 500, None)
        if self.error_field in parsed:
            logger.info("protocol %s rejected %s: %s", protocol, msg_type, parsed[self.error_field])
            return Outcome(OutcomeKind.GENERATION_ERROR, 400, parsed)
        return Outcome(OutcomeKind.OK, 200, parsed)

    def get_versions(self) -> Dict[str, Dict[str, str]]:
        return self.versions.get_messaging_versions()

    def event_types(self, protocol: str) -> Outcome:
        service = self.get_service(protocol)
        if service is None:
            return self._no_service(protocol)
        return Outcome(OutcomeKind.OK, 200, list(service.get_supported_event_types()))

    def template(self, event_type: str, protocol: str, accepted: FrozenSet[str] = frozenset()) -> Outcome:
        """Return the template for ``event_type``.

        ``accepted`` is the parsed ``Accept`` header; when it lists
        ``text/html`` the template is pretty-printed inside a ``<pre>`` page.
        """

        service = self.get_service(protocol)
        if service is None:
            return self._no_service(protocol)
        template = service.get_event_template(event_type)
        if template is None:
            return Outcome(
                OutcomeKind.NOT_FOUND, 404, f"Requested {event_type} Template Not Available", TEXT
            )
        if wants_html(accepted):
            return Outcome(OutcomeKind.OK, 200, html_wrap(pretty_json(template)), HTML)
        return Outcome(OutcomeKind.OK, 200, template, JSON)


__all__ = ["GenerateController"]
