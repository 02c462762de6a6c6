"""Contract implemented by message-protocol generator plugins."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class MsgService(ABC):
    """A generator for one message protocol.

    The dispatcher only ever talks to plugins through this interface.  ``name``
    is the protocol identifier used in request paths and must be unique among
    the registered services.
    """

    name: str = ""
    version: Optional[str] = None

    @abstractmethod
    def generate_msg(self, msg_type: str, body: Dict[str, Any]) -> str:
        """Return the generated event as JSON text.

        Semantic failures are reported inside the returned JSON object under
        the configured error field rather than raised.
        """

    @abstractmethod
    def get_supported_event_types(self) -> List[str]:
        ...

    @abstractmethod
    def get_event_template(self, event_type: str) -> Optional[Any]:
        """Return the template for ``event_type`` or ``None`` if unknown."""
