"""Result types passed from the dispatcher to the HTTP layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

JSON = "application/json"
TEXT = "text/plain"
HTML = "text/html"


class OutcomeKind(str, Enum):
    OK = "ok"
    NO_SERVICE = "no_service"
    GENERATION_ERROR = "generation_error"
    FAULT = "fault"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Outcome:
    """What a dispatcher call produced.

    ``body`` is a JSON-compatible value when ``media_type`` is JSON, a string
    for text and HTML, and ``None`` for an empty response.
    """

    kind: OutcomeKind
    status: int
    body: Any = None
    media_type: str = JSON
