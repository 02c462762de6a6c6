"""Content negotiation and HTML rendering for template responses."""

from __future__ import annotations

import json
from typing import Any, FrozenSet, Optional

HTML_MEDIA_TYPE = "text/html"
HTML_HEAD = "<!DOCTYPE html><html><body><pre>"
HTML_TAIL = "</pre></body></html>"
# Escaped inside JSON strings so template text cannot close the page.
HTML_UNSAFE = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026", "=": "\\u003d", "'": "\\u0027"}


def parse_accept(header: Optional[str]) -> FrozenSet[str]:
    """Return the media types listed in an ``Accept`` header.

    Parameters such as ``q`` are dropped and types are lower-cased, so
    ``"Text/HTML;q=0.9, */*"`` becomes ``{"text/html", "*/*"}``.
    """

    if not header:
        return frozenset()
    types = (part.split(";", 1)[0].strip().lower() for part in header.split(","))
    return frozenset(t for t in types if t)


def wants_html(accepted: FrozenSet[str]) -> bool:
    # Wildcards do not count; only browsers list text/html explicitly.
    return HTML_MEDIA_TYPE in accepted


def pretty_json(doc: Any) -> str:
    """Two-space indented JSON with HTML-significant characters escaped.

    The characters only ever occur inside JSON strings, where ``\\uXXXX`` is
    an equivalent spelling, so the text still parses to the same document.
    """

    text = json.dumps(doc, indent=2, ensure_ascii=False)
    for ch, esc in HTML_UNSAFE.items():
        text = text.replace(ch, esc)
    return text


def html_wrap(raw_json: str) -> str:
    """Wrap pretty-printed JSON so a browser shows it verbatim."""
    return HTML_HEAD + raw_json + HTML_TAIL
