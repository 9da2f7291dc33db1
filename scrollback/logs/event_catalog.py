"""Event template catalog.

Human-readable log text lives in ``event_templates.json`` next to this
module, grouped as ``{domain: {action: template}}``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from importlib import resources
from typing import Any

EVENT_TEMPLATES: dict[tuple[str, str], str] = {}
_JSON_FILENAME = "event_templates.json"


def _flatten(raw: Mapping[str, Any]) -> dict[tuple[str, str], str]:
    templates: dict[tuple[str, str], str] = {}
    for domain, actions in raw.items():
        if not (isinstance(domain, str) and isinstance(actions, Mapping)):
            continue
        for action, template in actions.items():
            if isinstance(action, str) and isinstance(template, str):
                templates[(domain, action)] = template
    return templates


def _load_event_templates(package: str = __package__ or "scrollback.logs") -> dict[tuple[str, str], str]:
    """Read the packaged JSON catalog.

    A missing or unreadable file leaves a single ``("app", "load_error")``
    entry so the logger still has something to report.
    """
    try:
        text = resources.files(package).joinpath(_JSON_FILENAME).read_text(encoding="utf-8")
        raw: Any = json.loads(text)
    except FileNotFoundError:
        return {("app", "load_error"): "Event templates file missing"}
    except Exception as e:  # noqa: BLE001
        return {("app", "load_error"): f"Failed to load event templates: {e}"[:200]}
    if not isinstance(raw, Mapping):
        return {("app", "load_error"): "Event templates file is not an object"}
    return _flatten(raw)


def reload_event_templates() -> None:
    global EVENT_TEMPLATES  # noqa: PLW0603
    EVENT_TEMPLATES = _load_event_templates()


def render_event(domain: str, action: str, context: Mapping[str, object]) -> tuple[str, bool]:
    """Return ``(human_text, derived)`` for an event.

    ``derived`` is True when no template exists and the text was built from
    the domain and action names. A template referencing a missing context key
    is returned unformatted.
    """
    template = EVENT_TEMPLATES.get((domain, action))
    if template is None:
        return f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}", True
    try:
        return template.format(**context), False
    except (KeyError, IndexError, ValueError):
        return template, False


reload_event_templates()

__all__ = ["EVENT_TEMPLATES", "reload_event_templates", "render_event"]
