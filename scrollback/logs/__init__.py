"""Project logging package.

Contains the event catalog and the ScrollbackLogger. Avoid importing stdlib
logging through this package name externally.
"""

from .event_catalog import EVENT_TEMPLATES, reload_event_templates, render_event  # noqa: F401
from .logger import ScrollbackLogger, logger  # noqa: F401

__all__ = [
    "ScrollbackLogger",
    "logger",
    "EVENT_TEMPLATES",
    "reload_event_templates",
    "render_event",
]
