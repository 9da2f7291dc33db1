"""Structured event logger for the scrollback package."""

from __future__ import annotations

import logging
import os
import sys

import colorlog

from .event_catalog import render_event

_EVENT_NAME_WIDTH = 32
_PREFIX_WIDTH = 16


def _debug_enabled() -> bool:
    return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")


def _console_formatter() -> logging.Formatter:
    return colorlog.ColoredFormatter(
        "%(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "magenta",
        },
        secondary_log_colors={
            "message": {
                "ERROR": "red",
                "CRITICAL": "magenta",
            }
        },
        reset=True,
        stream=sys.stderr,
    )


class ScrollbackLogger:
    """Thin wrapper around a stdlib logger that emits named events.

    Every record is an event ``<domain>_<action>``; the human text comes from
    the event catalog and the remaining keyword arguments are context. The
    ``codec`` keyword is reserved and rendered as the line prefix.
    """

    def __init__(self, name: str = "scrollback", log_file: str | None = None) -> None:
        self.logger = logging.getLogger(name)
        self.log_file = log_file if log_file is not None else os.environ.get("SCROLLBACK_LOG_FILE")
        self.logger.handlers.clear()
        self.logger.setLevel(logging.DEBUG if _debug_enabled() else logging.INFO)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(_console_formatter())
        self.logger.addHandler(console_handler)

        if self.log_file:
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
            self.logger.addHandler(file_handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        event_name = f"{domain}_{action}".lower()
        if human is None:
            human, derived = render_event(domain, action, kwargs)
            if derived:
                kwargs.setdefault("derived", True)
        codec = kwargs.pop("codec", None)
        prefix = self._build_prefix(codec if isinstance(codec, str) else None)
        if _debug_enabled():
            msg = self._build_debug_message(event_name, prefix, human, kwargs)
        else:
            msg = f"{prefix} {human}"
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _build_prefix(codec: str | None) -> str:
        label = codec or "core"
        return f"[{label.ljust(_PREFIX_WIDTH)[:_PREFIX_WIDTH]}]"

    @staticmethod
    def _build_debug_message(
        event_name: str, prefix: str, human: str, context: dict[str, object]
    ) -> str:
        if len(event_name) <= _EVENT_NAME_WIDTH:
            ev = event_name.ljust(_EVENT_NAME_WIDTH)
        else:  # truncate but keep rightmost indicator
            ev = event_name[: _EVENT_NAME_WIDTH - 1] + "…"
        base = f"{ev} {prefix} {human}"
        if context:
            base += " (" + ", ".join(f"{k}={v}" for k, v in context.items()) + ")"
        return base


logger = ScrollbackLogger()
