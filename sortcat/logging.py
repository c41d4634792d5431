# sortcat/logging.py
from __future__ import annotations
import logging as _logging
import os
import sys

_RESET = "\x1b[0m"
_ANSI = {
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "red": "\x1b[31m",
    "cyan": "\x1b[36m",
    "gray": "\x1b[90m",
}

_COLOR_ENABLED: bool = False
_LOGGER = _logging.getLogger("sortcat")


def _supports_color() -> bool:
    return sys.stdout.isatty() and (os.environ.get("TERM") not in (None, "dumb"))


def c(text: str, color: str) -> str:
    if not _COLOR_ENABLED:
        return text
    return f"{_ANSI.get(color, '')}{text}{_RESET}"


def level_for(verbosity: int) -> int:
    if verbosity >= 2:
        return _logging.DEBUG
    if verbosity == 1:
        return _logging.INFO
    return _logging.WARNING


def setup_logging(verbosity: int = 0) -> None:
    """Send sortcat messages to stdout. Verbosity: 0→WARNING, 1→INFO, 2+→DEBUG."""
    global _COLOR_ENABLED
    _COLOR_ENABLED = _supports_color()

    handler = _logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(_logging.Formatter("%(message)s"))

    _LOGGER.handlers = [handler]
    _LOGGER.setLevel(level_for(verbosity))


def log_debug(msg: str) -> None:
    _LOGGER.debug(msg)


def log_warn(msg: str) -> None:
    _LOGGER.warning(f"{c('⚠', 'yellow')} {msg}")


def log_err(msg: str) -> None:
    _LOGGER.error(f"{c('✖', 'red')} {msg}")


def log_ok(msg: str) -> None:
    _LOGGER.info(f"{c('✓', 'green')} {msg}")


def log_step(label: str, value: str = "") -> None:
    suffix = f" {c(value, 'gray')}" if value else ""
    _LOGGER.info(f"{c('→', 'cyan')} {label}{suffix}")
