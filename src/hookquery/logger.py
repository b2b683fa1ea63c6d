"""Logging for collection builders and request dispatch.

Records are emitted through the standard `logging` module. Each `Logger` is
bound to a component name and, optionally, to context such as the collection
it serves; the context is rendered as a `key=value` prefix on every message:

    2026-10-18 12:00:00,000 INFO [RequestDispatcher] collection=posts READ collection/posts/7
"""

import logging
from typing import Any, Optional

from hookquery.settings import settings as api_settings

_configured = False


def _level(name: Optional[str]) -> int:
    """Map a level name to its `logging` constant; unknown or empty names mean INFO."""
    level = logging.getLevelName((name or "").upper())
    return level if isinstance(level, int) else logging.INFO


def setup_global_logging(level: str = "INFO") -> None:
    """Configure the root logger once for the whole process.

    Args:
        level: Log level name (e.g., "DEBUG", "INFO")
    """
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=_level(level),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    _configured = True


class Logger:
    """Component logger carrying request context.

    - `message()` is the routine per-request channel; it follows
      `settings.LOG_LEVEL` so dispatches show up at the configured verbosity.
    - `request()` logs one dispatched request as `VERB path`.
    - `bind()` returns a logger with extra context (e.g. `collection=posts`).
    """

    def __init__(self, name: Optional[str] = None, **context: Any) -> None:
        if not _configured:
            setup_global_logging(api_settings.LOG_LEVEL)
        self._logger = logging.getLogger(name or "hookquery")
        self.context = context

    @property
    def name(self) -> str:
        return self._logger.name

    def bind(self, **context: Any) -> "Logger":
        return Logger(self.name, **{**self.context, **context})

    def _prefixed(self, msg: str) -> str:
        if not self.context:
            return msg
        prefix = " ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{prefix} {msg}"

    def is_enabled_for(self, level: str) -> bool:
        return self._logger.isEnabledFor(_level(level))

    def log(self, level: str, msg: str, *args, **kwargs) -> None:
        self._logger.log(_level(level), self._prefixed(msg), *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self.log("DEBUG", msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self.log("INFO", msg, *args, **kwargs)

    def message(self, msg: str, *args, **kwargs) -> None:
        self.log(api_settings.LOG_LEVEL, msg, *args, **kwargs)

    def request(self, verb: str, path: str) -> None:
        self.message("%s %s", verb.upper(), path)
