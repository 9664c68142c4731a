"""
Structured logging with key=value and JSON output support.

Wraps the standard library ``logging`` module to provide structured output
in two formats: human-readable key=value pairs (default) and JSON for log
aggregators.

The ``StructuredFormatter`` reads structured data from the
``structured_kv`` extra field (attached by Logger) and appends it as
key=value pairs. Installed on the root handler by the command line, it
also formats the plain ``logging.getLogger(__name__)`` records emitted by
the utils layer.

Examples:
    ```python
    from nodeaddr.core.logger import Logger

    logger = Logger("cli")
    logger.info("resolved", host="localhost", address="127.0.0.1")
    # Output: resolved host=localhost address=127.0.0.1

    json_logger = Logger("cli", json_output=True)
    json_logger.info("resolved", host="localhost")
    # Output: {"timestamp": "...", "level": "info", "logger": "cli", ...}
    ```
"""

from __future__ import annotations

import datetime
import json
import logging
from typing import Any, ClassVar


def _truncate(value: str, max_value_length: int | None) -> str:
    if max_value_length and len(value) > max_value_length:
        dropped = len(value) - max_value_length
        return value[:max_value_length] + f"...<truncated {dropped} chars>"
    return value


def format_kv_pairs(
    kwargs: dict[str, Any],
    max_value_length: int | None = 1000,
    prefix: str = " ",
) -> str:
    """Format a dictionary as space-separated key=value pairs.

    Values are truncated to ``max_value_length`` characters. Values that
    are empty or contain whitespace, equals signs, or quotes are escaped
    and wrapped in double quotes.

    Args:
        kwargs: Key-value pairs to format.
        max_value_length: Maximum characters per value before truncation.
            Pass None to disable truncation.
        prefix: String prepended to the output (default: single space).

    Returns:
        Formatted string, e.g. ``' host=::1 error="Name or service not known"'``.
        Returns an empty string if kwargs is empty.
    """
    if not kwargs:
        return ""

    parts = []
    for k, v in kwargs.items():
        s = _truncate(str(v), max_value_length)
        if not s or " " in s or "=" in s or '"' in s or "'" in s:
            escaped = s.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'{k}="{escaped}"')
        else:
            parts.append(f"{k}={s}")

    return prefix + " ".join(parts)


class StructuredFormatter(logging.Formatter):
    """Formats log records as ``level name message key=value ...``."""

    def format(self, record: logging.LogRecord) -> str:
        base = f"{record.levelname.lower()} {record.name} {record.getMessage()}"
        extra: dict[str, Any] = getattr(record, "structured_kv", {})
        if extra:
            base += format_kv_pairs(extra)
        return base


class Logger:
    """Structured logger that appends keyword arguments as extra fields.

    All public methods mirror the standard logging API with an added
    ``**kwargs`` parameter carrying the structured fields.
    """

    _DEFAULT_MAX_VALUE_LENGTH: ClassVar[int] = 1000

    def __init__(
        self,
        name: str,
        *,
        json_output: bool = False,
        max_value_length: int | None = None,
    ) -> None:
        """Initialize a structured logger.

        Args:
            name: Logger name, passed to ``logging.getLogger(name)``.
            json_output: If True, emit JSON objects instead of key=value pairs.
            max_value_length: Maximum character length for individual values
                before truncation. Defaults to 1000.
        """
        if max_value_length is None:
            max_value_length = self._DEFAULT_MAX_VALUE_LENGTH
        self._logger = logging.getLogger(name)
        self._json_output = json_output
        self._max_value_length = max_value_length

    @property
    def name(self) -> str:
        return self._logger.name

    def _format_json(self, msg: str, level: str, kwargs: dict[str, Any]) -> str:
        record = {
            "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
            "level": level,
            "logger": self._logger.name,
            "message": msg,
            **kwargs,
        }
        return json.dumps(record, default=str)

    def _make_extra(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        if not kwargs:
            return {}
        truncated = {
            k: _truncate(str(v), self._max_value_length) if isinstance(v, str) else v
            for k, v in kwargs.items()
        }
        return {"structured_kv": truncated}

    def _log(self, level: int, msg: str, kwargs: dict[str, Any], *, exc_info: bool = False) -> None:
        if self._json_output:
            name = logging.getLevelName(level).lower()
            self._logger.log(level, self._format_json(msg, name, kwargs), exc_info=exc_info)
        else:
            self._logger.log(level, msg, extra=self._make_extra(kwargs), exc_info=exc_info)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log a DEBUG level message with optional key=value pairs."""
        self._log(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log an INFO level message with optional key=value pairs."""
        self._log(logging.INFO, msg, kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log a WARNING level message with optional key=value pairs."""
        self._log(logging.WARNING, msg, kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log an ERROR level message with optional key=value pairs."""
        self._log(logging.ERROR, msg, kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log an ERROR level message with the current traceback."""
        self._log(logging.ERROR, msg, kwargs, exc_info=True)
