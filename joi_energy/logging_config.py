"""
Root logger setup for the pricing API.

Output is one JSON object per line by default, or plain text with
``LOG_JSON=false``. JSON lines carry ``timestamp`` (UTC, ISO-8601),
``level``, ``logger`` and ``message``, and ``exc_info`` when the record
has a traceback attached.

CHANGELOG:
- 2026-10-18: Initial creation
- 2026-10-18: Optional plain-text output for local development

TODO:
- None
"""

import json
import logging
from datetime import UTC, datetime

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        payload = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        # Tracebacks and multi-line messages are escaped, never split.
        return json.dumps(payload, default=str)


def _formatter(json_output: bool) -> logging.Formatter:
    if json_output:
        return JSONFormatter()
    return logging.Formatter(_PLAIN_FORMAT)


def setup_logging(level: int | str = logging.INFO, json_output: bool = True) -> None:
    """Install a single stderr handler on the root logger.

    Safe to call more than once: handlers left by an earlier call (or by
    uvicorn/pytest) are dropped first.

    Args:
        level: Root level, as a number or a name such as ``"DEBUG"``.
        json_output: JSON lines when true, plain text otherwise.
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)

    stream = logging.StreamHandler()
    stream.setFormatter(_formatter(json_output))
    root.addHandler(stream)
    root.setLevel(level)
