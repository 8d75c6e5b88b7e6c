from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Mapping, TextIO


class JsonFormatter(logging.Formatter):
    """Format log records as one JSON object per line.

    Structured data can be attached with ``extra={'context': {...}}``.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_record: Dict[str, Any] = {
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        context = getattr(record, 'context', None)
        if isinstance(context, Mapping):
            log_record['context'] = dict(context)

        if record.exc_info:
            log_record['exc_info'] = self.formatException(record.exc_info)

        return json.dumps(log_record, ensure_ascii=False, default=str)


def setup_logging(level_name: str, stream: TextIO | None = None) -> None:
    """Configure the root logger to emit JSON to *stream* (stderr by default)."""

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)

    level = getattr(logging, (level_name or '').upper(), None)
    root_logger.setLevel(level if isinstance(level, int) else logging.INFO)
