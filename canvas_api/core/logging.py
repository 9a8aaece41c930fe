"""Logging setup for applications that embed the Canvas connector.

Connector records carry ``base_url``, ``method``, ``url`` and, for HTTP
failures, ``status_code`` as ``extra`` attributes; the JSON formatter emits
them as top-level keys so failures can be filtered per Canvas instance.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from canvas_api.core.config import Settings, settings as default_settings

# LogRecord attributes copied into JSON output when a connector sets them
CONNECTOR_FIELDS = ("base_url", "method", "url", "status_code")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with connector request fields when present."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONNECTOR_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)
        if record.exc_info and record.exc_info[1]:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(settings: Settings | None = None) -> None:
    """Reset the root logger to one stdout handler, plain or JSON per ``settings.log_json``."""
    settings = settings or default_settings
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if settings.log_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    root.addHandler(handler)

    # httpx logs every request at INFO; the connector logs its own failures
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
