"""tally.core.log

Logging setup for the service process.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

from tally.core.config import LoggingConfig

PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, sort_keys=True)


def configure_logging(cfg: LoggingConfig | None = None) -> None:
    """Apply the configured level and format to the root logger."""

    cfg = cfg or LoggingConfig()
    handler = logging.StreamHandler()
    if cfg.json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    logging.basicConfig(level=cfg.level, handlers=[handler], force=True)
