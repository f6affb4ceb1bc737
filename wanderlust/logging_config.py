"""Logging setup shared by the seed script and the admin API.

Call setup_logging() once at process start.
"""

import json
import logging
from datetime import UTC, datetime
from typing import Optional

from wanderlust.config import settings


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def format(self, record):
        entry = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    def format(self, record):
        ts = datetime.now(UTC).strftime("%H:%M:%S")
        line = f"{ts} [{record.levelname[0]}] {record.name}: {record.getMessage()}"
        if record.exc_info and record.exc_info[0]:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """Configure the root logger.

    Args:
        level: Override log level (default: LOG_LEVEL setting)
        json_logs: Force JSON output (default: LOG_JSON setting)
    """
    if level is None:
        level = settings.LOG_LEVEL
    if json_logs is None:
        json_logs = settings.LOG_JSON

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setFormatter(JSONFormatter() if json_logs else HumanFormatter())
    root.addHandler(console)

    # Driver chatter
    for name in ("pymongo", "motor"):
        logging.getLogger(name).setLevel(logging.WARNING)
