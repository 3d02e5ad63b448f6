"""Logging configuration for urlfeed."""

import json
import logging
import sys

from urlfeed.config import Settings, get_settings


# Feed context passed through the `extra` argument of logging calls
CONTEXT_FIELDS = ("url", "link", "feed_path", "outcome")


class JsonFormatter(logging.Formatter):
    """JSON formatter for production logging.

    Feed context attached with ``extra=`` (see ``CONTEXT_FIELDS``) is emitted
    as top-level keys so a run can be traced by URL.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        base = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                base[field] = value
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def setup_logging(settings: Settings | None = None) -> None:
    """Configure logging based on environment."""
    settings = settings or get_settings()
    handler = logging.StreamHandler(sys.stdout)

    if settings.env == "prod":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.log_level)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
