import json
import logging
import sys
from datetime import datetime, timezone

from energy_harmony.core.config import LOG_LEVEL

ROOT_LOGGER = "energy_harmony"

# attributes every LogRecord carries; anything else came in through `extra`
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, event, fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        )

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


class ContextLogger(logging.LoggerAdapter):
    """Keyword arguments of a log call become structured fields.

    Fields given to `bind` are attached to every record of the returned
    adapter; per-call fields win over bound ones.
    """

    _PASSTHROUGH = frozenset(("exc_info", "stack_info", "stacklevel"))

    def process(self, msg, kwargs):
        fields = dict(self.extra)
        fields.update(kwargs.pop("extra", {}))
        for key in list(kwargs):
            if key not in self._PASSTHROUGH:
                fields[key] = kwargs.pop(key)
        kwargs["extra"] = fields
        return msg, kwargs

    def bind(self, **fields) -> "ContextLogger":
        return ContextLogger(self.logger, {**self.extra, **fields})


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Installs the JSON stdout handler on the package logger, once."""
    root = logging.getLogger(ROOT_LOGGER)
    if not any(isinstance(h.formatter, JsonFormatter) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        root.addHandler(handler)
        root.propagate = False
    root.setLevel(level)
    return root


def get_logger(name: str, **fields) -> ContextLogger:
    configure_logging()
    return ContextLogger(logging.getLogger(name), fields)
