"""
utils.py

Shared helpers.

Why a separate module?
- One logging standard across the whole service.
- The request middleware and the CLI format log lines the same way.
"""

import json
import logging
import os


class JsonLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, "request_id"):
            payload["request_id"] = getattr(record, "request_id")
        if hasattr(record, "intent"):
            payload["intent"] = getattr(record, "intent")
        return json.dumps(payload, ensure_ascii=False)


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Create (or reuse) a named logger.

    Why the handler check?
    - Calling this twice for the same name would otherwise print duplicate lines.

    LOG_LEVEL env var:
    - Accepts DEBUG, INFO, WARNING, ERROR, CRITICAL.
    - Read only when the handler is installed; later calls do not override it.

    LOG_FORMAT env var:
    - "json" switches to one JSON object per line, anything else is plain text.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        use_json = os.getenv("LOG_FORMAT", "plain").lower() == "json"
        if use_json:
            formatter = JsonLogFormatter()
        else:
            formatter = logging.Formatter(
                fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s"
            )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        env_level_str = os.getenv("LOG_LEVEL", "").upper()
        resolved_level = getattr(logging, env_level_str, None) or level
        logger.setLevel(resolved_level)
    return logger
