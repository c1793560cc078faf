"""Structured logging setup"""

import logging
import json
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional

# Attributes every LogRecord carries; anything else came in through `extra`
_RESERVED = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
    'levelno', 'lineno', 'module', 'msecs', 'message', 'pathname', 'process',
    'processName', 'relativeCreated', 'thread', 'threadName', 'exc_info',
    'exc_text', 'stack_info', 'taskName',
}


class JSONFormatter(logging.Formatter):
    """JSON log formatter"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logger(
    name: str = "leads",
    log_dir: Optional[str] = "logs",
    level: str = "INFO"
) -> logging.Logger:
    """
    Setup structured logging for a processing run

    Handlers go on the `name` logger and on `leads_core`, so engine modules
    logging through `logging.getLogger(__name__)` reach the same outputs.

    Args:
        name: Logger name, also used as the log file prefix
        log_dir: Log directory, or None to log to the console only
        level: Log level name

    Returns:
        Configured logger
    """
    handlers = []

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"{name}_{timestamp}.log"

        # File handler with JSON format
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(JSONFormatter())
        handlers.append(file_handler)

    # Console handler with standard format
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )
    handlers.append(console_handler)

    logger = logging.getLogger(name)
    for target in (logger, logging.getLogger("leads_core")):
        for handler in list(target.handlers):
            target.removeHandler(handler)
            handler.close()
        target.setLevel(level.upper())
        for handler in handlers:
            target.addHandler(handler)

    return logger
