import json
import logging
import sys
from datetime import datetime, timezone


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger_name": record.name,
            "func_name": record.funcName,
            "line_no": record.lineno,
        }
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        if hasattr(record, "props") and isinstance(record.props, dict):
            log_entry.update(record.props)
        # default=str keeps paths, enums and the like from breaking the line
        return json.dumps(log_entry, default=str)


def setup_logging(log_level: str | None = None):
    if log_level is None:
        from swapi_graphql.core.config import settings

        log_level = settings.LOG_LEVEL
    log_level = log_level.upper()
    numeric_level = getattr(logging, log_level, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove default handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(JsonFormatter())
    root_logger.addHandler(console_handler)

    # Suppress verbose logging from libraries
    logging.getLogger("uvicorn.error").propagate = False
    logging.getLogger("uvicorn.access").propagate = False
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    # Example of adding props to a log record:
    # logger = logging.getLogger(__name__)
    # logger.info("Fetched page", extra={"props": {"resource": "people", "page": 2}})


if __name__ == "__main__":
    # For testing the logging setup
    setup_logging("DEBUG")
    logger = logging.getLogger("test_logger")
    logger.debug("This is a debug message")
    logger.info("This is an info message")
    logger.warning("This is a warning message")
    try:
        raise ValueError("Something went wrong")
    except ValueError:
        logger.exception("An exception occurred")
    logger.info(
        "Log with extra props", extra={"props": {"resource": "films", "count": 6}}
    )
