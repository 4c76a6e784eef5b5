import logging
import os
import sys

from pythonjsonlogger import jsonlogger

_UVICORN_LOGGERS = ["uvicorn", "uvicorn.access", "uvicorn.error"]

_configured = False


def setup_logging(name: str | None = None) -> logging.Logger:
    """
    Configures structured JSON logging and returns a logger.

    The first call installs a single stdout handler with a JSON formatter
    (timestamp, level, logger name, message, trace_id, span_id) on the root
    logger and on the Uvicorn loggers, so request logs and pipeline logs share
    one format. The level comes from ``LOG_LEVEL`` (default ``INFO``). Later
    calls only look the logger up.

    Args:
        name: Logger name; the root logger when omitted.

    Returns:
        logging.Logger: The requested logger.
    """
    global _configured

    if not _configured:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
        )
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers = []
        root_logger.addHandler(stream_handler)

        for logger_name in _UVICORN_LOGGERS:
            u_logger = logging.getLogger(logger_name)
            u_logger.setLevel(level)
            u_logger.handlers = [stream_handler]
            u_logger.propagate = False

        _configured = True

    return logging.getLogger(name)
