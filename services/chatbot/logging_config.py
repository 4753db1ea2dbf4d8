"""Process-wide logging for the chatbot service; called once from run()."""

import logging
import sys

SERVICE_LOGGER = "chatbot"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO", stream=None) -> logging.Logger:
    """
    Route the service's log records to stdout and return its logger.

    Only the `chatbot` logger tree gets the handler; uvicorn keeps its own
    handlers so access lines are not printed twice.
    """
    service = logging.getLogger(SERVICE_LOGGER)
    service.setLevel(level.upper())

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    service.handlers.clear()
    service.addHandler(handler)
    service.propagate = False
    return service
