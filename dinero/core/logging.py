import logging
import sys
from email.utils import formatdate

from fastapi import Request

LOGGER_NAME = "dinero"

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the `dinero` logger namespace and return its root logger.

    Safe to call more than once (tests build several apps per process); the
    handler is only installed the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger


def request_logger(logger: logging.Logger):
    """
    HTTP middleware that logs each request as
    `<start time> --- (<status>) <METHOD> <path>`.
    """

    async def log_request(request: Request, call_next):
        started = formatdate(usegmt=True)  # RFC 1123
        response = await call_next(request)
        logger.info("%s --- (%d) %s %s", started, response.status_code, request.method, request.url.path)
        return response

    return log_request
