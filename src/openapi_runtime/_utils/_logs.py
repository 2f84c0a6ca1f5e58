import logging
import sys
from typing import Any, Optional

from .constants import HEADER_AUTHORIZATION

LOGGER_NAME = "openapi_runtime"

logger = logging.getLogger(LOGGER_NAME)

_handler: Optional[logging.Handler] = None


def setup_logging(debug: bool = False) -> None:
    """Attach a stream handler to the package logger.

    Safe to call more than once; only one handler is ever installed.
    """
    global _handler
    if _handler is None or _handler not in logger.handlers:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(_handler)

    logger.setLevel(logging.DEBUG if debug else logging.INFO)


def redact_headers(headers: dict[str, Any]) -> dict[str, Any]:
    return {
        name: "<redacted>" if name.lower() == HEADER_AUTHORIZATION.lower() else value
        for name, value in headers.items()
    }
