"""Logging configuration using loguru — colored console or structured JSON.

Every sink writes to stderr so the CLI can keep stdout for its output
document. Log lines carry a ``request_id`` extra, set per request by the API
middleware and ``-`` everywhere else.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from omegaconf import DictConfig

_PRETTY_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[request_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Third-party loggers that are only interesting when something goes wrong.
_QUIET_LOGGERS = ("httpx", "httpcore", "multipart", "python_multipart", "uvicorn.access")


class _InterceptHandler(logging.Handler):
    """Route standard-library records (uvicorn, starlette, httpx) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno  # type: ignore[assignment]

        # Skip logging's own frames so loguru reports the real caller.
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(cfg: DictConfig) -> None:
    """Configure loguru from the ``logging`` config section.

    Parameters
    ----------
    cfg:
        The ``logging`` sub-config with keys ``level``, ``colored``, ``format``.
        ``format`` is ``"pretty"`` (colored console) or ``"structured"``
        (JSON lines).
    """
    level: str = getattr(cfg, "level", "WARNING").upper()
    use_json: bool = getattr(cfg, "format", "pretty") == "structured"
    colorize: bool = getattr(cfg, "colored", True)

    if use_json:
        handler = {"sink": sys.stderr, "level": level, "serialize": True, "colorize": False}
    else:
        handler = {
            "sink": sys.stderr,
            "level": level,
            "format": _PRETTY_FORMAT,
            "colorize": colorize,
        }
    logger.configure(handlers=[handler], extra={"request_id": "-"})

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug("Logging configured", level=level, json_mode=use_json)
