"""ipcnv - IPv4 address / 32-bit integer conversion tool."""
from __future__ import annotations

import logging

import structlog


def setup_logging(level: str = "WARNING") -> None:
    timestamper = structlog.processors.TimeStamper(fmt="iso")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            timestamper,
            structlog.processors.add_log_level,
            structlog.processors.EventRenamer("message"),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(level=level.upper(), format="%(message)s")
    logging.getLogger("ipcnv").setLevel(level.upper())


logger = structlog.get_logger("ipcnv")
