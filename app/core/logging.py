# app/core/logging.py
import logging
import sys
import colorlog

from app.core.config import Settings, get_settings

LOG_FORMAT = "%(log_color)s%(asctime)s %(levelname)-8s [%(name)s]%(reset)s %(message)s"

# cache hit/miss lines come from here; keep them visible at INFO
CATALOG_LOGGERS = ("app.domain.services.catalog_svc", "app.db.seed")


def resolve_level(settings: Settings) -> int:
    """LOG_LEVEL wins when set, otherwise DEBUG toggles between DEBUG and INFO."""
    if settings.LOG_LEVEL:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if isinstance(level, int):
            return level
        raise ValueError(f"Unknown LOG_LEVEL: {settings.LOG_LEVEL}")
    return logging.DEBUG if settings.DEBUG else logging.INFO


def configure_logging(settings: Settings | None = None) -> int:
    settings = settings or get_settings()
    level = resolve_level(settings)

    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            LOG_FORMAT,
            datefmt="%H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for name in CATALOG_LOGGERS:
        logging.getLogger(name).setLevel(level)

    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level if settings.LOG_ACCESS else logging.WARNING)
    # Driver chatter
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("motor").setLevel(logging.WARNING)
    return level
