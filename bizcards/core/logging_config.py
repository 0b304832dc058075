import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from bizcards.core.config import Settings

REQUEST_LOGGER = "bizcards.requests"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if not settings.LOG_DIR:
        return

    request_logger = logging.getLogger(REQUEST_LOGGER)
    if any(isinstance(h, TimedRotatingFileHandler) for h in request_logger.handlers):
        return

    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = TimedRotatingFileHandler(
        log_dir / "errors.log", when="midnight", encoding="utf-8"
    )
    handler.setLevel(logging.WARNING)
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s"))
    request_logger.addHandler(handler)
