"""
Logging Configuration
loguru sinks for the API; stdlib loggers are routed into loguru
"""
import sys
import logging

from loguru import logger

from .config import settings

# Library loggers whose records should appear in loguru output
INTERCEPTED = ("uvicorn", "uvicorn.access", "uvicorn.error", "sqlalchemy.engine")

PLAIN_FORMAT = "{time} | {level} | {name}:{function}:{line} | {message}"
COLOR_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Forward stdlib log records to loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging's own frames so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def json_logs() -> bool:
    return settings.LOG_JSON_FORMAT and settings.ENVIRONMENT == "production"


def configure_logging():
    logger.remove()

    if json_logs():
        logger.add(sys.stdout, level=settings.LOG_LEVEL, serialize=True)
    else:
        logger.add(sys.stdout, format=COLOR_FORMAT, level=settings.LOG_LEVEL, colorize=True)

    if settings.LOG_TO_FILE:
        logger.add(
            "logs/job_tracker_{time:YYYY-MM-DD}.log",
            rotation="00:00",
            retention="30 days",
            level=settings.LOG_LEVEL,
            format=PLAIN_FORMAT,
            serialize=settings.LOG_JSON_FORMAT,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in INTERCEPTED:
        logging.getLogger(name).handlers = [InterceptHandler()]

    logger.info(f"Logging configured: level={settings.LOG_LEVEL}, json={json_logs()}")


# Initialize logging on import
configure_logging()
