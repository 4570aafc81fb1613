import sys
from loguru import logger
from app.core.config import settings

LOG_FORMAT = "[{level}] {message}"

# Tags used by the runtime's log collector besides the built-in levels
CUSTOM_LEVELS = {
    "HEALTH": 21,
    "TOOL": 22,
}

def setup_logging():
    """
    Configures the logging system using Loguru.
    Every line goes to stdout tagged with its level, e.g. ``[HEALTH] Ping received``.
    """
    # Remove default handlers
    logger.remove()

    for name, no in CUSTOM_LEVELS.items():
        try:
            logger.level(name)
        except ValueError:
            logger.level(name, no=no)

    # Console handler only; the container runtime ships stdout to CloudWatch
    logger.add(
        sys.stdout,
        level=settings.LOG_LEVEL,
        format=LOG_FORMAT,
        serialize=settings.JSON_LOGS,
        backtrace=False,
        diagnose=(settings.ENV == "development")
    )

    return logger

# Initialize logger instance
log = setup_logging()
