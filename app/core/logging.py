import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Все модули пишут в логгеры вида app.<module> через logging.getLogger(__name__)
APP_LOGGER = "app"


def configure_logging(log_level: str) -> None:
    """Настройка логгера приложения: уровень и вывод в stdout"""
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(log_level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
