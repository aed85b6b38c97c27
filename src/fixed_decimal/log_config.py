"""
Logging configuration для приложений, использующих fixed_decimal.

Библиотека сама логирование не настраивает: модули только вызывают
structlog.get_logger(__name__). Хост-приложение вызывает configure_logging()
один раз при старте.
"""

import logging
import sys

import structlog


def configure_logging(level: int = logging.INFO) -> None:
    """
    Настройка stdlib logging + structlog (console renderer).

    Args:
        level: Уровень root-логгера (logging.DEBUG показывает отказы валидации)
    """
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger().setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
