import logging
import sys

from core.settings import Settings

LOGGER_NAME = 'staff_hierarchy'


def configure_logging(config: Settings) -> logging.Logger:
    """Настроить логгер библиотеки по параметрам из Settings.

    Вызывается приложением-хостом. Сообщения выводятся собственным обработчиком
    и не уходят в root-логгер. Повторный вызов не дублирует обработчики.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(config.LOG_LEVEL.upper())

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False

    package_logger.debug('Логирование настроено: level=%s', config.LOG_LEVEL)
    return package_logger


# Глобальный экземпляр. До configure_logging сообщения обрабатывает хост
logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())
