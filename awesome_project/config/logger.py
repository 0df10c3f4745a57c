"""
Logging configuration.

Log records go to stderr through a single handler on the root logger, in plain text or as logstash-style JSON.
Standard output is left to the program itself.
"""

import logging.config
import time
from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator
from pydantic_settings import SettingsConfigDict
from pythonjsonlogger.json import JsonFormatter

_RESERVED_LOGGER_NAMES = ("formatter", "root", "root_log_level", "")


def _base_config() -> dict:
    return {
        "version": 1,
        # loggers created at import time (e.g. by the settings loader) must keep working
        "disable_existing_loggers": False,
        "filters": {
            "name_with_func": {
                "()": "awesome_project.config.logger.NameWithFuncFilter"
            },
        },
        "formatters": {
            "standard": {
                "format": "{asctime} {levelname:>8s} {process} --- [{threadName:>15s}] {name_with_func:40}: "
                "{message}",
                "style": "{",
            },
            "json": {
                "()": "awesome_project.config.logger.LogstashJsonFormatter"
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "level": "DEBUG",
                "formatter": "standard",
                "filters": ["name_with_func"],
            },
        },
        "loggers": {},
        "root": {
            "handlers": ["console"],
            "level": "DEBUG",
        },
    }


class LogLevel(str, Enum):
    """
    Python logging levels accepted in the settings.
    """

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"
    NOTSET = "NOTSET"


class FormatterType(str, Enum):
    STANDARD = "standard"
    JSON = "json"


class LoggingSettings(BaseModel):
    """
    Logging section of the settings.

    ``formatter`` selects plain text or JSON output, ``root_log_level`` applies to the root logger and
    ``child_log_levels`` maps logger names (e.g. ``awesome_project.services``) to their own level.
    """

    model_config = SettingsConfigDict(extra="forbid")

    formatter: FormatterType = FormatterType.STANDARD
    root_log_level: LogLevel = LogLevel.DEBUG
    child_log_levels: dict[str, LogLevel] = {}

    @field_validator("child_log_levels")
    def logger_name_is_not_reserved(  # pylint: disable=no-self-argument
        cls, child_log_levels: dict[str, LogLevel]
    ) -> dict[str, LogLevel]:
        for name in child_log_levels:
            if name in _RESERVED_LOGGER_NAMES:
                raise ValueError(f"Logger name '{name}' is empty or reserved.")
        return child_log_levels


def build_logging_config(logging_settings: LoggingSettings) -> dict:
    """
    Translate the logging settings into a ``logging.config.dictConfig`` dictionary.
    """
    config = _base_config()
    config["handlers"]["console"]["formatter"] = logging_settings.formatter.value
    config["root"]["level"] = logging_settings.root_log_level.value
    for logger_name, log_level in logging_settings.child_log_levels.items():
        config["loggers"][logger_name] = {"level": log_level.value}
    return config


def apply_logging_settings(
    logging_settings: LoggingSettings = LoggingSettings(),
) -> None:
    """
    Configures python logging for the application.

    Modules should log through ``logging.getLogger(__name__)`` and never add handlers of their own, so that
    every record propagates to the root handler and shares its format.

    :param logging_settings: the settings according to which logging should be configured
    """
    logging.config.dictConfig(build_logging_config(logging_settings))
    # period instead of comma before the milliseconds
    logging.Formatter.default_msec_format = "%s.%03d"
    logging.Formatter.converter = time.gmtime
    logging.captureWarnings(True)


class NameWithFuncFilter(logging.Filter):
    """Adds ``name_with_func`` (``logger.function``) to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.name_with_func = f"{record.name}.{record.funcName}"
        return True


class LogstashJsonFormatter(JsonFormatter):
    """Format JSON log entries the way logstash-logback-encoder does.
    https://github.com/logfellow/logstash-logback-encoder

    Fields:
    - message: log message
    - @timestamp: ISO timestamp with milliseconds and time zone
    - level: 'DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'
    - level_value: 10000 ... 50000, handy for filtering
    - logger_name, func_name, thread_name
    """

    _logged_fields = (
        ("threadName", "thread_name"),
        ("levelname", "level"),
        ("name", "logger_name"),
        ("funcName", "func_name"),
    )
    _log_levels = ["DEBUG", "INFO", "WARN", "ERROR", "CRITICAL"]

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["@timestamp"] = (
            time.strftime("%Y-%m-%dT%H:%M:%S.%%03d%z", self.converter(record.created)) % record.msecs
        )
        for src_field, field in self._logged_fields:
            value = record.__dict__.get(src_field)
            if value is None:
                continue
            if field == "level":
                if value == "WARNING":
                    value = "WARN"
                if value in self._log_levels:
                    log_record["level_value"] = (self._log_levels.index(value) + 1) * 10_000
            log_record[field] = value
