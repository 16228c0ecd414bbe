"""
Logging setup driven by the ``logging`` section of :class:`ConverterConfig`.

The converter modules only emit records through their module loggers. The
serializer attaches ``quad_count`` and ``rdf_format`` to its records, which
the JSON formatter writes out as fields.

Recognised keys of the section: ``level``, ``format`` (``text`` or
``json``), ``pattern``, ``date_format`` and ``file``.
"""

import json
import logging
import sys
from logging import Handler
from typing import Any, Dict, List, Optional, Tuple

from .config import ConverterConfig
from .constants import LoggingConfig


class JSONFormatter(logging.Formatter):
    """Formats a record as one JSON object, including converter fields."""

    CONVERTER_FIELDS = ("quad_count", "rdf_format")

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt or LoggingConfig.DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in self.CONVERTER_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


_installed_handlers: List[Handler] = []
_installed_signature: Optional[Tuple[Any, ...]] = None


def _remove_installed_handlers() -> None:
    """Detach and close the handlers added by a previous setup_logging call."""
    global _installed_handlers, _installed_signature
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers = []
    _installed_signature = None


def setup_logging(
    level: Optional[str] = None,
    config: Optional[ConverterConfig] = None,
) -> List[Handler]:
    """
    Configure the root logger from a converter configuration.

    Calling it again with the same settings keeps the installed handlers;
    any change in settings replaces them.

    Args:
        level: Log level, overrides the configured one
        config: Configuration whose ``logging`` section is applied

    Returns:
        The handlers installed on the root logger
    """
    global _installed_handlers, _installed_signature

    section = dict(config.logging) if config else {}

    level_name = str(level or section.get('level') or LoggingConfig.DEFAULT_LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    format_style = str(section.get('format', LoggingConfig.DEFAULT_FORMAT_STYLE)).lower()
    if format_style not in LoggingConfig.SUPPORTED_FORMATS:
        format_style = LoggingConfig.DEFAULT_FORMAT_STYLE
    pattern = section.get('pattern') or LoggingConfig.LOG_FORMAT
    date_format = section.get('date_format') or LoggingConfig.DATE_FORMAT
    log_file = section.get('file')

    signature = (log_level, format_style, pattern, date_format, log_file)
    if signature == _installed_signature and _installed_handlers:
        return list(_installed_handlers)

    if format_style == 'json':
        formatter: logging.Formatter = JSONFormatter(datefmt=date_format)
    else:
        formatter = logging.Formatter(fmt=pattern, datefmt=date_format)

    handlers: List[Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    _remove_installed_handlers()
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    _installed_handlers = handlers
    _installed_signature = signature
    return list(handlers)
