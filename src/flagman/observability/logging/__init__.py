"""Observability – structured logging helpers."""
from flagman.observability.logging.factory import LoggerFactory, configure_logging, get_logger
from flagman.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "LoggerFactory",
    "SensitiveFieldsFilter",
    "configure_logging",
    "get_logger",
]
