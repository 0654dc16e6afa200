"""Observability – LoggerFactory (structlog over stdlib logging)."""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from flagman.observability.logging.filters import SensitiveFieldsFilter


class LoggerFactory:
    """Configure structlog and route stdlib ``logging`` through the same renderer."""

    @staticmethod
    def configure(
        level: int = logging.INFO,
        *,
        json_output: bool = False,
        sensitive_fields: frozenset[str] | None = None,
    ) -> None:
        _filter = SensitiveFieldsFilter(sensitive_fields)

        def _redact(logger: Any, method: Any, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
            return _filter.redact_deep(event_dict)

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            _redact,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if json_output
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)
        logging.getLogger("httpx").setLevel(max(level, logging.WARNING))


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, bound to *initial_values* when given."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


def configure_logging(level: int = logging.INFO, *, json_output: bool = False) -> None:
    LoggerFactory.configure(level, json_output=json_output)


__all__ = ["LoggerFactory", "configure_logging", "get_logger"]
