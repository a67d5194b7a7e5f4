"""Observability utilities for structured logging."""

from .logging import bind_global_context, configure_logging

__all__ = [
    "bind_global_context",
    "configure_logging",
]
