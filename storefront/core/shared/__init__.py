"""
Shared utilities: logging configuration and context-aware loggers.
"""

from storefront.core.shared.logger import (
    ColoredFormatter,
    ContextLogger,
    JSONFormatter,
    configure_logging,
    get_logger,
    get_repository_logger,
    get_use_case_logger,
)

__all__ = [
    "ColoredFormatter",
    "ContextLogger",
    "JSONFormatter",
    "configure_logging",
    "get_logger",
    "get_repository_logger",
    "get_use_case_logger",
]
