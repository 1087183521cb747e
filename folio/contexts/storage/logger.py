"""
Storage context logger.

Provides logging interface for storage context with automatic [store] prefix.
All storage modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[store]"


def _log_info(message: str) -> None:
    """Log info message with [store] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [store] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [store] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_store_operation(operation: str, portfolio_id: str, owner_id: str = None) -> None:
    """Log a completed store operation at debug level."""
    owner = f" (owner {owner_id})" if owner_id else ""
    _log_debug(f"{operation} {portfolio_id}{owner}")
