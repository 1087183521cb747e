"""
Editing context logger.

Provides logging interface for editing context with automatic [editor] prefix.
All editing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[editor]"


def setup_editing_logger(log_dir: Path, portfolio_name: str) -> Path:
    """
    Setup logger for an editing session.

    Args:
        log_dir: Directory for this editing session
        portfolio_name: Portfolio being edited, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="editor",
        log_dir=log_dir,
        extra_provenance={"Portfolio": portfolio_name},
    )


def _log_info(message: str) -> None:
    """Log info message with [editor] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [editor] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [editor] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [editor] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [editor] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_save_result(portfolio_name: str, result) -> None:
    """
    Log the outcome of saving a portfolio.

    Args:
        portfolio_name: Portfolio display name
        result: SaveResult from EditingSession.save()
    """
    if result.success:
        _log_success(f"{portfolio_name}: {result.action} succeeded")
    else:
        _log_error(f"Failed to save {portfolio_name}")
        _log_error(f"  Error: {result.error}")
