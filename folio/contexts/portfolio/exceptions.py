"""Exceptions shared across Folio contexts."""

from typing import Optional


class FolioError(Exception):
    """Base class for Folio errors."""


class ConfigurationError(FolioError, ValueError):
    """
    Raised when a portfolio's configuration cannot be rendered safely.

    The main case is a portfolio using the custom template without a theme
    configuration: there is no safe default to render, so construction refuses it.
    """


class UnsupportedTemplateError(FolioError):
    """Raised when the custom-theme renderer is given a fixed template."""

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(
            f"Template '{template_id}' is a fixed template; only 'custom' is rendered "
            f"from a theme configuration"
        )


class StoreError(FolioError):
    """
    Raised when the document store fails.

    Attributes:
        message: Error description
        portfolio_id: Portfolio involved, if any
        original_error: The underlying storage error
    """

    def __init__(
        self,
        message: str,
        portfolio_id: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.portfolio_id = portfolio_id
        self.original_error = original_error

        parts = [message]
        if portfolio_id:
            parts.append(f"Portfolio: {portfolio_id}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
