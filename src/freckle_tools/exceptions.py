"""Custom exception hierarchy for the Freckle KPI CLI."""

from typing import Optional

import click
from rich.console import Console
from rich.markup import escape


class FreckleError(click.ClickException):
    """Base exception for all Freckle KPI errors."""

    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def show(self, file=None) -> None:
        """Display error with Rich formatting."""
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] {escape(self.format_message())}", highlight=False)

    def format_message(self) -> str:
        """Override in subclasses for custom formatting."""
        return self.message


class ConfigurationError(FreckleError):
    """Required configuration is missing."""


class AuthenticationError(FreckleError):
    """API token rejected."""

    def format_message(self) -> str:
        return f"{self.message}\n\nCheck the FRECKLE_APP_TOKEN environment variable."


class RateLimitError(FreckleError):
    """API rate limit exceeded."""

    def __init__(self, message: str = "Rate limit exceeded. Please try again later.", retry_after: Optional[str] = None):
        super().__init__(message)
        self.retry_after = retry_after

    def format_message(self) -> str:
        if self.retry_after:
            return f"Rate limit exceeded. Retry after {self.retry_after} seconds."
        return self.message


class NetworkError(FreckleError):
    """Network connectivity issue."""

    def format_message(self) -> str:
        return f"{self.message}\n\nCheck your internet connection and try again."


class APIResponseError(FreckleError):
    """API returned an error status or an unexpected response format."""

    pass


class ParseError(FreckleError):
    """A date coming from the API could not be parsed."""

    def __init__(self, value: object, expected: str = "YYYY-MM-DD"):
        super().__init__(f"Cannot parse date {value!r}, expected {expected}")
        self.value = value
        self.expected = expected
