"""Error types and error logging."""

from typing import Optional

from .logging_config import get_logger

logger = get_logger(__name__)


def log_error(error: Exception, context: Optional[str] = None) -> None:
    """Log an error with optional context.

    Args:
        error: The exception to log
        context: Optional context about where/why the error occurred
    """
    if context:
        logger.error(f"{context}: {str(error)}")
    else:
        logger.error(str(error))


class YouTubeError(Exception):
    """Base class for ytquery errors."""

    pass


class ConfigError(YouTubeError):
    """Error raised when the API key cannot be loaded."""

    pass


class NoContentError(YouTubeError):
    """Error raised when a query expected to return items returns none."""

    def __init__(self, message: str = "no content found"):
        super().__init__(message)


class NotChannelError(YouTubeError):
    """Error raised when a channel search returns a result of another kind."""

    def __init__(self, kind: Optional[str] = None):
        """Initialize error.

        Args:
            kind: The kind the API actually returned
        """
        self.kind = kind
        super().__init__("result not channel type")
