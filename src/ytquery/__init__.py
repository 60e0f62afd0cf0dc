"""Command-line queries against the YouTube Data API."""

__version__ = "0.1.0"

# Import all public components
from .api import YouTubeAPI
from .auth import get_youtube_service
from .cli import main
from .commands import YouTubeCommand
from .config import Settings, load_settings
from .errors import ConfigError, NoContentError, NotChannelError, YouTubeError
from .formatting import group_search_results, print_ids, to_json
from .logging_config import configure_logging, get_logger

__all__ = [
    "YouTubeAPI",
    "get_youtube_service",
    "main",
    "YouTubeCommand",
    "Settings",
    "load_settings",
    "ConfigError",
    "NoContentError",
    "NotChannelError",
    "YouTubeError",
    "group_search_results",
    "print_ids",
    "to_json",
    "configure_logging",
    "get_logger",
]
