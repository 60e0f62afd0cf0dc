"""YouTube API service construction."""

from googleapiclient.discovery import build

from .errors import ConfigError, YouTubeError
from .logging_config import get_logger

logger = get_logger(__name__)


def get_youtube_service(api_key: str):
    """Get a YouTube Data API service authenticated with an API key.

    Args:
        api_key: YouTube Data API key

    Returns:
        YouTube API client resource

    Raises:
        ConfigError: If no API key is given
        YouTubeError: If the client cannot be built
    """
    if not api_key:
        raise ConfigError("API key is required")

    try:
        # Build the YouTube service
        youtube = build("youtube", "v3", developerKey=api_key, cache_discovery=False)
        logger.debug("Built YouTube service")
        return youtube
    except Exception as e:
        raise YouTubeError(f"Error creating new YouTube client: {str(e)}") from e
