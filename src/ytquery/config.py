"""Configuration and environment settings."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

# Environment Settings
API_KEY_ENV = "API_KEY"
DEFAULT_ENV_FILE = ".env"

# CLI Defaults
DEFAULT_QUERY = "Google"
DEFAULT_ID = ""
DEFAULT_MAX_RESULTS = 5

# YouTube API Settings
SEARCH_PARTS = ["id", "snippet"]
VIDEO_PARTS = ["snippet", "player", "topicDetails", "recordingDetails"]
PLAYLIST_ITEM_PARTS = ["snippet"]
PLAYLIST_PARTS = ["snippet"]
CHANNEL_PARTS = ["contentDetails"]

PLAYLIST_ITEMS_MAX_RESULTS = 3
PLAYLISTS_MAX_RESULTS = 50

PLAYLIST_ITEMS_FIELDS = "items/snippet/title,items/snippet/resourceId/videoId,nextPageToken"
PLAYLISTS_FIELDS = "items/snippet/title,items/id"
UPLOADS_FIELDS = "items/contentDetails/relatedPlaylists/uploads"


@dataclass(frozen=True)
class Settings:
    """Settings for a single invocation."""

    api_key: str
    query: str = DEFAULT_QUERY
    resource_id: str = DEFAULT_ID
    max_results: int = DEFAULT_MAX_RESULTS


def load_settings(
    env_file: str = DEFAULT_ENV_FILE,
    query: str = DEFAULT_QUERY,
    resource_id: str = DEFAULT_ID,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> Settings:
    """Load the API key from the env file and build settings.

    Args:
        env_file: Path to the key-value file holding API_KEY
        query: Search term
        resource_id: Video, channel or playlist ID (or channel name)
        max_results: Maximum number of search results

    Returns:
        Settings for this invocation

    Raises:
        ConfigError: If the env file or the API key is missing
    """
    if not os.path.isfile(env_file):
        raise ConfigError("Error loading .env file")
    load_dotenv(env_file, override=True)

    api_key: Optional[str] = os.getenv(API_KEY_ENV)
    if not api_key:
        raise ConfigError(f"{API_KEY_ENV} environment variable not set")

    return Settings(api_key=api_key, query=query, resource_id=resource_id, max_results=max_results)
