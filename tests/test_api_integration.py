"""Integration tests against the live YouTube Data API.

Run with ``pytest --run-api``; needs API_KEY in the environment or a .env file.
"""

import os

import pytest

from src.ytquery.api import YouTubeAPI
from src.ytquery.auth import get_youtube_service
from src.ytquery.config import API_KEY_ENV, DEFAULT_ENV_FILE, load_settings
from src.ytquery.formatting import group_search_results


@pytest.fixture(scope="module")
def live_api():
    """Create a YouTubeAPI backed by the real service."""
    api_key = os.getenv(API_KEY_ENV) or load_settings(DEFAULT_ENV_FILE).api_key
    return YouTubeAPI(get_youtube_service(api_key))


@pytest.mark.api
def test_search_live(live_api):
    """Test a live search returns groupable items."""
    response = live_api.search("Google", 5)

    videos, channels, playlists = group_search_results(response["items"])
    assert len(videos) + len(channels) + len(playlists) <= 5


@pytest.mark.api
def test_channel_id_and_uploads_live(live_api):
    """Test resolving a channel and its uploads playlist."""
    response = live_api.find_channel("Google")
    channel_id = response["items"][0]["id"]["channelId"]

    uploads = live_api.get_uploads_playlist_id(channel_id)

    assert uploads.startswith("UU")
