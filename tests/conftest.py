"""Common test fixtures and utilities."""

import pytest
from unittest.mock import MagicMock

from src.ytquery.api import YouTubeAPI
from src.ytquery.config import Settings


SEARCH_RESPONSE = {
    "kind": "youtube#searchListResponse",
    "items": [
        {
            "id": {"kind": "youtube#video", "videoId": "vid1"},
            "snippet": {"title": "Video 1"},
        },
        {
            "id": {"kind": "youtube#video", "videoId": "vid2"},
            "snippet": {"title": "Video 2"},
        },
        {
            "id": {"kind": "youtube#video", "videoId": "vid3"},
            "snippet": {"title": "Video 3"},
        },
        {
            "id": {"kind": "youtube#channel", "channelId": "chan1"},
            "snippet": {"title": "Channel 1"},
        },
        {
            "id": {"kind": "youtube#playlist", "playlistId": "list1"},
            "snippet": {"title": "Playlist 1"},
        },
    ],
}


@pytest.fixture
def youtube_client() -> MagicMock:
    """Create a mock YouTube API client.

    Returns:
        MagicMock: Mock YouTube API client with common responses configured
    """
    mock = MagicMock()

    mock.search.return_value.list.return_value.execute.return_value = SEARCH_RESPONSE

    mock.videos.return_value.list.return_value.execute.return_value = {
        "items": [
            {
                "kind": "youtube#video",
                "id": "vid1",
                "snippet": {"title": "Video 1", "channelId": "chan1"},
                "player": {"embedHtml": "<iframe></iframe>"},
            }
        ]
    }

    mock.playlistItems.return_value.list.return_value.execute.return_value = {
        "nextPageToken": "token1",
        "items": [
            {"snippet": {"title": "Video 1", "resourceId": {"videoId": "vid1"}}},
            {"snippet": {"title": "Video 2", "resourceId": {"videoId": "vid2"}}},
            {"snippet": {"title": "Video 3", "resourceId": {"videoId": "vid3"}}},
        ],
    }

    mock.playlists.return_value.list.return_value.execute.return_value = {
        "items": [
            {"id": "list1", "snippet": {"title": "Playlist 1"}},
            {"id": "list2", "snippet": {"title": "Playlist 2"}},
        ]
    }

    mock.channels.return_value.list.return_value.execute.return_value = {
        "items": [
            {
                "kind": "youtube#channel",
                "id": "chan1",
                "contentDetails": {"relatedPlaylists": {"uploads": "uploads1"}},
            }
        ]
    }

    return mock


@pytest.fixture
def api(youtube_client) -> YouTubeAPI:
    """Create a YouTubeAPI instance with mock client."""
    return YouTubeAPI(youtube_client)


@pytest.fixture
def settings() -> Settings:
    """Settings with an ID set."""
    return Settings(api_key="test-key", query="Google", resource_id="abc123", max_results=5)


@pytest.fixture
def search_response() -> dict:
    """Search response with 3 videos, 1 channel and 1 playlist."""
    return SEARCH_RESPONSE
