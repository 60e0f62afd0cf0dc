"""Tests for YouTube service construction."""

import pytest
from unittest.mock import MagicMock, patch

from src.ytquery.auth import get_youtube_service
from src.ytquery.errors import ConfigError, YouTubeError


@patch("src.ytquery.auth.build")
def test_get_youtube_service(mock_build):
    """Test the service is built with the API key."""
    service = MagicMock()
    mock_build.return_value = service

    assert get_youtube_service("secret") is service
    mock_build.assert_called_once_with(
        "youtube", "v3", developerKey="secret", cache_discovery=False
    )


@patch("src.ytquery.auth.build")
def test_get_youtube_service_no_key(mock_build):
    """Test an empty API key is rejected before building."""
    with pytest.raises(ConfigError, match="API key is required"):
        get_youtube_service("")
    mock_build.assert_not_called()


@patch("src.ytquery.auth.build")
def test_get_youtube_service_build_error(mock_build):
    """Test build failures are reported as YouTubeError."""
    mock_build.side_effect = Exception("discovery failed")

    with pytest.raises(YouTubeError, match="Error creating new YouTube client: discovery failed"):
        get_youtube_service("secret")
