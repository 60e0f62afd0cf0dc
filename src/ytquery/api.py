"""YouTube Data API wrapper."""

from typing import Any, Dict, List, Optional

from . import config
from .errors import NoContentError, NotChannelError
from .formatting import CHANNEL_KIND
from .logging_config import get_logger

logger = get_logger(__name__)


def require_items(
    response: Dict[str, Any], message: str = "no content found"
) -> List[Dict[str, Any]]:
    """Return the items of a response, failing if there are none.

    Args:
        response: Raw API response
        message: Error message for an empty response

    Returns:
        The response items

    Raises:
        NoContentError: If the response has no items
    """
    items = response.get("items") or []
    if not items:
        logger.warning("Empty response: %s", response)
        raise NoContentError(message)
    return items


class YouTubeAPI:
    """Wrapper for read-only YouTube Data API calls.

    Each method issues exactly one request. Errors raised by the client
    (googleapiclient.errors.HttpError) propagate unchanged.
    """

    def __init__(self, youtube):
        """Initialize API wrapper.

        Args:
            youtube: YouTube API client
        """
        self.youtube = youtube

    def search(
        self,
        query: str,
        max_results: int,
        parts: Optional[List[str]] = None,
        result_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Search for videos, channels and playlists.

        Args:
            query: Search term
            max_results: Maximum number of results
            parts: Parts to request, defaults to id and snippet
            result_type: Restrict results to "video", "channel" or "playlist"

        Returns:
            Raw search.list response
        """
        params = {
            "part": ",".join(parts or config.SEARCH_PARTS),
            "q": query,
            "maxResults": max_results,
        }
        if result_type:
            params["type"] = result_type

        # pylint: disable=no-member
        request = self.youtube.search().list(**params)
        # pylint: enable=no-member
        return request.execute()

    def video_details(self, video_id: str, parts: List[str]) -> Dict[str, Any]:
        """Get a single video.

        Args:
            video_id: ID of the video
            parts: Parts to request

        Returns:
            The video resource

        Raises:
            NoContentError: If the video is not found
        """
        logger.info("get video %s, parts %s", video_id, parts)
        request = self.youtube.videos().list(part=",".join(parts), id=video_id)
        response = request.execute()
        return require_items(response)[0]

    def playlist_items(
        self, playlist_id: str, parts: List[str], page_token: Optional[str] = None
    ) -> Dict[str, Any]:
        """Get one page of playlist items, restricted to titles and video IDs.

        Args:
            playlist_id: ID of the playlist
            parts: Parts to request
            page_token: Token of the page to fetch, if not the first

        Returns:
            Raw playlistItems.list response

        Raises:
            NoContentError: If the page has no items
        """
        logger.info("get playlist items %s, parts %s", playlist_id, parts)
        params = {
            "part": ",".join(parts),
            "playlistId": playlist_id,
            "maxResults": config.PLAYLIST_ITEMS_MAX_RESULTS,
            "fields": config.PLAYLIST_ITEMS_FIELDS,
        }
        if page_token:
            params["pageToken"] = page_token

        response = self.youtube.playlistItems().list(**params).execute()
        require_items(response)
        return response

    def playlists(self, channel_id: str, parts: List[str]) -> Dict[str, Any]:
        """Get the playlists of a channel, restricted to titles and IDs.

        Args:
            channel_id: ID of the channel
            parts: Parts to request

        Returns:
            Raw playlists.list response

        Raises:
            NoContentError: If the channel has no playlists
        """
        logger.info("get playlists %s, parts %s", channel_id, parts)
        response = (
            self.youtube.playlists()
            .list(
                part=",".join(parts),
                channelId=channel_id,
                maxResults=config.PLAYLISTS_MAX_RESULTS,
                fields=config.PLAYLISTS_FIELDS,
            )
            .execute()
        )
        require_items(response)
        return response

    def channels(self, channel_id: str, parts: List[str]) -> Dict[str, Any]:
        """Get a channel.

        Args:
            channel_id: ID of the channel
            parts: Parts to request

        Returns:
            Raw channels.list response

        Raises:
            NoContentError: If the channel is not found
        """
        logger.info("get channels %s, parts %s", channel_id, parts)
        response = self.youtube.channels().list(part=",".join(parts), id=channel_id).execute()
        require_items(response)
        return response

    def find_channel(self, channel_name: str) -> Dict[str, Any]:
        """Search for the channel best matching a name.

        Args:
            channel_name: Free-text channel name

        Returns:
            Raw search.list response whose first item is a channel

        Raises:
            NoContentError: If the search returns nothing
            NotChannelError: If the top result is not a channel
        """
        logger.info("get channels %s", channel_name)
        response = self.search(channel_name, 1, parts=["id"], result_type="channel")

        item = require_items(response, "no result found")[0]
        kind = item.get("id", {}).get("kind")
        if kind != CHANNEL_KIND:
            raise NotChannelError(kind)

        return response

    def get_uploads_playlist_id(self, channel_id: str) -> str:
        """Get the ID of the playlist holding a channel's uploads.

        Args:
            channel_id: ID of the channel

        Returns:
            Uploads playlist ID

        Raises:
            NoContentError: If the channel is not found
        """
        response = (
            self.youtube.channels()
            .list(
                part="contentDetails",
                id=channel_id,
                maxResults=1,
                fields=config.UPLOADS_FIELDS,
            )
            .execute()
        )
        item = require_items(response)[0]
        return item["contentDetails"]["relatedPlaylists"]["uploads"]
