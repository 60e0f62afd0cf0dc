"""Detail lookup commands printing API responses as JSON."""

import argparse
from typing import List, Optional

from . import ResourceCommand, YouTubeCommand
from .. import config
from ..api import YouTubeAPI
from ..config import Settings
from ..formatting import print_json


class VideoCommand(ResourceCommand):
    """Command to show the details of one video."""

    name = "video"
    help = "Show video details"
    default_parts = config.VIDEO_PARTS
    id_label = "Video ID"

    def _run(self) -> None:
        print_json(self.youtube.video_details(self.settings.resource_id, self.parts))


class PlaylistItemsCommand(ResourceCommand):
    """Command to show one page of a playlist's items.

    Only titles and video IDs are returned. The response keeps
    nextPageToken; pass it back with --page-token for the next page.
    """

    name = "playlist-items"
    help = "Show a page of playlist items"
    default_parts = config.PLAYLIST_ITEM_PARTS
    id_label = "Playlist ID"

    def __init__(
        self,
        youtube: YouTubeAPI,
        settings: Settings,
        parts: Optional[List[str]] = None,
        page_token: Optional[str] = None,
    ):
        super().__init__(youtube, settings, parts)
        self.page_token = page_token

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        super().add_arguments(parser)
        parser.add_argument("--page-token", help="Page token returned by a previous call")

    @classmethod
    def from_args(
        cls, youtube: YouTubeAPI, settings: Settings, args: argparse.Namespace
    ) -> YouTubeCommand:
        return cls(
            youtube,
            settings,
            parts=getattr(args, "parts", None),
            page_token=getattr(args, "page_token", None),
        )

    def _run(self) -> None:
        print_json(
            self.youtube.playlist_items(self.settings.resource_id, self.parts, self.page_token)
        )


class PlaylistsCommand(ResourceCommand):
    """Command to list the playlists of a channel."""

    name = "playlists"
    help = "Show the playlists of a channel"
    default_parts = config.PLAYLIST_PARTS
    id_label = "Channel ID"

    def _run(self) -> None:
        print_json(self.youtube.playlists(self.settings.resource_id, self.parts))


class ChannelsCommand(ResourceCommand):
    """Command to show a channel."""

    name = "channels"
    help = "Show channel details"
    default_parts = config.CHANNEL_PARTS
    id_label = "Channel ID"

    def _run(self) -> None:
        print_json(self.youtube.channels(self.settings.resource_id, self.parts))
