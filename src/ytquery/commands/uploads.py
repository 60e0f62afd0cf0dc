"""Uploads playlist command."""

import argparse

from . import YouTubeCommand
from .. import config
from ..api import YouTubeAPI
from ..config import Settings
from ..formatting import print_json
from ..logging_config import get_logger

logger = get_logger(__name__)


class UploadsCommand(YouTubeCommand):
    """Command to find a channel's uploads playlist.

    Prints the playlist ID. With ``list_items`` the first page of the
    playlist is printed as well.
    """

    name = "uploads"
    help = "Show the uploads playlist ID of a channel"

    def __init__(self, youtube: YouTubeAPI, settings: Settings, list_items: bool = False):
        super().__init__(youtube, settings)
        self.list_items = list_items

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--list",
            dest="list_items",
            action="store_true",
            help="Also show the first page of the uploads playlist",
        )

    @classmethod
    def from_args(
        cls, youtube: YouTubeAPI, settings: Settings, args: argparse.Namespace
    ) -> YouTubeCommand:
        return cls(youtube, settings, list_items=getattr(args, "list_items", False))

    def validate(self) -> None:
        super().validate()
        if not self.settings.resource_id:
            raise ValueError("Channel ID is required (use --id)")

    def _run(self) -> str:
        """Print the uploads playlist ID and return it."""
        uploads = self.youtube.get_uploads_playlist_id(self.settings.resource_id)
        logger.debug("Uploads playlist for %s: %s", self.settings.resource_id, uploads)
        print(uploads)

        if self.list_items:
            print_json(self.youtube.playlist_items(uploads, config.PLAYLIST_ITEM_PARTS))

        return uploads
