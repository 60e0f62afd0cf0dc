"""Search commands."""

from . import YouTubeCommand
from ..formatting import group_search_results, print_ids, print_json
from ..logging_config import get_logger

logger = get_logger(__name__)


class SearchCommand(YouTubeCommand):
    """Command to search videos, channels and playlists by keyword."""

    name = "search"
    help = "Search videos, channels and playlists"

    def validate(self) -> None:
        super().validate()
        if self.settings.max_results < 1:
            raise ValueError("max results must be a positive integer")

    def _run(self) -> None:
        """Print matching videos, channels and playlists in labeled blocks."""
        response = self.youtube.search(self.settings.query, self.settings.max_results)

        videos, channels, playlists = group_search_results(response.get("items", []))
        logger.debug(
            "Found %d videos, %d channels, %d playlists", len(videos), len(channels), len(playlists)
        )

        print_ids("Videos", videos)
        print_ids("Channels", channels)
        print_ids("Playlists", playlists)


class ChannelIdCommand(YouTubeCommand):
    """Command to resolve a channel name to its channel ID."""

    name = "channel-id"
    help = "Look up a channel ID by channel name (name taken from --id)"

    def validate(self) -> None:
        super().validate()
        if not self.settings.resource_id:
            raise ValueError("Channel name is required (use --id)")

    def _run(self) -> str:
        """Print the raw search response and the channel ID, and return the ID."""
        response = self.youtube.find_channel(self.settings.resource_id)
        print_json(response)
        channel_id = response["items"][0]["id"]["channelId"]
        print(channel_id)
        return channel_id
