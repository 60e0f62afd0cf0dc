"""Command implementations for YouTube Data API queries.

# Commands
Each command issues a single read-only request through ``YouTubeAPI`` and
prints the result to stdout: search results as grouped ``[id] title``
blocks, everything else as indented JSON.

# Error Handling Pattern
Commands do not catch errors:
1. ``YouTubeAPI`` raises ``NoContentError``/``NotChannelError`` for empty or
   mismatched results and lets ``HttpError`` from the client through
2. ``validate`` raises ``ValueError`` for missing parameters
3. Only ``cli.main`` logs the failure and picks the exit code
"""

from .base import ResourceCommand, YouTubeCommand
from .details import ChannelsCommand, PlaylistItemsCommand, PlaylistsCommand, VideoCommand
from .search import ChannelIdCommand, SearchCommand
from .uploads import UploadsCommand

__all__ = [
    "YouTubeCommand",
    "ResourceCommand",
    "SearchCommand",
    "VideoCommand",
    "PlaylistItemsCommand",
    "PlaylistsCommand",
    "ChannelsCommand",
    "ChannelIdCommand",
    "UploadsCommand",
]
