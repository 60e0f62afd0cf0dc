"""Base command class for YouTube queries."""

import argparse
from typing import Any, List, Optional

from ..api import YouTubeAPI
from ..config import Settings
from ..logging_config import get_logger

# Get logger for this module
logger = get_logger(__name__)


def parse_parts(value: str) -> List[str]:
    """Split a comma-separated list of parts.

    Args:
        value: Parts as given on the command line, e.g. "snippet,player"

    Returns:
        List of part names

    Raises:
        argparse.ArgumentTypeError: If no part names are given
    """
    parts = [part.strip() for part in value.split(",") if part.strip()]
    if not parts:
        raise argparse.ArgumentTypeError("at least one part is required")
    return parts


class YouTubeCommand:
    """Base class for YouTube commands.

    Subclasses set ``name`` and ``help``, may add their own options in
    ``add_arguments`` and implement ``_run``.
    """

    name = ""
    help = ""

    def __init__(self, youtube: YouTubeAPI, settings: Settings):
        """Initialize command.

        Args:
            youtube: YouTube API wrapper
            settings: Settings for this invocation
        """
        self.youtube = youtube
        self.settings = settings
        self._logger = logger
        self._validated = False

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Add command specific options to a subparser."""

    @classmethod
    def from_args(
        cls, youtube: YouTubeAPI, settings: Settings, args: argparse.Namespace
    ) -> "YouTubeCommand":
        """Create the command from parsed command-line arguments."""
        return cls(youtube, settings)

    def validate(self) -> None:
        """Validate command parameters.

        Raises:
            ValueError: If parameters are invalid
        """
        if not self.youtube:
            raise ValueError("YouTube API client is required")
        self._validated = True

    def run(self) -> Optional[Any]:
        """Run the command.

        Returns:
            The command's result value, if it has one

        Raises:
            YouTubeError: If the query fails or returns nothing
            googleapiclient.errors.HttpError: If the API request fails
        """
        self.validate()
        return self._run()

    def _run(self) -> Optional[Any]:
        """Internal run implementation."""
        raise NotImplementedError


class ResourceCommand(YouTubeCommand):
    """Command that looks up a resource by ID with a set of parts."""

    default_parts: List[str] = []
    id_label = "ID"

    def __init__(
        self, youtube: YouTubeAPI, settings: Settings, parts: Optional[List[str]] = None
    ):
        super().__init__(youtube, settings)
        self.parts = parts or list(self.default_parts)

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--parts",
            type=parse_parts,
            help=f"Comma-separated parts to request (default: {','.join(cls.default_parts)})",
        )

    @classmethod
    def from_args(
        cls, youtube: YouTubeAPI, settings: Settings, args: argparse.Namespace
    ) -> "YouTubeCommand":
        return cls(youtube, settings, parts=getattr(args, "parts", None))

    def validate(self) -> None:
        """Validate command parameters.

        Raises:
            ValueError: If no ID was given
        """
        super().validate()
        if not self.settings.resource_id:
            raise ValueError(f"{self.id_label} is required (use --id)")
