"""Command-line interface for YouTube Data API queries."""

import argparse
import sys
from typing import Dict, List, Optional, Type

from googleapiclient.errors import HttpError

from . import auth, config, commands
from .api import YouTubeAPI
from .errors import YouTubeError, log_error
from .logging_config import configure_logging

COMMANDS: Dict[str, Type[commands.YouTubeCommand]] = {
    command.name: command
    for command in (
        commands.SearchCommand,
        commands.VideoCommand,
        commands.PlaylistItemsCommand,
        commands.PlaylistsCommand,
        commands.ChannelsCommand,
        commands.ChannelIdCommand,
        commands.UploadsCommand,
    )
}


def positive_int(value: str) -> int:
    """Parse a positive integer argument."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(description="Query the YouTube Data API")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--env-file",
        default=config.DEFAULT_ENV_FILE,
        help=f"File holding {config.API_KEY_ENV} (default: {config.DEFAULT_ENV_FILE})",
    )
    parser.add_argument("--query", default=config.DEFAULT_QUERY, help="Search term")
    parser.add_argument(
        "--id",
        "--video",
        dest="resource_id",
        default=config.DEFAULT_ID,
        help="Video/channel/playlist id (channel name for channel-id)",
    )
    parser.add_argument(
        "--max-results",
        type=positive_int,
        default=config.DEFAULT_MAX_RESULTS,
        help="Max YouTube results",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")
    for name, command in COMMANDS.items():
        command_parser = subparsers.add_parser(name, help=command.help)
        command.add_arguments(command_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments, defaults to sys.argv[1:]

    Returns:
        int: Exit code
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    if not argv:
        parser.print_help()
        return 1

    try:
        args = parser.parse_args(args=argv)
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    configure_logging(debug=args.debug)

    command_class = COMMANDS.get(args.command)
    if command_class is None:
        parser.print_help()
        return 1

    try:
        settings = config.load_settings(
            env_file=args.env_file,
            query=args.query,
            resource_id=args.resource_id,
            max_results=args.max_results,
        )
        youtube = YouTubeAPI(auth.get_youtube_service(settings.api_key))
        command = command_class.from_args(youtube, settings, args)
        command.run()
        return 0
    except ValueError as e:
        log_error(e, f"Invalid arguments for {args.command}")
        return 1
    except YouTubeError as e:
        log_error(e, f"{args.command} failed")
        return 1
    except HttpError as e:
        log_error(e, "Error making API call")
        return 1
    except Exception as e:
        log_error(e, "Command failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
