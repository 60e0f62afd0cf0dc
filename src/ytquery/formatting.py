"""Output formatting for search results and API responses."""

import json
import sys
from typing import Any, Dict, Iterable, Optional, TextIO, Tuple

VIDEO_KIND = "youtube#video"
CHANNEL_KIND = "youtube#channel"
PLAYLIST_KIND = "youtube#playlist"

JSON_INDENT = 3

# Map each result kind to the ID field it carries
_KIND_ID_FIELDS = {
    VIDEO_KIND: "videoId",
    CHANNEL_KIND: "channelId",
    PLAYLIST_KIND: "playlistId",
}


def group_search_results(
    items: Iterable[Dict[str, Any]],
) -> Tuple[Dict[str, str], Dict[str, str], Dict[str, str]]:
    """Group search result items by kind.

    Items of an unknown kind are dropped. A repeated ID keeps the last title.
    A missing ID or title is taken as an empty string.

    Args:
        items: Items from a search.list response

    Returns:
        Tuple of (videos, channels, playlists) mapping ID to title
    """
    groups: Dict[str, Dict[str, str]] = {kind: {} for kind in _KIND_ID_FIELDS}

    for item in items:
        result_id = item.get("id") or {}
        kind = result_id.get("kind")
        if kind not in groups:
            continue
        title = (item.get("snippet") or {}).get("title", "")
        groups[kind][result_id.get(_KIND_ID_FIELDS[kind], "")] = title

    return groups[VIDEO_KIND], groups[CHANNEL_KIND], groups[PLAYLIST_KIND]


def print_ids(section_name: str, matches: Dict[str, str], out: Optional[TextIO] = None) -> None:
    """Print a section header, one "[id] title" line per match, then a blank line.

    Args:
        section_name: Name identifying the list, e.g. "Videos"
        matches: Mapping of ID to title
        out: Stream to write to, defaults to stdout
    """
    out = out or sys.stdout
    out.write(f"{section_name}:\n")
    for result_id, title in matches.items():
        out.write(f"[{result_id}] {title}\n")
    out.write("\n")


def to_json(data: Any) -> str:
    """Serialize an API response or resource to indented JSON."""
    return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)


def print_json(data: Any, out: Optional[TextIO] = None) -> None:
    """Print an API response or resource as indented JSON."""
    out = out or sys.stdout
    out.write(to_json(data) + "\n")
