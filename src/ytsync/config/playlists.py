"""
Reading the playlist file.

The playlist file lists the playlists to synchronize, one id per line.
Blank lines and lines starting with ``#`` are ignored, as is anything after
a ``#`` on a line.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_playlist_ids(text: str) -> list[str]:
    """Parse playlist ids from file contents, keeping order and dropping duplicates."""
    ids: list[str] = []
    seen: set[str] = set()
    for line in text.splitlines():
        playlist_id = line.split("#", 1)[0].strip()
        if not playlist_id or playlist_id in seen:
            continue
        seen.add(playlist_id)
        ids.append(playlist_id)
    return ids


def load_playlist_ids(path: Path) -> list[str]:
    """
    Load playlist ids from ``path``.

    Returns
    -------
    list[str]
        The ids in file order; empty when the file does not exist.
    """
    if not path.exists():
        logger.info("Playlist file %s not found", path)
        return []
    ids = parse_playlist_ids(path.read_text(encoding="utf-8"))
    logger.debug("Loaded %d playlist id(s) from %s", len(ids), path)
    return ids
