"""Utility functions for Spotify Tagger."""

import re
from pathlib import Path
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import TrackCandidate


def parse_genres(value: str) -> List[str]:
    """Split a comma-separated genre string, dropping blank entries.

    Args:
        value: Raw input such as 'rock, glam rock'

    Returns:
        List of trimmed genre names (empty for blank input)
    """
    if not value or not value.strip():
        return []
    return [g.strip() for g in value.split(",") if g.strip()]


def term_from_filename(file_path: str) -> str:
    """Search term derived from a file name: the name without its extension."""
    return Path(file_path).stem


def sanitize_filename(s: str) -> str:
    """Sanitize a string for use in filenames."""
    s = re.sub(r'[<>:"/\\|?*]', '_', s)
    s = s.strip('. ')
    s = re.sub(r'\s+', ' ', s)
    s = re.sub(r'_+', '_', s)
    return s


def generate_filename(candidate: "TrackCandidate", extension: str) -> str:
    """Generate the rename target for a tagged file.

    Args:
        candidate: Resolved track
        extension: File extension including dot (e.g., '.mp3')

    Returns:
        Filename in 'Artist, Artist - Title.ext' form
    """
    artist = sanitize_filename(candidate.artist_display)
    title = sanitize_filename(candidate.title)
    return f"{artist} - {title}{extension}"
