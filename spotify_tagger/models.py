"""Data models for Spotify Tagger."""

from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Tuple


class FileState(Enum):
    """Processing state of a single file in a run."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class TrackCandidate:
    """One track returned by a catalog search, completed with album data."""
    index: int
    title: str
    album: str
    album_type: str = ""
    artists: List[str] = field(default_factory=list)
    copyrights: List[str] = field(default_factory=list)
    publishing: List[str] = field(default_factory=list)
    cover_url: str = ""
    disc_number: int = 1
    track_number: int = 1
    duration_ms: int = 0
    release_date: Optional[date] = None
    genres: List[str] = field(default_factory=list)
    url: str = ""

    @property
    def artist_display(self) -> str:
        """Artist names joined for display and tagging."""
        return ", ".join(self.artists)

    @property
    def release_date_text(self) -> str:
        """Release date as YYYY-MM-DD, or empty when unknown."""
        return self.release_date.isoformat() if self.release_date else ""

    @property
    def duration_display(self) -> str:
        """Duration as m:ss."""
        minutes, seconds = divmod(self.duration_ms // 1000, 60)
        return f"{minutes}:{seconds:02d}"

    def describe(self) -> str:
        """Full multi-line record shown when choosing between candidates."""
        return "\n".join([
            f"[{self.index}]",
            f"Name: {self.title}",
            f"Album: {self.album} ({self.album_type})",
            f"Artists: {self.artist_display}",
            f"Release Date: {self.release_date_text or 'unknown'}",
            f"Genres: {', '.join(self.genres)}",
            f"Copyright: {', '.join(self.copyrights)}",
            f"Publishing: {', '.join(self.publishing)}",
            f"Cover URL: {self.cover_url}",
            f"Track Number: {self.track_number}",
            f"Disc Number: {self.disc_number}",
            f"Duration: {self.duration_display}",
            f"URL: {self.url}",
        ])


@dataclass(frozen=True)
class ResolutionOptions:
    """Per-run settings, read-only once built from the command line."""
    term: str = ""
    genres: Tuple[str, ...] = ()
    reset: bool = False
    rename: bool = False

    def for_directory(self) -> "ResolutionOptions":
        """Copy with the search override cleared (terms come from file names)."""
        return replace(self, term="")


@dataclass
class ProcessingStats:
    """Statistics for a processing run."""
    total_files: int = 0
    tags_updated: int = 0
    files_skipped: int = 0
    files_failed: int = 0
    files_renamed: int = 0
    catalog_searches: int = 0
    errors: List[str] = field(default_factory=list)
    states: Dict[str, FileState] = field(default_factory=dict)
