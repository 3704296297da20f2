"""Shared test fixtures for spotify_tagger tests."""

import sys
from datetime import date
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from spotify_tagger.errors import NetworkError
from spotify_tagger.interactive import InteractivePrompts
from spotify_tagger.models import ResolutionOptions, TrackCandidate


def make_track(name, album_id, artists=("Queen",), track_number=11,
               disc_number=1, duration_ms=354320, url=None):
    """Raw Spotify track object as returned by /v1/search."""
    return {
        "name": name,
        "album": {"id": album_id},
        "artists": [{"name": a} for a in artists],
        "track_number": track_number,
        "disc_number": disc_number,
        "duration_ms": duration_ms,
        "external_urls": {
            "spotify": url or f"https://open.spotify.com/track/{album_id}-{track_number}"
        },
    }


def make_album(album_id, name, release_date="1975-10-31", genres=(),
               cover_url=None, album_type="album"):
    """Raw Spotify album object as returned by /v1/albums/{id}."""
    return {
        "id": album_id,
        "name": name,
        "album_type": album_type,
        "release_date": release_date,
        "genres": list(genres),
        "copyrights": [
            {"text": "(C) 1975 Queen Productions Ltd", "type": "C"},
            {"text": "(P) 1975 EMI Records Ltd", "type": "P"},
        ],
        "images": [{"url": cover_url}] if cover_url else [],
    }


class FakeCatalog:
    """Stands in for SpotifyClient with canned search results."""

    def __init__(self, results=None, albums=None, failing_albums=()):
        self.results = results or {}
        self.albums = albums or {}
        self.failing_albums = set(failing_albums)
        self.terms = []
        self.album_requests = []

    def search_tracks(self, term, limit=20):
        self.terms.append(term)
        return list(self.results.get(term, []))

    def get_album(self, album_id):
        self.album_requests.append(album_id)
        if album_id in self.failing_albums:
            raise NetworkError(f"album {album_id} unavailable")
        return self.albums[album_id]


@pytest.fixture
def bohemian_candidate():
    """Resolved candidate for Bohemian Rhapsody, without genres."""
    return TrackCandidate(
        index=1,
        title="Bohemian Rhapsody",
        album="A Night at the Opera",
        album_type="album",
        artists=["Queen"],
        copyrights=["(C) 1975 Queen Productions Ltd"],
        publishing=["(P) 1975 EMI Records Ltd"],
        cover_url="https://i.scdn.co/image/opera",
        disc_number=1,
        track_number=11,
        duration_ms=354320,
        release_date=date(1975, 10, 31),
        genres=[],
        url="https://open.spotify.com/track/7tFiyTwD0nx5a1eklYtX2J",
    )


@pytest.fixture
def options():
    """Default run options."""
    return ResolutionOptions()


@pytest.fixture
def cover_session():
    """HTTP session mock that serves a tiny JPEG for any URL."""
    session = Mock()
    session.get.return_value.content = b"\xff\xd8\xff\xe0fake-jpeg"
    return session


@pytest.fixture
def mp3_file(tmp_path):
    """A file with an .mp3 name and no ID3 tag."""
    path = tmp_path / "Bohemian Rhapsody.mp3"
    path.write_bytes(b"\x00" * 256)
    return path


@pytest.fixture
def quiet_prompts():
    """InteractivePrompts that print nothing optional."""
    return InteractivePrompts(no_color=True, quiet=True)
