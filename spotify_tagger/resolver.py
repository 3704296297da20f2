"""Turn a search term into an ordered list of track candidates."""

from datetime import date, datetime
from typing import Callable, Dict, List, Optional

from .config import eprint
from .decisions import DecisionProvider, is_quit
from .errors import CatalogError, NetworkError
from .models import TrackCandidate
from .spotify_client import SpotifyClient

RELEASE_DATE_FORMAT = "%Y-%m-%d"


class CandidateResolver:
    """Searches the catalog and completes each hit with its album data."""

    def __init__(self, client: SpotifyClient):
        """
        Initialize resolver.

        Args:
            client: Authenticated catalog client, shared for the whole run
        """
        self.client = client
        self.searches = 0

    def resolve(self, term: str) -> List[TrackCandidate]:
        """
        Search once and build candidates numbered 1..N.

        A search failure propagates. A failed album lookup only drops the
        tracks on that album.

        Args:
            term: Search term

        Returns:
            Candidates in catalog order
        """
        tracks = self.client.search_tracks(term)
        self.searches += 1

        albums: Dict[str, Optional[dict]] = {}
        candidates = []
        for track in tracks:
            if not isinstance(track, dict):
                eprint(f"Skipping malformed search result: {track!r}")
                continue

            album_id = (track.get("album") or {}).get("id", "")
            if album_id not in albums:
                try:
                    albums[album_id] = self.client.get_album(album_id)
                except (NetworkError, CatalogError) as e:
                    eprint(f"Skipping '{track.get('name', '?')}': {e}")
                    albums[album_id] = None

            album = albums[album_id]
            if album is None:
                continue

            candidates.append(
                self._build_candidate(len(candidates) + 1, track, album)
            )

        return candidates

    def search_until_found(self, term: str, provider: DecisionProvider,
                           on_search: Optional[Callable[[str], None]] = None
                           ) -> Optional[List[TrackCandidate]]:
        """
        Resolve, asking for a revised term while the search comes back empty.

        Args:
            term: Initial search term
            provider: Source of revised terms
            on_search: Called with each term right before it is searched

        Returns:
            Non-empty candidate list, or None if the operator quit
        """
        while True:
            if on_search:
                on_search(term)
            candidates = self.resolve(term)
            if candidates:
                return candidates

            reply = provider.revise_term(term)
            if is_quit(reply):
                return None
            if reply.strip():
                term = reply.strip()

    def _build_candidate(self, index: int, track: dict,
                         album: dict) -> TrackCandidate:
        """Merge a raw track and its album into a TrackCandidate."""
        copyrights = []
        publishing = []
        for entry in album.get("copyrights") or []:
            if entry.get("type") == "C":
                copyrights.append(entry.get("text", ""))
            elif entry.get("type") == "P":
                publishing.append(entry.get("text", ""))

        images = album.get("images") or []
        cover_url = images[0].get("url", "") if images else ""

        return TrackCandidate(
            index=index,
            title=track.get("name", ""),
            album=album.get("name", ""),
            album_type=album.get("album_type", ""),
            artists=[a.get("name", "") for a in track.get("artists") or []],
            copyrights=copyrights,
            publishing=publishing,
            cover_url=cover_url,
            disc_number=track.get("disc_number") or 1,
            track_number=track.get("track_number") or 1,
            duration_ms=track.get("duration_ms") or 0,
            release_date=self._parse_release_date(album.get("release_date")),
            genres=list(album.get("genres") or []),
            url=(track.get("external_urls") or {}).get("spotify", ""),
        )

    def _parse_release_date(self, value: Optional[str]) -> Optional[date]:
        """Parse a YYYY-MM-DD release date; anything else is unknown."""
        if not value:
            return None
        try:
            return datetime.strptime(value, RELEASE_DATE_FORMAT).date()
        except ValueError:
            return None
