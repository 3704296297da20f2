"""Spotify Web API client for track search and album lookups."""

from typing import List

import requests
import spotipy
from spotipy.cache_handler import MemoryCacheHandler
from spotipy.oauth2 import SpotifyClientCredentials, SpotifyOauthError

from .errors import CatalogError, NetworkError


class SpotifyClient:
    """Client for the Spotify Web API using the client-credentials grant."""

    def __init__(self, client_id: str, client_secret: str,
                 timeout: float = 15):
        """
        Initialize Spotify client.

        Args:
            client_id: Spotify application client ID
            client_secret: Spotify application client secret
            timeout: Seconds to wait for each HTTP request
        """
        self.timeout = timeout
        self.auth = SpotifyClientCredentials(
            client_id=client_id,
            client_secret=client_secret,
            cache_handler=MemoryCacheHandler(),
            requests_timeout=timeout,
        )
        self.sp = spotipy.Spotify(
            auth_manager=self.auth,
            requests_timeout=timeout,
            retries=0,
        )

    def authenticate(self) -> None:
        """
        Fetch an access token with the client-credentials grant.

        spotipy keeps the token and renews it when it expires; this call
        only makes bad credentials fail before the first search.

        Raises:
            NetworkError: If the token endpoint is unreachable or refuses
                the credentials
        """
        try:
            token = self.auth.get_access_token(as_dict=False)
        except (SpotifyOauthError, requests.exceptions.RequestException) as e:
            raise NetworkError(f"Spotify token request failed: {e}") from e
        if not token:
            raise NetworkError("Spotify token response has no access_token")

    def _call(self, what: str, method, *args, **kwargs) -> dict:
        """Run a spotipy call and map its failures."""
        try:
            data = method(*args, **kwargs)
        except (spotipy.SpotifyException, SpotifyOauthError,
                requests.exceptions.RequestException) as e:
            raise NetworkError(f"Spotify request {what} failed: {e}") from e
        except ValueError as e:
            raise CatalogError(f"Spotify response for {what} is not JSON") from e
        if not isinstance(data, dict):
            raise CatalogError(f"Unexpected Spotify response for {what}")
        return data

    def search_tracks(self, term: str, limit: int = 20) -> List[dict]:
        """
        Search the catalog for tracks.

        Args:
            term: Free-text search term
            limit: Maximum number of tracks to return

        Returns:
            Raw track objects in catalog order
        """
        data = self._call("search", self.sp.search,
                          q=term, type="track", limit=limit)
        tracks = data.get("tracks")
        if not isinstance(tracks, dict):
            raise CatalogError("Spotify search response has no tracks")
        return tracks.get("items") or []

    def get_album(self, album_id: str) -> dict:
        """
        Get full album details (release date, genres, copyrights, images).

        Args:
            album_id: Spotify album ID

        Returns:
            Raw album object
        """
        if not album_id:
            raise CatalogError("Track has no album ID")
        return self._call(f"album {album_id}", self.sp.album, album_id)
