"""ID3 tag writer using mutagen."""

from pathlib import Path
from typing import Optional

import requests
from mutagen import MutagenError
from mutagen.id3 import (
    ID3, ID3NoHeaderError, APIC, COMM, PictureType, TALB, TCON, TCOP, TDRC,
    TIT2, TLEN, TPE1, TPOS, TPUB, TRCK, WCOM,
)

from .errors import NetworkError, TagParseError, TagWriteError
from .models import TrackCandidate

UTF8 = 3


class TagWriter:
    """Writes a resolved track into an MP3 file's ID3v2.4 tag."""

    SUPPORTED_EXTENSIONS = {".mp3"}
    COVER_MIME = "image/jpeg"
    COMMENT_DESC = "Spotify URL"
    COMMENT_KEY = f"COMM:{COMMENT_DESC}:eng"

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: float = 15):
        """
        Initialize tag writer.

        Args:
            session: HTTP session used for cover art downloads
            timeout: Seconds to wait for a cover download
        """
        self.session = session or requests.Session()
        self.timeout = timeout

    @classmethod
    def is_supported(cls, file_path: str) -> bool:
        """Check if file format is supported."""
        return Path(file_path).suffix.lower() in cls.SUPPORTED_EXTENSIONS

    def write(self, candidate: TrackCandidate, file_path: str,
              reset: bool = False) -> None:
        """
        Write all track fields to the file's tag.

        Nothing is saved unless every step succeeds, so a failed cover
        download leaves the file as it was.

        Args:
            candidate: Resolved track
            file_path: Path to MP3 file
            reset: If True, drop every existing frame first

        Raises:
            TagParseError: The existing tag cannot be read
            NetworkError: The cover art download failed
            TagWriteError: The tag cannot be saved
        """
        tags = self._open(file_path)

        if reset:
            tags.clear()
            tags.unknown_frames = []

        if candidate.cover_url:
            cover = self._fetch_cover(candidate.cover_url)
            tags.setall("APIC", [APIC(
                encoding=UTF8,
                mime=self.COVER_MIME,
                type=PictureType.COVER_FRONT,
                desc="Front cover",
                data=cover,
            )])

        tags.update_to_v24()

        self._set_text(tags, TIT2, candidate.title)
        self._set_text(tags, TALB, candidate.album)
        self._set_text(tags, TPE1, candidate.artist_display)
        self._set_text(tags, TCON, ", ".join(candidate.genres))
        self._set_text(tags, TDRC, candidate.release_date_text)
        self._set_text(tags, TRCK, str(candidate.track_number))
        self._set_text(tags, TPOS, str(candidate.disc_number))
        self._set_text(tags, TLEN, str(candidate.duration_ms))
        self._set_text(tags, TPUB, ", ".join(candidate.publishing))
        self._set_text(tags, TCOP, ", ".join(candidate.copyrights))

        # Replaced as a pair; without a URL neither frame is kept.
        tags.delall(self.COMMENT_KEY)
        tags.delall("WCOM")
        if candidate.url:
            tags.add(COMM(
                encoding=UTF8,
                lang="eng",
                desc=self.COMMENT_DESC,
                text=f"{self.COMMENT_DESC}: {candidate.url}",
            ))
            tags.add(WCOM(url=candidate.url))

        try:
            tags.save(file_path, v2_version=4)
        except (MutagenError, OSError) as e:
            raise TagWriteError(f"Cannot save tags to {file_path}: {e}") from e

    @staticmethod
    def _set_text(tags: ID3, frame_cls, text: str) -> None:
        """Replace a text frame, or drop it when there is nothing to write."""
        frame_id = frame_cls.__name__
        if text:
            tags.setall(frame_id, [frame_cls(encoding=UTF8, text=text)])
        else:
            tags.delall(frame_id)

    def _open(self, file_path: str) -> ID3:
        """Load the existing tag; a file without one starts empty."""
        try:
            return ID3(file_path)
        except ID3NoHeaderError:
            return ID3()
        except (MutagenError, OSError) as e:
            raise TagParseError(f"Cannot read tags of {file_path}: {e}") from e

    def _fetch_cover(self, url: str) -> bytes:
        """Download cover art bytes."""
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Cover art download failed: {e}") from e
        return resp.content
