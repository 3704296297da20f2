"""Exceptions raised by the tagging pipeline."""


class TaggerError(Exception):
    """Base class for errors that fail a single file."""


class InputError(TaggerError):
    """Path does not exist or is not an MP3 file."""


class NetworkError(TaggerError):
    """A remote call (token, search, album, cover art) failed."""


class CatalogError(TaggerError):
    """The catalog answered with something we cannot read."""


class TagParseError(TaggerError):
    """The file's existing ID3 tag could not be parsed."""


class TagWriteError(TaggerError):
    """The ID3 tag could not be saved back to the file."""


class RenameError(TaggerError):
    """Renaming after a successful tag write failed."""
