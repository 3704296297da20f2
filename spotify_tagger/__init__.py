"""
Spotify Tagger - ID3 tagging of MP3 files from the Spotify catalog.

This package provides tools to:
- Search the Spotify catalog for a track matching a file name
- Pick the right match interactively or automatically
- Write complete ID3v2.4 tags, including cover art, to MP3 files
- Rename tagged files to 'Artist - Title.mp3'
"""

__version__ = "1.0.0"
