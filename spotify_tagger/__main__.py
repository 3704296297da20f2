"""Allow running as `python -m spotify_tagger`."""

from .main import main

main()
