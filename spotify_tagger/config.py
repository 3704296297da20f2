"""Configuration management for Spotify Tagger."""

import os
import sys
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv


def eprint(*args, **kwargs):
    """Print to stderr."""
    print(*args, file=sys.stderr, **kwargs)


def load_config(env_file: Optional[str] = None) -> dict:
    """
    Load configuration from .env file.

    Args:
        env_file: Path to .env file. Defaults to .env in current directory.

    Returns:
        Dictionary of configuration values.
    """
    if env_file is None:
        env_file = ".env"

    env_path = Path(env_file)
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
        eprint(f"Loaded environment from {env_path.resolve()}")
    else:
        eprint(
            f"Warning: .env file not found at {env_path.resolve()} "
            "- falling back to process env."
        )

    return {
        "spotify_client_id": os.getenv("SPOTIFY_CLIENT_ID"),
        "spotify_client_secret": os.getenv("SPOTIFY_CLIENT_SECRET"),
    }


def validate_config(config: dict) -> List[str]:
    """
    Validate configuration and return list of missing credentials.

    Args:
        config: Configuration dictionary from load_config()

    Returns:
        List of missing credential names (empty if all present).
    """
    missing = []
    spotify_keys = [
        ("spotify_client_id", "SPOTIFY_CLIENT_ID"),
        ("spotify_client_secret", "SPOTIFY_CLIENT_SECRET"),
    ]
    for key, env_name in spotify_keys:
        if not config.get(key):
            missing.append(env_name)
    return missing


def get_spotify_instructions() -> str:
    """Return instructions for obtaining Spotify API credentials."""
    return """
To get Spotify API credentials:
1. Sign in at https://developer.spotify.com/dashboard
2. Create an app (any redirect URI will do, it is not used)
3. Copy the client ID and client secret to your .env file:
   SPOTIFY_CLIENT_ID=your_client_id
   SPOTIFY_CLIENT_SECRET=your_client_secret
"""
