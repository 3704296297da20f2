#!/usr/bin/env python3
"""
Spotify Tagger - ID3 tagging of MP3 files from the Spotify catalog.

Usage:
    python -m spotify_tagger /path/to/file.mp3 [options]
    python -m spotify_tagger /path/to/folder [options]
"""

import argparse
import os
import sys

from .config import load_config, validate_config, eprint, get_spotify_instructions
from .decisions import AutoDecisions
from .errors import TaggerError
from .interactive import InteractivePrompts
from .models import ResolutionOptions
from .pipeline import TagPipeline
from .resolver import CandidateResolver
from .spotify_client import SpotifyClient
from .tag_writer import TagWriter
from .utils import parse_genres


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        description="Tag MP3 files with metadata from the Spotify catalog.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Tag one file, searching by its file name
  python -m spotify_tagger "Queen - Bohemian Rhapsody.mp3"

  # Tag one file with an explicit search term
  python -m spotify_tagger track01.mp3 --search "bohemian rhapsody queen"

  # Tag a whole folder, replacing old tags and renaming files
  python -m spotify_tagger /path/to/folder --reset --rename --genre rock
"""
    )

    parser.add_argument(
        "path",
        help="Path to MP3 file or folder to process"
    )

    parser.add_argument(
        "--genre",
        default="",
        help="Default genre(s) when Spotify has none (comma separated)"
    )

    parser.add_argument(
        "--search",
        default="",
        help="Override the search term (single file only)"
    )

    parser.add_argument(
        "--reset",
        action="store_true",
        help="Remove all existing tags before writing"
    )

    parser.add_argument(
        "--rename",
        action="store_true",
        help="Rename files to 'Artist - Title.mp3' after tagging"
    )

    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Pick the first search result without asking (non-interactive)"
    )

    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: ./.env)"
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress non-essential output"
    )

    return parser


def build_options(args: argparse.Namespace) -> ResolutionOptions:
    """Build the read-only run options from parsed arguments."""
    options = ResolutionOptions(
        term=args.search.strip(),
        genres=tuple(parse_genres(args.genre)),
        reset=args.reset,
        rename=args.rename,
    )
    if os.path.isdir(args.path):
        if options.term:
            eprint("Warning: --search is ignored when tagging a folder")
        options = options.for_directory()
    return options


def main():
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not os.path.exists(args.path):
        parser.error(f"Path does not exist: {args.path}")

    config = load_config(args.env_file)
    missing = validate_config(config)

    if missing:
        eprint(f"\nMissing required credentials: {', '.join(missing)}")
        eprint(get_spotify_instructions())
        sys.exit(1)

    client = SpotifyClient(
        config["spotify_client_id"],
        config["spotify_client_secret"]
    )
    try:
        client.authenticate()
    except TaggerError as e:
        eprint(f"Error: {e}")
        sys.exit(1)

    prompts = InteractivePrompts(no_color=args.no_color, quiet=args.quiet)
    provider = AutoDecisions() if args.yes else prompts

    pipeline = TagPipeline(
        resolver=CandidateResolver(client),
        writer=TagWriter(),
        provider=provider,
        prompts=prompts,
        options=build_options(args),
    )

    try:
        pipeline.process(args.path)
    except TaggerError as e:
        eprint(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(1)

    prompts.show_summary(pipeline.stats)


if __name__ == "__main__":
    main()
