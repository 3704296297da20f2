"""Interactive terminal prompts and run output."""

from pathlib import Path
from typing import List

from .decisions import DecisionProvider, QUIT
from .models import FileState, ProcessingStats, TrackCandidate


class InteractivePrompts(DecisionProvider):
    """Asks the operator at the terminal."""

    COLORS = {
        "reset": "\033[0m",
        "bold": "\033[1m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "red": "\033[91m",
        "cyan": "\033[96m",
        "dim": "\033[2m",
    }

    def __init__(self, no_color: bool = False, quiet: bool = False):
        """
        Initialize interactive prompts.

        Args:
            no_color: Disable colored output
            quiet: Suppress non-essential output
        """
        self.no_color = no_color
        self.quiet = quiet

        if no_color:
            self.COLORS = {k: "" for k in self.COLORS}

    def _c(self, color: str, text: str) -> str:
        """Apply color to text."""
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"

    def print(self, *args, **kwargs):
        """Print unless quiet mode."""
        if not self.quiet:
            print(*args, **kwargs)

    def show_candidates(self, candidates: List[TrackCandidate]) -> None:
        """Display every candidate's full record."""
        print(f"\n{self._c('cyan', 'Spotify Search Results:')}")
        print("-" * 60)
        for candidate in candidates:
            print(f"{candidate.describe()}\n")

    def choose(self, candidates: List[TrackCandidate]) -> str:
        return input(
            f"{self._c('bold', f'Choose 1 - {len(candidates)} (or continue {QUIT!r}):')} "
        )

    def reject(self, reply: str, count: int) -> None:
        print(self._c("red", "Not a choice"))

    def revise_term(self, term: str) -> str:
        return input(
            f"{self._c('yellow', 'No results')}, enter new term "
            f"(or continue {QUIT!r}): "
        )

    def ask_genres(self) -> str:
        return input(f"{self._c('bold', 'Enter Genre(s):')} ")

    def show_file_header(self, file_path: str) -> None:
        """Announce the file about to be processed."""
        self.print(f"\n{self._c('bold', 'File:')} {file_path}")

    def show_search(self, term: str) -> None:
        """Announce a catalog search."""
        self.print(f"Searching '{term}'")

    def show_written(self, file_path: str, candidate: TrackCandidate) -> None:
        """Confirm a successful tag write."""
        self.print(f"  {self._c('green', 'Tagged:')} {Path(file_path).name} "
                   f"-> {candidate.artist_display} - {candidate.title}")

    def show_file_rename(self, current_name: str, new_name: str) -> None:
        """Display file rename operation."""
        self.print(f"  {current_name}")
        self.print(f"    -> {self._c('green', new_name)}")

    def show_progress(self, current: int, total: int,
                      message: str = "") -> None:
        """Display progress indicator."""
        if self.quiet:
            return

        bar_width = 30
        filled = int(bar_width * current / total) if total > 0 else 0
        bar = "=" * filled + "-" * (bar_width - filled)
        pct = (current / total * 100) if total > 0 else 0

        print(f"[{bar}] {pct:5.1f}% ({current}/{total}) {message}")

    def show_summary(self, stats: ProcessingStats) -> None:
        """Display final processing summary."""
        print(f"\n{self._c('bold', '=' * 60)}")
        print(f"{self._c('bold', 'Processing Summary')}")
        print("=" * 60)

        print(f"Files processed:     {stats.total_files}")
        print(f"Tags updated:        {self._c('green', str(stats.tags_updated))}")
        print(f"Files skipped:       {stats.files_skipped}")
        print(f"Files failed:        {stats.files_failed}")
        print(f"Files renamed:       {stats.files_renamed}")
        print(f"Spotify searches:    {stats.catalog_searches}")

        failed = [p for p, s in stats.states.items() if s is FileState.FAILED]
        if failed:
            print(f"\n{self._c('yellow', f'Failed files ({len(failed)}):')}")
            for path in failed[:10]:
                print(f"  - {Path(path).name}")
            if len(failed) > 10:
                print(f"  ... and {len(failed) - 10} more")

        if stats.errors:
            print(f"\n{self._c('red', 'Errors:')}")
            for error in stats.errors[:10]:
                print(f"  - {error}")
            if len(stats.errors) > 10:
                print(f"  ... and {len(stats.errors) - 10} more errors")
