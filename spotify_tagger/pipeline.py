"""Single-file tagging pipeline and the directory batch driver."""

from pathlib import Path
from typing import Optional

from .config import eprint
from .decisions import DecisionProvider
from .errors import InputError, RenameError, TaggerError
from .interactive import InteractivePrompts
from .merge import merge_genres
from .models import FileState, ProcessingStats, ResolutionOptions, TrackCandidate
from .resolver import CandidateResolver
from .selector import select
from .tag_writer import TagWriter
from .utils import generate_filename, term_from_filename


class TagPipeline:
    """Resolves, selects, merges and writes tags, one file at a time."""

    def __init__(self, resolver: CandidateResolver, writer: TagWriter,
                 provider: DecisionProvider, prompts: InteractivePrompts,
                 options: ResolutionOptions):
        """
        Initialize pipeline.

        Args:
            resolver: Candidate resolver bound to the run's catalog client
            writer: ID3 tag writer
            provider: Answers selection, search revision and genre questions
            prompts: Terminal output
            options: Read-only run options
        """
        self.resolver = resolver
        self.writer = writer
        self.provider = provider
        self.prompts = prompts
        self.options = options
        self.stats = ProcessingStats()

    def process(self, path: str) -> None:
        """
        Main entry point for processing.

        Args:
            path: MP3 file or directory of MP3 files

        Raises:
            InputError: Path is missing or not an MP3 file
            TaggerError: Single-file mode only, when the file fails
        """
        path_obj = Path(path)

        if path_obj.is_dir():
            self.process_directory(path)
        elif path_obj.is_file():
            if not TagWriter.is_supported(path):
                raise InputError(f"Not an mp3 file: {path}")
            try:
                state = self.process_file(path)
            except TaggerError:
                self._record(path, FileState.FAILED)
                raise
            self._record(path, state)
        else:
            raise InputError(f"Path not found: {path}")

    def process_directory(self, folder_path: str) -> None:
        """
        Tag every MP3 directly inside a folder.

        A failing file is reported and the sweep moves on. The search
        override never applies here; each term comes from its file name.

        Args:
            folder_path: Directory to sweep (not recursive)
        """
        options = self.options.for_directory()
        files = sorted(
            p for p in Path(folder_path).iterdir()
            if p.is_file() and TagWriter.is_supported(str(p))
        )
        for path in files:
            self.stats.states[str(path)] = FileState.PENDING

        for i, path in enumerate(files, 1):
            self.prompts.show_progress(i, len(files), path.name)
            try:
                state = self.process_file(str(path), options)
            except TaggerError as e:
                eprint(f"Failed: {path.name} - {e}")
                self.stats.errors.append(f"{path.name}: {e}")
                state = FileState.FAILED
            self._record(str(path), state)

    def process_file(self, file_path: str,
                     options: Optional[ResolutionOptions] = None) -> FileState:
        """
        Run the whole pipeline for one file.

        Args:
            file_path: MP3 file to tag
            options: Options for this file (default: the pipeline's own)

        Returns:
            DONE after a write, SKIPPED if the operator quit

        Raises:
            TaggerError: Search, tag read, cover download or save failed
        """
        options = options or self.options
        self.stats.states[file_path] = FileState.IN_PROGRESS
        self.prompts.show_file_header(file_path)

        term = options.term or term_from_filename(file_path)
        try:
            candidates = self.resolver.search_until_found(
                term, self.provider, on_search=self.prompts.show_search)
        finally:
            self.stats.catalog_searches = self.resolver.searches
        if candidates is None:
            return FileState.SKIPPED

        candidate = select(candidates, self.provider)
        if candidate is None:
            return FileState.SKIPPED

        merge_genres(candidate, options, self.provider)

        self.writer.write(candidate, file_path, reset=options.reset)
        self.prompts.show_written(file_path, candidate)

        if options.rename:
            try:
                self.rename_file(file_path, candidate)
            except RenameError as e:
                eprint(f"Failed to rename file: {e}")
                self.stats.errors.append(str(e))

        return FileState.DONE

    def rename_file(self, file_path: str, candidate: TrackCandidate) -> Optional[str]:
        """
        Rename a tagged file to 'Artist, Artist - Title.ext'.

        Args:
            file_path: Current file path
            candidate: Track just written to the file

        Returns:
            New path, or None if the file already had that name

        Raises:
            RenameError: Target exists or the rename failed
        """
        current = Path(file_path)
        new_name = generate_filename(candidate, current.suffix)
        new_path = current.parent / new_name

        if current.name == new_name:
            return None
        if new_path.exists():
            raise RenameError(f"Target file already exists: {new_path}")

        try:
            current.rename(new_path)
        except OSError as e:
            raise RenameError(f"Cannot rename {current.name}: {e}") from e

        self.stats.files_renamed += 1
        self.prompts.show_file_rename(current.name, new_name)
        return str(new_path)

    def _record(self, file_path: str, state: FileState) -> None:
        """Count a finished file."""
        self.stats.total_files += 1
        self.stats.states[file_path] = state
        if state is FileState.DONE:
            self.stats.tags_updated += 1
        elif state is FileState.SKIPPED:
            self.stats.files_skipped += 1
        elif state is FileState.FAILED:
            self.stats.files_failed += 1
