"""Tests for merge.py genre precedence."""

from spotify_tagger.decisions import ScriptedDecisions
from spotify_tagger.merge import merge_genres
from spotify_tagger.models import ResolutionOptions


class TestMergeGenres:
    """Tests for merge_genres."""

    def test_catalog_genres_win(self, bohemian_candidate):
        """Should keep genres that came from the catalog."""
        bohemian_candidate.genres = ["glam rock"]
        provider = ScriptedDecisions(["pop"])
        merge_genres(bohemian_candidate, ResolutionOptions(genres=("rock",)), provider)
        assert bohemian_candidate.genres == ["glam rock"]
        assert provider.ask_genres() == "pop"

    def test_default_genres_used(self, bohemian_candidate):
        """Should use the configured defaults when the catalog has none."""
        options = ResolutionOptions(genres=("rock",))
        result = merge_genres(bohemian_candidate, options, ScriptedDecisions())
        assert result is bohemian_candidate
        assert bohemian_candidate.genres == ["rock"]

    def test_prompts_without_defaults(self, bohemian_candidate):
        """Should ask the provider when there are no defaults."""
        provider = ScriptedDecisions([" rock , , opera "])
        merge_genres(bohemian_candidate, ResolutionOptions(), provider)
        assert bohemian_candidate.genres == ["rock", "opera"]

    def test_blank_answer_leaves_no_genre(self, bohemian_candidate):
        """Should accept an empty answer."""
        merge_genres(bohemian_candidate, ResolutionOptions(), ScriptedDecisions([""]))
        assert bohemian_candidate.genres == []

    def test_idempotent(self, bohemian_candidate):
        """Should give the same genres when merged twice."""
        options = ResolutionOptions(genres=("rock",))
        merge_genres(bohemian_candidate, options, ScriptedDecisions())
        merge_genres(bohemian_candidate, ResolutionOptions(genres=("jazz",)),
                     ScriptedDecisions(["pop"]))
        assert bohemian_candidate.genres == ["rock"]

    def test_options_not_shared_with_candidate(self, bohemian_candidate):
        """Should copy the defaults instead of aliasing them."""
        options = ResolutionOptions(genres=("rock",))
        merge_genres(bohemian_candidate, options, ScriptedDecisions())
        bohemian_candidate.genres.append("opera")
        assert options.genres == ("rock",)
