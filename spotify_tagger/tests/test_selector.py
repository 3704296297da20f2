"""Tests for selector.py and the decision providers."""

from unittest.mock import patch

import pytest

from spotify_tagger.decisions import AutoDecisions, ScriptedDecisions, is_quit
from spotify_tagger.interactive import InteractivePrompts
from spotify_tagger.models import TrackCandidate
from spotify_tagger.selector import select


@pytest.fixture
def candidates():
    """Three candidates numbered 1..3."""
    return [
        TrackCandidate(index=i, title=f"Song {i}", album="Album")
        for i in range(1, 4)
    ]


class TestSelect:
    """Tests for select."""

    def test_returns_chosen_ordinal(self, candidates):
        """Should return the candidate with the chosen ordinal."""
        chosen = select(candidates, ScriptedDecisions(["2"]))
        assert chosen is candidates[1]

    def test_accepts_surrounding_whitespace(self, candidates):
        """Should accept a reply with a trailing newline."""
        chosen = select(candidates, ScriptedDecisions([" 3\n"]))
        assert chosen is candidates[2]

    def test_rejects_zero_out_of_range_and_text(self, candidates):
        """Should re-ask after 0, N+1 and non-numeric replies."""
        provider = ScriptedDecisions(["0", "4", "abc", "", "-1", "1"])
        chosen = select(candidates, provider)
        assert chosen is candidates[0]
        assert provider.rejected == ["0", "4", "abc", "", "-1"]

    def test_quit_abandons(self, candidates):
        """Should return None on the quit signal."""
        assert select(candidates, ScriptedDecisions(["q"])) is None

    def test_quit_is_case_insensitive(self, candidates):
        """Should accept 'Q' as quit."""
        assert select(candidates, ScriptedDecisions(["Q\n"])) is None

    def test_empty_list_returns_none(self):
        """Should not ask when there is nothing to choose from."""
        provider = ScriptedDecisions(["1"])
        assert select([], provider) is None
        assert provider.choose([]) == "1"

    def test_only_listed_ordinals_accepted(self):
        """Should match on ordinal, not list position."""
        listed = [TrackCandidate(index=5, title="Five", album="A")]
        provider = ScriptedDecisions(["1", "5"])
        assert select(listed, provider) is listed[0]
        assert provider.rejected == ["1"]

    def test_rejects_signed_and_underscored_numbers(self):
        """Should accept plain digits only."""
        listed = [TrackCandidate(index=i, title=f"Track {i}", album="A")
                  for i in range(1, 11)]
        provider = ScriptedDecisions(["1_0", "+1", "1.0", "2"])
        assert select(listed, provider) is listed[1]
        assert provider.rejected == ["1_0", "+1", "1.0"]


class TestAutoDecisions:
    """Tests for AutoDecisions."""

    def test_picks_first(self, candidates):
        """Should pick the first listed candidate."""
        assert select(candidates, AutoDecisions()) is candidates[0]

    def test_gives_up_on_empty_search(self):
        """Should quit instead of revising the term."""
        assert is_quit(AutoDecisions().revise_term("anything"))

    def test_no_genres(self):
        """Should answer the genre question with nothing."""
        assert AutoDecisions().ask_genres() == ""


class TestScriptedDecisions:
    """Tests for ScriptedDecisions."""

    def test_quits_when_exhausted(self, candidates):
        """Should answer 'q' after the script runs out."""
        provider = ScriptedDecisions(["x"])
        assert provider.choose(candidates) == "x"
        assert provider.choose(candidates) == "q"
        assert provider.revise_term("t") == "q"


class TestInteractiveSelection:
    """Tests for selecting through the terminal prompts."""

    def test_reprompts_until_valid(self, candidates, capsys):
        """Should print every candidate and 'Not a choice' on bad input."""
        prompts = InteractivePrompts(no_color=True)
        with patch("builtins.input", side_effect=["7", "two", "2"]):
            chosen = select(candidates, prompts)

        assert chosen is candidates[1]
        out = capsys.readouterr().out
        assert out.count("Not a choice") == 2
        for candidate in candidates:
            assert f"Name: {candidate.title}" in out

    def test_quit_from_terminal(self, candidates):
        """Should abandon when the operator types q."""
        prompts = InteractivePrompts(no_color=True)
        with patch("builtins.input", return_value="q"):
            assert select(candidates, prompts) is None
