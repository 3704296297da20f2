"""Decision providers: who answers the pipeline's questions."""

from abc import ABC, abstractmethod
from typing import Iterable, List

from .models import TrackCandidate

QUIT = "q"


def is_quit(reply: str) -> bool:
    """Check whether a reply is the quit signal."""
    return reply.strip().lower() == QUIT


class DecisionProvider(ABC):
    """
    Answers the questions the pipeline cannot settle on its own.

    Replies are raw strings, the same thing an operator would type. The
    pipeline validates them, so a provider never has to.
    """

    def show_candidates(self, candidates: List[TrackCandidate]) -> None:
        """Present the candidates before a choice is requested."""

    @abstractmethod
    def choose(self, candidates: List[TrackCandidate]) -> str:
        """Return an ordinal from the candidate list, or 'q' to abandon."""

    def reject(self, reply: str, count: int) -> None:
        """Called when a reply to choose() is not a listed ordinal."""

    @abstractmethod
    def revise_term(self, term: str) -> str:
        """Return a new search term after an empty search, or 'q'."""

    @abstractmethod
    def ask_genres(self) -> str:
        """Return comma-separated genres for a track that has none."""


class AutoDecisions(DecisionProvider):
    """Non-interactive provider: always takes the first result."""

    def choose(self, candidates: List[TrackCandidate]) -> str:
        return str(candidates[0].index) if candidates else QUIT

    def revise_term(self, term: str) -> str:
        return QUIT

    def ask_genres(self) -> str:
        return ""


class ScriptedDecisions(DecisionProvider):
    """Replays canned replies in order; answers 'q' once they run out."""

    def __init__(self, replies: Iterable[str] = ()):
        self._replies = iter(replies)
        self.rejected: List[str] = []

    def _next(self) -> str:
        return next(self._replies, QUIT)

    def choose(self, candidates: List[TrackCandidate]) -> str:
        return self._next()

    def reject(self, reply: str, count: int) -> None:
        self.rejected.append(reply)

    def revise_term(self, term: str) -> str:
        return self._next()

    def ask_genres(self) -> str:
        return self._next()
