"""Pick exactly one candidate, or give up on the file."""

import re
from typing import List, Optional

from .decisions import DecisionProvider, is_quit
from .models import TrackCandidate

ORDINAL = re.compile(r"[0-9]+")


def select(candidates: List[TrackCandidate],
           provider: DecisionProvider) -> Optional[TrackCandidate]:
    """
    Show the candidates and ask until a listed ordinal or quit comes back.

    Args:
        candidates: Candidates numbered 1..N
        provider: Source of replies

    Returns:
        The chosen candidate, or None if the operator abandoned the file
    """
    if not candidates:
        return None

    by_index = {c.index: c for c in candidates}
    provider.show_candidates(candidates)

    while True:
        reply = provider.choose(candidates)
        if is_quit(reply):
            return None

        text = reply.strip()
        chosen = None
        if ORDINAL.fullmatch(text):
            chosen = by_index.get(int(text))

        if chosen is not None:
            return chosen

        provider.reject(reply, len(candidates))
