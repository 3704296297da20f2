"""Fill in the genre of a resolved track."""

from .decisions import DecisionProvider
from .models import ResolutionOptions, TrackCandidate
from .utils import parse_genres


def merge_genres(candidate: TrackCandidate, options: ResolutionOptions,
                 provider: DecisionProvider) -> TrackCandidate:
    """
    Complete the candidate's genres.

    Catalog genres are kept as they are. Without them the configured
    defaults apply, and failing those the provider is asked.

    Args:
        candidate: Selected track (modified in place)
        options: Run options holding the default genres
        provider: Asked only when neither catalog nor options have genres

    Returns:
        The same candidate
    """
    if candidate.genres:
        return candidate

    if options.genres:
        candidate.genres = list(options.genres)
    else:
        candidate.genres = parse_genres(provider.ask_genres())
    return candidate
