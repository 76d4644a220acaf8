"""Standings engine: score normalization, aggregation and the cache tab.

Pure domain logic over rows read from the tabular store, imported by the HTTP
routes and CLI commands so transport concerns stay out of the fold.
"""

from trivia_league.layout import SCORES_RANGE
from .aggregator import compute_standings
from .cache import persist_standings
from .normalizer import normalize_rows
from .records import ScoreRecord, TeamStanding


def load_score_records(store):
    """Read the whole Scores tab fresh and normalize it."""
    return normalize_rows(store.read_range(SCORES_RANGE))


__all__ = [
    'ScoreRecord',
    'TeamStanding',
    'compute_standings',
    'load_score_records',
    'normalize_rows',
    'persist_standings',
]
