import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .records import Number, ScoreRecord, TeamStanding

UNKNOWN_TEAM_NAME = 'Unknown'


@dataclass
class _TeamTotals:
    team_id: str
    team_name: str
    location: str
    games_played: int = 0
    total_points: Number = 0
    best_score: Number = 0
    last_played: str = ''


def round_one_decimal(value: float) -> float:
    """Round to one decimal, halves upward (0.25 -> 0.3, -0.25 -> -0.2)."""
    return math.floor(value * 10 + 0.5) / 10


def average_score(total_points: Number, games_played: int) -> Number:
    if games_played <= 0:
        return 0
    return round_one_decimal(total_points / games_played)


def qualifies(record: ScoreRecord, location_filter: Optional[str] = None) -> bool:
    if not record.score_id or not record.team_id:
        return False
    if location_filter and record.location != location_filter:
        return False
    return True


def compute_standings(records: Iterable[ScoreRecord], location_filter: Optional[str] = None) -> List[TeamStanding]:
    """Fold score records into ranked season standings.

    Records are grouped by team id in first-seen order. Each team's display
    name and location are overwritten by every record folded in, so the last
    qualifying record in store order wins (not the latest by date).

    Ranking is total points desc, then games played desc. The sort is stable,
    so teams still tied keep first-seen order, and every team gets its own
    sequential rank; there are no shared ranks.
    """
    teams: Dict[str, _TeamTotals] = {}
    for record in records:
        if not qualifies(record, location_filter):
            continue
        totals = teams.get(record.team_id)
        if totals is None:
            totals = teams[record.team_id] = _TeamTotals(
                team_id=record.team_id,
                team_name=record.team_name,
                location=record.location,
            )
        totals.team_name = record.team_name or UNKNOWN_TEAM_NAME
        totals.location = record.location
        totals.games_played += 1
        totals.total_points += record.total
        if record.total > totals.best_score:
            totals.best_score = record.total
        if record.date > totals.last_played:
            totals.last_played = record.date

    ordered = sorted(teams.values(), key=lambda t: (-t.total_points, -t.games_played))
    return [
        TeamStanding(
            rank=position,
            team_id=t.team_id,
            team_name=t.team_name,
            location=t.location,
            games_played=t.games_played,
            total_points=t.total_points,
            best_score=t.best_score,
            average_score=average_score(t.total_points, t.games_played),
            last_played=t.last_played,
        )
        for position, t in enumerate(ordered, start=1)
    ]
