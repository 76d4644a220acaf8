from dataclasses import dataclass, field
from typing import List, Union

Number = Union[int, float]


@dataclass
class ScoreRecord:
    """One team's submitted result for one game night, as stored in the Scores tab."""
    score_id: str
    date: str = ''
    week: str = ''
    location: str = ''
    team_id: str = ''
    team_name: str = ''
    rounds: List[Number] = field(default_factory=list)
    bonus_round: Number = 0
    total: Number = 0
    submitted_by: str = ''
    submitted_at: str = ''

    def to_dict(self):
        return {
            'scoreId': self.score_id,
            'date': self.date,
            'week': self.week,
            'location': self.location,
            'teamId': self.team_id,
            'teamName': self.team_name,
            'rounds': list(self.rounds),
            'bonusRound': self.bonus_round,
            'total': self.total,
            'submittedBy': self.submitted_by,
            'submittedAt': self.submitted_at,
        }


@dataclass
class TeamStanding:
    rank: int
    team_id: str
    team_name: str
    location: str
    games_played: int
    total_points: Number
    best_score: Number
    average_score: Number
    last_played: str

    def to_dict(self):
        return {
            'rank': self.rank,
            'teamId': self.team_id,
            'teamName': self.team_name,
            'location': self.location,
            'gamesPlayed': self.games_played,
            'totalPoints': self.total_points,
            'bestScore': self.best_score,
            'averageScore': self.average_score,
            'lastPlayed': self.last_played,
        }

    def to_row(self):
        """Cells for the Standings tab, in header order."""
        return [
            self.rank,
            self.team_id,
            self.team_name,
            self.location,
            self.games_played,
            self.total_points,
            self.best_score,
            self.average_score,
            self.last_played,
        ]
