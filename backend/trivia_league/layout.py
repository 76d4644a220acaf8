"""Tab names and column order of the league spreadsheet. Order matters."""

TEAMS_SHEET = 'Teams'
SCORES_SHEET = 'Scores'
STANDINGS_SHEET = 'Standings'

TEAMS_HEADERS = [
    'TeamID', 'TeamName', 'CaptainName', 'Email', 'Location', 'RegisteredAt',
]

SCORES_HEADERS = [
    'ScoreID', 'Date', 'Week', 'Location', 'TeamID', 'TeamName',
    'R1', 'R2', 'R3', 'R4', 'R5', 'R6', 'BonusRound', 'Total',
    'SubmittedBy', 'SubmittedAt',
]

STANDINGS_HEADERS = [
    'Rank', 'TeamID', 'TeamName', 'Location',
    'GamesPlayed', 'TotalPoints', 'BestScore', 'AverageScore', 'LastPlayed',
]

TEAMS_RANGE = f'{TEAMS_SHEET}!A:F'
SCORES_RANGE = f'{SCORES_SHEET}!A:P'

HEADER_RANGES = {
    TEAMS_SHEET: (f'{TEAMS_SHEET}!A1:F1', TEAMS_HEADERS),
    SCORES_SHEET: (f'{SCORES_SHEET}!A1:P1', SCORES_HEADERS),
    STANDINGS_SHEET: (f'{STANDINGS_SHEET}!A1:I1', STANDINGS_HEADERS),
}

MAX_ROUNDS = 6
