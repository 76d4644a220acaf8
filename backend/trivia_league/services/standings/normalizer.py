import logging
import math
import re
from typing import Any, Iterable, List, Optional, Sequence

from trivia_league.layout import MAX_ROUNDS
from .records import Number, ScoreRecord

logger = logging.getLogger(__name__)

# Scores tab column positions
COL_SCORE_ID = 0
COL_DATE = 1
COL_WEEK = 2
COL_LOCATION = 3
COL_TEAM_ID = 4
COL_TEAM_NAME = 5
COL_FIRST_ROUND = 6
COL_BONUS = 12
COL_TOTAL = 13
COL_SUBMITTED_BY = 14
COL_SUBMITTED_AT = 15

_INT_RE = re.compile(r'^[+-]?\d+$')


class MalformedRowError(ValueError):
    """A stored row has a numeric cell that is not a number."""

    def __init__(self, score_id, columns):
        self.score_id = score_id
        self.columns = list(columns)
        super().__init__(f"row {score_id!r} has non-numeric cells: {', '.join(self.columns)}")


def is_blank(value: Any) -> bool:
    # Empty means absent or ''; whitespace is a value
    return value is None or value == ''


def parse_number(value: Any) -> Optional[Number]:
    """Parse a cell into an int or float. Returns None when it is not a finite number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None
    text = value.strip()
    if _INT_RE.match(text):
        return int(text)
    if not text or '_' in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _cell(row: Sequence[Any], index: int) -> Any:
    return row[index] if index < len(row) else None


def _text(row: Sequence[Any], index: int) -> str:
    value = _cell(row, index)
    return '' if value is None else str(value)


def normalize_row(row: Sequence[Any]) -> Optional[ScoreRecord]:
    """Map one Scores row to a ScoreRecord.

    Returns None when the row has no ScoreID. Absent or empty round cells are
    left out of ``rounds`` (gaps compacted); absent bonus and total read as 0.
    The stored total is taken as-is, never recomputed from the rounds.

    Raises MalformedRowError when a present numeric cell does not parse.
    """
    if is_blank(_cell(row, COL_SCORE_ID)):
        return None
    score_id = _text(row, COL_SCORE_ID)

    bad_columns = []
    rounds: List[Number] = []
    for i in range(MAX_ROUNDS):
        value = _cell(row, COL_FIRST_ROUND + i)
        if is_blank(value):
            continue
        number = parse_number(value)
        if number is None:
            bad_columns.append(f'R{i + 1}')
        else:
            rounds.append(number)

    def optional_number(index, label):
        value = _cell(row, index)
        if is_blank(value):
            return 0
        number = parse_number(value)
        if number is None:
            bad_columns.append(label)
            return 0
        return number

    bonus = optional_number(COL_BONUS, 'BonusRound')
    total = optional_number(COL_TOTAL, 'Total')
    if bad_columns:
        raise MalformedRowError(score_id, bad_columns)

    return ScoreRecord(
        score_id=score_id,
        date=_text(row, COL_DATE),
        week=_text(row, COL_WEEK),
        location=_text(row, COL_LOCATION),
        team_id=_text(row, COL_TEAM_ID),
        team_name=_text(row, COL_TEAM_NAME),
        rounds=rounds,
        bonus_round=bonus,
        total=total,
        submitted_by=_text(row, COL_SUBMITTED_BY),
        submitted_at=_text(row, COL_SUBMITTED_AT),
    )


def normalize_rows(rows: Iterable[Sequence[Any]], has_header: bool = True) -> List[ScoreRecord]:
    """Normalize a full Scores read, in store order.

    Rows without a ScoreID are dropped silently. Rows with malformed numeric
    cells are dropped with a data-quality warning rather than aggregated.
    """
    records = []
    for position, row in enumerate(rows):
        if has_header and position == 0:
            continue
        try:
            record = normalize_row(row or [])
        except MalformedRowError as exc:
            # +1 for the 1-based sheet row number
            logger.warning(f"[normalizer] skipping sheet row {position + 1}: {exc}")
            continue
        if record is not None:
            records.append(record)
    return records
