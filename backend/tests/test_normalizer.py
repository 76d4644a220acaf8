import logging
import math

import pytest

from trivia_league.layout import SCORES_HEADERS
from trivia_league.services.standings.normalizer import (
    MalformedRowError,
    normalize_row,
    normalize_rows,
    parse_number,
)


FULL_ROW = [
    'score_1', '2024-01-08', '2', 'Exchange', 'team_a', 'Quizzly Bears',
    '10', '8', '9', '7', '10', '6', '5', '55', 'Dana', '2024-01-08T23:10:00.000Z',
]


def test_full_row_maps_every_column():
    record = normalize_row(FULL_ROW)
    assert record.score_id == 'score_1'
    assert record.date == '2024-01-08'
    assert record.week == '2'
    assert record.location == 'Exchange'
    assert record.team_id == 'team_a'
    assert record.team_name == 'Quizzly Bears'
    assert record.rounds == [10, 8, 9, 7, 10, 6]
    assert record.bonus_round == 5
    assert record.total == 55
    assert record.submitted_by == 'Dana'
    assert record.submitted_at == '2024-01-08T23:10:00.000Z'


def test_missing_round_cells_are_compacted_not_nulled():
    row = ['score_1', '2024-01-08', '1', 'H2O', 'team_a', 'A', '10', '', '7']
    record = normalize_row(row)
    # R2 empty, R4..R6 absent from the sparse row
    assert record.rounds == [10, 7]


def test_absent_bonus_and_total_default_to_zero():
    record = normalize_row(['score_1', '2024-01-08', '1', 'H2O', 'team_a', 'A'])
    assert record.rounds == []
    assert record.bonus_round == 0
    assert record.total == 0
    assert record.submitted_by == ''
    assert record.submitted_at == ''


def test_total_is_taken_as_stored_not_recomputed():
    row = list(FULL_ROW)
    row[13] = '999'
    assert normalize_row(row).total == 999


def test_row_without_score_id_is_skipped():
    assert normalize_row(['', '2024-01-08', '1', 'H2O', 'team_a']) is None
    assert normalize_row([]) is None


def test_whitespace_score_id_is_kept():
    record = normalize_row(['  ', '2024-01-08', '1', 'H2O', 'team_a'])
    assert record is not None
    assert record.score_id == '  '


def test_whitespace_round_cell_is_malformed():
    with pytest.raises(MalformedRowError) as exc:
        normalize_row(['s1', '2024-01-08', '1', 'H2O', 'team_a', 'A', ' '])
    assert exc.value.columns == ['R1']


def test_decimal_cells_become_floats():
    row = list(FULL_ROW)
    row[12] = '2.5'
    row[13] = '57.5'
    record = normalize_row(row)
    assert record.bonus_round == 2.5
    assert record.total == 57.5


def test_parse_number():
    assert parse_number('42') == 42
    assert isinstance(parse_number('42'), int)
    assert parse_number(' -3 ') == -3
    assert parse_number('1.5') == 1.5
    assert parse_number(7) == 7
    assert parse_number(7.25) == 7.25
    assert parse_number('abc') is None
    assert parse_number('nan') is None
    assert parse_number(math.inf) is None
    assert parse_number(True) is None
    assert parse_number('') is None


def test_malformed_numeric_cell_raises_with_columns():
    row = list(FULL_ROW)
    row[7] = 'eight'
    row[13] = 'n/a'
    with pytest.raises(MalformedRowError) as info:
        normalize_row(row)
    assert info.value.score_id == 'score_1'
    assert info.value.columns == ['R2', 'Total']


def test_normalize_rows_skips_header_blank_and_malformed(caplog):
    bad = list(FULL_ROW)
    bad[0] = 'score_bad'
    bad[13] = 'lots'
    good = list(FULL_ROW)
    rows = [SCORES_HEADERS, good, [], ['', '2024-01-01'], bad]

    with caplog.at_level(logging.WARNING):
        records = normalize_rows(rows)

    assert [r.score_id for r in records] == ['score_1']
    assert any('sheet row 5' in m and 'score_bad' in m for m in caplog.messages)


def test_normalize_rows_without_header():
    records = normalize_rows([FULL_ROW], has_header=False)
    assert len(records) == 1
