import pytest

from trivia_league.models import SheetRow
from trivia_league.services.store import StoreError


def test_empty_sheet_reads_as_empty(store):
    assert store.read_range('Scores!A:P') == []


def test_append_then_read_formats_cells_as_text(store):
    store.append_row('Scores', ['ScoreID', 'Total'])
    store.append_row('Scores', ['s1', 55])
    store.append_row('Scores', ['s2', 57.5, '', None])
    assert store.read_range('Scores!A:P') == [
        ['ScoreID', 'Total'],
        ['s1', '55'],
        ['s2', '57.5'],
    ]


def test_read_respects_column_bounds(store):
    store.append_row('Teams', ['id', 'name', 'captain'])
    store.append_row('Teams', ['t1', 'Bears', 'Dana'])
    assert store.read_range('Teams!A:B') == [['id', 'name'], ['t1', 'Bears']]
    assert store.read_range('Teams!B2:C2') == [['Bears', 'Dana']]


def test_blank_row_in_the_middle_reads_as_empty_list(store):
    store.update_range('Teams!A1', [['h']])
    store.update_range('Teams!A3', [['x']])
    assert store.read_range('Teams') == [['h'], [], ['x']]


def test_update_writes_at_offset_and_keeps_other_cells(store):
    store.append_row('Standings', ['Rank', 'TeamID'])
    store.update_range('Standings!A2:B3', [[1, 't1'], [2, 't2']])
    store.update_range('Standings!B2', [['tX']])
    assert store.read_range('Standings!A:I') == [
        ['Rank', 'TeamID'],
        ['1', 'tX'],
        ['2', 't2'],
    ]


def test_update_rejects_rows_beyond_bounded_range(store):
    with pytest.raises(StoreError):
        store.update_range('Standings!A2:I3', [[1], [2], [3]])


def test_single_row_range_holds_one_row(store):
    with pytest.raises(StoreError):
        store.update_range('Teams!A1:F1', [['TeamID'], ['team_a']])
    assert store.read_range('Teams!A:F') == []

    # A lone cell anchors the write and grows downward
    store.update_range('Teams!A1', [['TeamID'], ['team_a']])
    assert store.read_range('Teams!A:F') == [['TeamID'], ['team_a']]


def test_clear_blanks_range_and_keeps_header(store):
    store.update_range('Standings!A1:B1', [['Rank', 'TeamID']])
    store.update_range('Standings!A2:B4', [[1, 'a'], [2, 'b'], [3, 'c']])
    store.clear_range('Standings!A2:I1000')
    assert store.read_range('Standings!A:I') == [['Rank', 'TeamID']]
    # Emptied rows are removed, not kept as blank records
    assert SheetRow.query.filter_by(sheet='Standings').count() == 1


def test_clear_only_touches_its_columns(store):
    store.update_range('Teams!A1:C1', [['a', 'b', 'c']])
    store.clear_range('Teams!B1:B1')
    assert store.read_range('Teams') == [['a', '', 'c']]


def test_append_goes_after_the_last_row(store):
    store.update_range('Scores!A5', [['far']])
    store.append_row('Scores', ['next'])
    row = SheetRow.query.filter_by(sheet='Scores', row_index=5).one()
    assert row.get_cells() == ['next']


def test_tabs_are_independent(store):
    store.append_row('Teams', ['t'])
    store.append_row('Scores', ['s'])
    store.clear_range('Teams')
    assert store.read_range('Teams') == []
    assert store.read_range('Scores') == [['s']]
