import pytest

from trivia_league.services.store.ranges import SheetRange, column_index, column_letters, parse_range


def test_column_letters_round_trip_edges():
    assert column_index('A') == 0
    assert column_index('P') == 15
    assert column_index('AA') == 26
    assert column_letters(0) == 'A'
    assert column_letters(25) == 'Z'
    assert column_letters(26) == 'AA'


def test_whole_column_range():
    assert parse_range('Scores!A:P') == SheetRange('Scores', 0, None, 0, 15)


def test_bounded_range():
    assert parse_range('Standings!A2:I1000') == SheetRange('Standings', 1, 999, 0, 8)


def test_single_cell_anchor():
    assert parse_range('Teams!A1') == SheetRange('Teams', 0, 0, 0, 0)
    assert parse_range('Teams!A1').anchor
    assert not parse_range('Teams!A1:F1').anchor


def test_bare_sheet_name_and_quoted_name():
    assert parse_range('Teams') == SheetRange('Teams')
    assert parse_range("'Game Nights'!A1:B2") == SheetRange('Game Nights', 0, 1, 0, 1)


def test_contains_row_and_column_slice():
    rng = parse_range('Standings!A2:I4')
    assert not rng.contains_row(0)
    assert rng.contains_row(1) and rng.contains_row(3)
    assert not rng.contains_row(4)
    assert list(range(20))[rng.column_slice()] == list(range(9))


@pytest.mark.parametrize('bad', ['', 'Scores!', 'Scores!A0', '!A1', 'Scores!1A'])
def test_invalid_ranges_raise(bad):
    with pytest.raises(ValueError):
        parse_range(bad)
