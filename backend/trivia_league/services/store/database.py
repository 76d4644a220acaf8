"""Database-emulated spreadsheet.

Mirrors what the Sheets API returns for ``values.get`` with the default
FORMATTED_VALUE render: every cell comes back as text, trailing empty cells
and trailing empty rows are dropped, and a blank row in the middle of a range
comes back as ``[]``.
"""

from typing import Any, List

from sqlalchemy.exc import SQLAlchemyError

from trivia_league import db
from trivia_league.models import SheetRow
from . import StoreError, TabularStore
from .ranges import parse_range


def format_cell(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'TRUE' if value else 'FALSE'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class DatabaseStore(TabularStore):

    def _rows_in(self, rng):
        query = SheetRow.query.filter(SheetRow.sheet == rng.sheet, SheetRow.row_index >= rng.start_row)
        if rng.end_row is not None:
            query = query.filter(SheetRow.row_index <= rng.end_row)
        return query.order_by(SheetRow.row_index).all()

    def read_range(self, a1_range: str) -> List[List[str]]:
        rng = parse_range(a1_range)
        by_index = {}
        for row in self._rows_in(rng):
            cells = [format_cell(v) for v in row.get_cells()[rng.column_slice()]]
            while cells and cells[-1] == '':
                cells.pop()
            if cells:
                by_index[row.row_index] = cells
        if not by_index:
            return []
        last = max(by_index)
        return [by_index.get(i, []) for i in range(rng.start_row, last + 1)]

    def append_row(self, sheet_name: str, row: List[Any]) -> None:
        try:
            last = (
                db.session.query(db.func.max(SheetRow.row_index))
                .filter(SheetRow.sheet == sheet_name)
                .scalar()
            )
            new_row = SheetRow(sheet=sheet_name, row_index=0 if last is None else last + 1)
            new_row.set_cells(row)
            db.session.add(new_row)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise

    def update_range(self, a1_range: str, values: List[List[Any]]) -> None:
        rng = parse_range(a1_range)
        if rng.end_row is not None and not rng.anchor:
            capacity = rng.end_row - rng.start_row + 1
            if len(values) > capacity:
                raise StoreError(f'{len(values)} rows do not fit in range {a1_range}')
        try:
            for offset, values_row in enumerate(values):
                row_index = rng.start_row + offset
                row = SheetRow.query.filter_by(sheet=rng.sheet, row_index=row_index).first()
                if row is None:
                    row = SheetRow(sheet=rng.sheet, row_index=row_index)
                cells = row.get_cells()
                needed = rng.start_col + len(values_row)
                if len(cells) < needed:
                    cells.extend([''] * (needed - len(cells)))
                cells[rng.start_col:needed] = list(values_row)
                if row.set_cells(cells):
                    db.session.add(row)
                elif row.id is not None:
                    db.session.delete(row)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise

    def clear_range(self, a1_range: str) -> None:
        rng = parse_range(a1_range)
        try:
            for row in self._rows_in(rng):
                cells = row.get_cells()
                cols = rng.column_slice()
                stop = len(cells) if cols.stop is None else min(cols.stop, len(cells))
                for i in range(rng.start_col, stop):
                    cells[i] = ''
                if row.set_cells(cells):
                    db.session.add(row)
                else:
                    db.session.delete(row)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
