from trivia_league import db
import json


class SheetRow(db.Model):
    """One row of a tab in the database-backed tabular store.

    Cells are kept as a JSON-encoded list in column order (index 0 = column A).
    ``row_index`` is zero-based, so the header row of a tab is row_index 0.
    """
    __tablename__ = 'sheet_row'
    __table_args__ = (db.UniqueConstraint('sheet', 'row_index', name='uq_sheet_row_sheet_row_index'),)

    id = db.Column(db.Integer, primary_key=True)
    sheet = db.Column(db.String(64), nullable=False, index=True)
    row_index = db.Column(db.Integer, nullable=False)
    cells = db.Column(db.Text, nullable=False, default='[]')

    def get_cells(self):
        try:
            values = json.loads(self.cells) if self.cells else []
        except ValueError:
            values = []
        return values if isinstance(values, list) else []

    def set_cells(self, values):
        # Drop trailing blanks so an emptied row can be detected and removed
        trimmed = list(values)
        while trimmed and trimmed[-1] in (None, ''):
            trimmed.pop()
        self.cells = json.dumps(trimmed)
        return trimmed

    def to_dict(self):
        return {
            'id': self.id,
            'sheet': self.sheet,
            'row_index': self.row_index,
            'cells': self.get_cells(),
        }
