"""Tabular store: the spreadsheet the league runs on.

Every tab is addressed with A1 ranges. Two backends implement the same four
calls: Google Sheets for production and a database-emulated sheet for local
development and tests. Handlers fetch the configured instance with
``get_store()``; nothing below reads the environment directly.
"""

from flask import current_app


class StoreError(Exception):
    """A tabular store call could not be completed."""


class StoreConfigError(StoreError):
    """The store is missing required configuration."""


class TabularStore:
    """Interface shared by every backend.

    ``append_row`` is the only call that is not safe to retry: the store
    performs no deduplication, so a blind retry can produce a duplicate row.
    """

    def read_range(self, a1_range):
        """Return the sparse rows of ``a1_range`` (header included); [] when empty."""
        raise NotImplementedError

    def append_row(self, sheet_name, row):
        raise NotImplementedError

    def update_range(self, a1_range, values):
        raise NotImplementedError

    def clear_range(self, a1_range):
        raise NotImplementedError


def build_store(config) -> TabularStore:
    """Construct the backend named by ``config['TABULAR_STORE']``."""
    backend = (config.get('TABULAR_STORE') or 'sheets').lower()
    if backend == 'sheets':
        from .google_sheets import GoogleSheetsStore
        return GoogleSheetsStore(
            spreadsheet_id=config.get('GOOGLE_SPREADSHEET_ID'),
            service_account_json=config.get('GOOGLE_SERVICE_ACCOUNT_JSON'),
        )
    if backend == 'database':
        from .database import DatabaseStore
        return DatabaseStore()
    raise StoreConfigError(f"Unknown TABULAR_STORE backend: {backend!r}")


def get_store() -> TabularStore:
    return current_app.extensions['tabular_store']
