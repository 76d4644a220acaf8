import json
import threading
from typing import Any, List, Optional

from googleapiclient.discovery import build
from google.oauth2 import service_account

from . import StoreConfigError, TabularStore

SHEETS_SCOPES = ['https://www.googleapis.com/auth/spreadsheets']


class GoogleSheetsStore(TabularStore):
    """Sheets v4 ``spreadsheets.values`` backend.

    The discovery client is built lazily on first use and reused for the life
    of the store. Tests pass ``service`` directly to skip credentials.
    """

    def __init__(self, spreadsheet_id: Optional[str], service_account_json: Optional[str] = None, service=None):
        self.spreadsheet_id = spreadsheet_id
        self._service_account_json = service_account_json
        self._service = service
        self._lock = threading.Lock()

    def _credentials(self):
        if not self._service_account_json:
            raise StoreConfigError('GOOGLE_SERVICE_ACCOUNT_JSON is not set')
        info = json.loads(self._service_account_json)
        return service_account.Credentials.from_service_account_info(info, scopes=SHEETS_SCOPES)

    def _values(self):
        if not self.spreadsheet_id:
            raise StoreConfigError('GOOGLE_SPREADSHEET_ID is not set')
        with self._lock:
            if self._service is None:
                self._service = build('sheets', 'v4', credentials=self._credentials(), cache_discovery=False)
            return self._service.spreadsheets().values()

    def read_range(self, a1_range: str) -> List[List[Any]]:
        res = self._values().get(spreadsheetId=self.spreadsheet_id, range=a1_range).execute()
        return res.get('values') or []

    def append_row(self, sheet_name: str, row: List[Any]) -> None:
        self._values().append(
            spreadsheetId=self.spreadsheet_id,
            range=f'{sheet_name}!A1',
            valueInputOption='USER_ENTERED',
            insertDataOption='INSERT_ROWS',
            body={'values': [row]},
        ).execute()

    def update_range(self, a1_range: str, values: List[List[Any]]) -> None:
        self._values().update(
            spreadsheetId=self.spreadsheet_id,
            range=a1_range,
            valueInputOption='USER_ENTERED',
            body={'values': values},
        ).execute()

    def clear_range(self, a1_range: str) -> None:
        # Values only; formatting is kept
        self._values().clear(spreadsheetId=self.spreadsheet_id, range=a1_range, body={}).execute()
