import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///trivia_league.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Tabular store backend: 'sheets' (Google Sheets) or 'database'
    TABULAR_STORE = os.environ.get('TABULAR_STORE', 'sheets')
    GOOGLE_SPREADSHEET_ID = os.environ.get('GOOGLE_SPREADSHEET_ID')
    GOOGLE_SERVICE_ACCOUNT_JSON = os.environ.get('GOOGLE_SERVICE_ACCOUNT_JSON')
    # Shared bearer secret for host-only endpoints. Unset disables them.
    HOST_SECRET = os.environ.get('HOST_SECRET')
    # Question generation
    ANTHROPIC_API_KEY = os.environ.get('ANTHROPIC_API_KEY')
    TRIVIA_MODEL = os.environ.get('TRIVIA_MODEL', 'claude-sonnet-4-6')
    TRIVIA_TIMEOUT_SEC = int(os.environ.get('TRIVIA_TIMEOUT_SEC', '60'))
    VALID_LOCATIONS = [
        loc.strip()
        for loc in os.environ.get('VALID_LOCATIONS', 'Main Street,Exchange,H2O').split(',')
        if loc.strip()
    ]
    # Last row cleared in the Standings tab before a snapshot is written
    STANDINGS_CLEAR_ROWS = int(os.environ.get('STANDINGS_CLEAR_ROWS', '1000'))
    CORS_ORIGINS = [
        o.strip()
        for o in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173,http://localhost:5174,http://127.0.0.1:5174',
        ).split(',')
        if o.strip()
    ]
