import os
import sys
import pytest

# Ensure the backend root (containing the `trivia_league` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from trivia_league import create_app, db


HOST_SECRET = 'test-host-secret'


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    TABULAR_STORE = 'database'
    HOST_SECRET = HOST_SECRET
    ANTHROPIC_API_KEY = 'test-anthropic-key'
    TRIVIA_MODEL = 'test-model'
    TRIVIA_TIMEOUT_SEC = 5
    VALID_LOCATIONS = ['Main Street', 'Exchange', 'H2O']
    STANDINGS_CLEAR_ROWS = 1000
    CORS_ORIGINS = ['http://localhost:5173']


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import trivia_league.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def store(flask_app):
    from trivia_league.services.store import get_store
    return get_store()


@pytest.fixture()
def host_headers():
    return {'Authorization': f'Bearer {HOST_SECRET}'}


@pytest.fixture()
def seeded_sheets(store):
    """Header rows written, no data."""
    from trivia_league.services.sheets_setup import initialize_headers
    initialize_headers(store)
    return store
