from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException
import click
from config import Config

db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS') or '*')

    # The store is built once from config and shared by every request
    from trivia_league.services.store import build_store
    flask_app.extensions['tabular_store'] = build_store(flask_app.config)

    # Host bearer check
    from trivia_league.auth import load_host_from_request, unauthorized
    login_manager.request_loader(load_host_from_request)
    login_manager.unauthorized_handler(unauthorized)

    # Import and register blueprints here
    from trivia_league.main import main
    flask_app.register_blueprint(main)

    from trivia_league.api.teams import teams
    from trivia_league.api.scores import scores
    from trivia_league.api.standings import standings
    from trivia_league.api.setup import setup
    from trivia_league.api.trivia import trivia
    for blueprint in (teams, scores, standings, setup, trivia):
        flask_app.register_blueprint(blueprint, url_prefix='/api')

    @flask_app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return jsonify({'error': exc.description or exc.name}), exc.code

    @click.command('init-sheets')
    def init_sheets_command():
        """Writes the header row of every tab."""
        from trivia_league.services.sheets_setup import initialize_headers
        from trivia_league.services.store import get_store
        with flask_app.app_context():
            written = initialize_headers(get_store())
            print(f"Headers written for: {', '.join(written)}")

    @click.command('refresh-standings')
    @click.option('--location', default=None, help='Only count scores from this venue.')
    def refresh_standings_command(location):
        """Recomputes standings from Scores and replaces the Standings tab."""
        from trivia_league.services.standings import compute_standings, load_score_records, persist_standings
        from trivia_league.services.store import get_store
        with flask_app.app_context():
            store = get_store()
            table = compute_standings(load_score_records(store), location)
            persist_standings(store, table, clear_rows=flask_app.config['STANDINGS_CLEAR_ROWS'])
            print(f"Standings refreshed: {len(table)} teams")

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates the database sheet, then writes headers."""
        from trivia_league.services.sheets_setup import initialize_headers
        from trivia_league.services.store.database import DatabaseStore
        import trivia_league.models  # noqa: F401
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            initialize_headers(DatabaseStore())
            print('Database sheet has been reset!')

    flask_app.cli.add_command(init_sheets_command)
    flask_app.cli.add_command(refresh_standings_command)
    flask_app.cli.add_command(db_reset_command)

    return flask_app
