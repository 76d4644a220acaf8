from flask import Blueprint, jsonify, current_app
from flask_login import login_required

from trivia_league.layout import HEADER_RANGES
from trivia_league.services.sheets_setup import initialize_headers
from trivia_league.services.store import get_store

setup = Blueprint('setup', __name__)


@setup.route('/setup', methods=['POST'])
@login_required
def setup_sheets():
    try:
        initialize_headers(get_store())
    except Exception as exc:
        current_app.logger.error(f"[setup] error: {exc}")
        return jsonify({'error': 'Setup failed', 'details': str(exc)}), 500

    return jsonify({
        'success': True,
        'message': 'Sheet headers initialized. You can now use the app.',
        'sheets': {name: headers for name, (_, headers) in HEADER_RANGES.items()},
    })
