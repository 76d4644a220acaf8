from flask import Blueprint, jsonify, request, current_app

from trivia_league.ids import utc_timestamp
from trivia_league.services.standings import compute_standings, load_score_records, persist_standings
from trivia_league.services.store import get_store

standings = Blueprint('standings', __name__)


@standings.route('/standings', methods=['GET'])
def get_standings():
    """Standings computed fresh from the Scores tab.

    ``?location=`` limits the fold to one venue. ``?refresh=true`` also replaces
    the Standings tab with this snapshot; the tab is never read here.
    """
    location = request.args.get('location') or None
    refresh = request.args.get('refresh') == 'true'
    try:
        store = get_store()
        table = compute_standings(load_score_records(store), location)
        if refresh:
            persist_standings(store, table, clear_rows=current_app.config['STANDINGS_CLEAR_ROWS'])
    except Exception as exc:
        current_app.logger.error(f"[standings] error: {exc}")
        return jsonify({'error': 'Failed to compute standings', 'details': str(exc)}), 500

    current_app.logger.info(f"[standings] computed teams={len(table)} location={location} refresh={refresh}")
    return jsonify({
        'standings': [s.to_dict() for s in table],
        'lastUpdated': utc_timestamp(),
    })
