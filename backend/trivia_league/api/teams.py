from flask import Blueprint, jsonify, request, current_app
import re

from trivia_league.ids import generate_id, utc_timestamp
from trivia_league.layout import TEAMS_RANGE, TEAMS_SHEET
from trivia_league.services.store import get_store

teams = Blueprint('teams', __name__)

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def _field(data, name):
    value = data.get(name)
    return value.strip() if isinstance(value, str) else ''


def _row_to_team(row):
    padded = list(row) + [''] * (6 - len(row))
    return {
        'teamId': padded[0],
        'teamName': padded[1],
        'captainName': padded[2],
        'email': padded[3],
        'location': padded[4],
        'registeredAt': padded[5],
    }


@teams.route('/register', methods=['POST'])
def register_team():
    data = request.get_json(silent=True)
    # Arrays and scalars carry no fields
    if not isinstance(data, dict):
        data = {}

    missing = [f for f in ('teamName', 'captainName', 'email', 'location') if not _field(data, f)]
    if missing:
        return jsonify({'error': f"Missing required fields: {', '.join(missing)}"}), 400

    locations = current_app.config['VALID_LOCATIONS']
    location = data.get('location')
    if location not in locations:
        return jsonify({'error': f"Invalid location. Must be one of: {', '.join(locations)}"}), 400

    email = _field(data, 'email').lower()
    if not EMAIL_RE.match(email):
        return jsonify({'error': 'Invalid email address'}), 400

    team_name = _field(data, 'teamName')
    captain_name = _field(data, 'captainName')
    try:
        store = get_store()
        rows = store.read_range(f'{TEAMS_SHEET}!A:B')
        normalised = team_name.lower()
        if any(len(row) > 1 and str(row[1]).strip().lower() == normalised for row in rows[1:]):
            return jsonify({'error': 'A team with this name is already registered'}), 409

        team = {
            'teamId': generate_id('team'),
            'teamName': team_name,
            'captainName': captain_name,
            'email': email,
            'location': location,
            'registeredAt': utc_timestamp(),
        }
        store.append_row(TEAMS_SHEET, [
            team['teamId'],
            team['teamName'],
            team['captainName'],
            team['email'],
            team['location'],
            team['registeredAt'],
        ])
    except Exception as exc:
        current_app.logger.error(f"[register] error: {exc}")
        return jsonify({'error': 'Registration failed', 'details': str(exc)}), 500

    current_app.logger.info(f"[register] team={team['teamId']} name={team_name!r} location={location}")
    return jsonify({'success': True, 'team': team}), 201


@teams.route('/teams', methods=['GET'])
def list_teams():
    location = request.args.get('location')
    try:
        rows = get_store().read_range(TEAMS_RANGE)
    except Exception as exc:
        current_app.logger.error(f"[teams] error: {exc}")
        return jsonify({'error': 'Failed to fetch teams', 'details': str(exc)}), 500

    # Header only, or an empty tab
    if len(rows) <= 1:
        return jsonify({'teams': []})

    result = [_row_to_team(row) for row in rows[1:] if row and row[0]]
    if location:
        result = [t for t in result if t['location'] == location]
    result.sort(key=lambda t: (t['teamName'] or '').lower())
    return jsonify({'teams': result})
