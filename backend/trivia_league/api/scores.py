from flask import Blueprint, jsonify, request, current_app
from flask_login import login_required
import re

from trivia_league.ids import generate_id, utc_timestamp
from trivia_league.layout import MAX_ROUNDS, SCORES_SHEET
from trivia_league.services.standings import ScoreRecord, load_score_records
from trivia_league.services.standings.normalizer import is_blank, parse_number
from trivia_league.services.store import get_store

scores = Blueprint('scores', __name__)

DATE_RE = re.compile(r'\d{4}-\d{2}-\d{2}', re.ASCII)


@scores.route('/scores', methods=['GET'])
def list_scores():
    team_id = request.args.get('teamId')
    location = request.args.get('location')
    week = request.args.get('week')
    date = request.args.get('date')
    try:
        records = load_score_records(get_store())
    except Exception as exc:
        current_app.logger.error(f"[scores] error: {exc}")
        return jsonify({'error': 'Scores operation failed', 'details': str(exc)}), 500

    if team_id:
        records = [r for r in records if r.team_id == team_id]
    if location:
        records = [r for r in records if r.location == location]
    if week:
        records = [r for r in records if r.week == str(week)]
    if date:
        records = [r for r in records if r.date == date]
    return jsonify({'scores': [r.to_dict() for r in records]})


@scores.route('/scores', methods=['POST'])
@login_required
def submit_score():
    data = request.get_json(silent=True)
    # Arrays and scalars carry no fields
    if not isinstance(data, dict):
        data = {}

    missing = [f for f in ('teamId', 'teamName', 'location', 'week', 'date') if not data.get(f)]
    if missing:
        return jsonify({'error': f"Missing required fields: {', '.join(missing)}"}), 400

    locations = current_app.config['VALID_LOCATIONS']
    if data['location'] not in locations:
        return jsonify({'error': f"Invalid location. Must be one of: {', '.join(locations)}"}), 400

    if not isinstance(data['date'], str) or not DATE_RE.fullmatch(data['date']):
        return jsonify({'error': 'date must be YYYY-MM-DD format'}), 400

    raw_rounds = data.get('rounds')
    rounds = []
    # Blank entries are unplayed rounds, not zeros
    for value in (raw_rounds[:MAX_ROUNDS] if isinstance(raw_rounds, list) else []):
        if is_blank(value):
            continue
        number = parse_number(value)
        if number is None:
            return jsonify({'error': 'rounds must contain only numbers'}), 400
        rounds.append(number)

    bonus = 0
    if not is_blank(data.get('bonusRound')):
        bonus = parse_number(data['bonusRound'])
        if bonus is None:
            return jsonify({'error': 'bonusRound must be a number'}), 400

    record = ScoreRecord(
        score_id=generate_id('score'),
        date=data['date'],
        week=str(data['week']),
        location=data['location'],
        team_id=str(data['teamId']),
        team_name=str(data['teamName']),
        rounds=rounds,
        bonus_round=bonus,
        total=sum(rounds) + bonus,
        submitted_by=str(data.get('submittedBy') or ''),
        submitted_at=utc_timestamp(),
    )

    round_cells = rounds + [''] * (MAX_ROUNDS - len(rounds))
    row = [
        record.score_id,
        record.date,
        record.week,
        record.location,
        record.team_id,
        record.team_name,
        *round_cells,
        record.bonus_round or '',
        record.total,
        record.submitted_by,
        record.submitted_at,
    ]
    # Appends are never retried: the store does not deduplicate rows
    try:
        get_store().append_row(SCORES_SHEET, row)
    except Exception as exc:
        current_app.logger.error(f"[scores] error: {exc}")
        return jsonify({'error': 'Scores operation failed', 'details': str(exc)}), 500

    current_app.logger.info(
        f"[scores] appended {record.score_id} team={record.team_id} week={record.week} total={record.total}"
    )
    return jsonify({'success': True, 'score': record.to_dict()}), 201
