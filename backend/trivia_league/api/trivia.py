from flask import Blueprint, jsonify, request, current_app

from trivia_league.services.trivia import TriviaUpstreamError, clamp_count, generate_questions

trivia = Blueprint('trivia', __name__)


@trivia.route('/trivia', methods=['POST'])
def generate_trivia():
    data = request.get_json(silent=True)
    # Arrays and scalars carry no fields
    if not isinstance(data, dict):
        data = {}
    topic = data.get('topic') or 'general knowledge'
    difficulty = data.get('difficulty') or 'medium'
    count = clamp_count(data.get('count', 5))

    cfg = current_app.config
    try:
        questions = generate_questions(
            cfg.get('ANTHROPIC_API_KEY'),
            cfg.get('TRIVIA_MODEL'),
            topic=topic,
            difficulty=difficulty,
            count=count,
            timeout=cfg.get('TRIVIA_TIMEOUT_SEC', 60),
        )
    except TriviaUpstreamError as exc:
        return jsonify({'error': 'Question generation failed', 'details': str(exc)}), 502
    except Exception as exc:
        current_app.logger.error(f"[trivia] error: {exc}")
        return jsonify({'error': 'Failed to generate questions', 'details': str(exc)}), 500

    current_app.logger.info(f"[trivia] generated {len(questions)} questions topic={topic!r} difficulty={difficulty}")
    return jsonify({'questions': questions})
