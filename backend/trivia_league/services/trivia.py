"""Trivia question generation through the Anthropic Messages API."""

import json
import logging
import re

import requests

logger = logging.getLogger(__name__)

ANTHROPIC_MESSAGES_URL = 'https://api.anthropic.com/v1/messages'
ANTHROPIC_VERSION = '2023-06-01'
MAX_QUESTIONS = 20
DEFAULT_QUESTIONS = 5

DIFFICULTY_GUIDANCE = {
    'easy': 'questions should be common knowledge most people would know',
    'medium': 'questions should require some specific knowledge but not be obscure',
    'hard': 'questions should be challenging and require detailed knowledge',
}

_FENCE_OPEN_RE = re.compile(r'^```(?:json)?\s*', re.IGNORECASE)
_FENCE_CLOSE_RE = re.compile(r'\s*```$')


class TriviaError(Exception):
    """Question generation failed."""


class TriviaUpstreamError(TriviaError):
    """The generation API answered with a non-2xx status."""

    def __init__(self, status_code, body=''):
        self.status_code = status_code
        self.body = body
        super().__init__(f'API returned {status_code}')


def clamp_count(count) -> int:
    try:
        value = int(float(count))
    except (TypeError, ValueError, OverflowError):
        value = DEFAULT_QUESTIONS
    return min(max(1, value), MAX_QUESTIONS)


def build_prompt(topic: str, difficulty: str, count: int) -> str:
    guidance = DIFFICULTY_GUIDANCE.get(difficulty, 'moderate challenge level')
    return f"""Generate {count} trivia questions suitable for a bar trivia night.
Topic: {topic}
Difficulty: {difficulty}

Rules:
- Questions should be fun, engaging, and appropriate for adults at a restaurant/bar.
- Each question must have exactly 4 multiple-choice options.
- Exactly one option must be correct; the other three should be plausible but wrong.
- Vary question types (facts, "which of these", "who was the first to...", etc.).
- For {difficulty} difficulty: {guidance}.

Return ONLY a valid JSON array with no additional text or markdown. Format:
[
  {{
    "question": "Question text here?",
    "answer": "Correct answer text",
    "options": ["Option A", "Option B", "Option C", "Option D"]
  }}
]
The correct answer must be one of the four options (exact match)."""


def parse_questions(text: str):
    cleaned = _FENCE_CLOSE_RE.sub('', _FENCE_OPEN_RE.sub('', text or '')).strip()
    try:
        questions = json.loads(cleaned)
    except ValueError as exc:
        raise TriviaError(f'Response was not valid JSON: {exc}') from exc
    if not isinstance(questions, list):
        raise TriviaError('Response was not a JSON array')
    return questions


def generate_questions(api_key, model, topic='general knowledge', difficulty='medium',
                       count=DEFAULT_QUESTIONS, timeout=60):
    if not api_key:
        raise TriviaError('ANTHROPIC_API_KEY is not set')

    r = requests.post(
        ANTHROPIC_MESSAGES_URL,
        headers={
            'Content-Type': 'application/json',
            'x-api-key': api_key,
            'anthropic-version': ANTHROPIC_VERSION,
        },
        json={
            'model': model,
            'max_tokens': 4096,
            'messages': [{'role': 'user', 'content': build_prompt(topic, difficulty, count)}],
        },
        timeout=timeout,
    )
    if not r.ok:
        logger.error(f"[trivia] Anthropic API error: {r.status_code} {r.text}")
        raise TriviaUpstreamError(r.status_code, r.text)

    data = r.json()
    content = data.get('content') or [{}]
    return parse_questions(content[0].get('text', ''))
