from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from scorekeeper.models import InvalidSubmission, ScoreSubmission
from scorekeeper.services.scores import ScoreStore

scores = Blueprint('scores', __name__)


def _store() -> ScoreStore:
    return current_app.extensions['score_store']


@scores.route('/getStats', methods=['GET'])
def get_stats():
    current_app.logger.info("Fetching stats...")
    return jsonify([record.to_dict() for record in _store().fetch()])


@scores.route('/saveScore', methods=['POST'])
def save_score():
    if not request.is_json:
        current_app.logger.warning(
            f"Error parsing score JSON: unsupported content type {request.content_type!r}"
        )
        return jsonify({'error': 'Invalid JSON'}), 400

    try:
        data = request.get_json()
        submission = ScoreSubmission.from_payload(data)
    except (BadRequest, InvalidSubmission) as exc:
        current_app.logger.warning(f"Error parsing score JSON: {exc}")
        return jsonify({'error': 'Invalid JSON'}), 400

    record = _store().submit(submission)
    return jsonify(record.to_dict()), 201


@scores.route('/clearScores', methods=['DELETE'])
def clear_scores():
    _store().reset()
    return jsonify({'message': 'All scores cleared'})
