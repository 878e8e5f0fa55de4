# routes/main.py
# Рейтинг, панель судьи и поиск пользователей

from flask import Blueprint, request, jsonify

import store
from errors import NotFound, Unauthorized
from guard import current_user_id, can_view_leaderboard, require_judge
from ranking import compute_leaderboard
from routes.auth import login_required

main_bp = Blueprint('main', __name__, url_prefix='/api')

SEARCH_LIMIT_MAX = 50


def _hackathon_or_404(hackathon_id):
    hackathon = store.get_hackathon(hackathon_id)
    if not hackathon:
        raise NotFound('Hackathon not found')
    return hackathon


@main_bp.route('/hackathons/<int:hackathon_id>/leaderboard')
@login_required
def leaderboard(hackathon_id):
    hackathon = _hackathon_or_404(hackathon_id)
    if not can_view_leaderboard(current_user_id(), hackathon):
        raise Unauthorized('The leaderboard for this hackathon has not been published yet')

    track_id = request.args.get('track', type=int)
    teams = compute_leaderboard(hackathon.id, track_id=track_id)

    return jsonify({
        'hackathon_id': hackathon.id,
        'published': hackathon.leaderboard_published,
        'track_id': track_id,
        'teams': teams,
    })


@main_bp.route('/hackathons/<int:hackathon_id>/judging')
@login_required
def judging_dashboard(hackathon_id):
    hackathon = _hackathon_or_404(hackathon_id)
    user_id = current_user_id()
    require_judge(user_id, hackathon.id)

    # Для каждой работы: свой отзыв (редактировать) или None (создать)
    queue = store.list_judging_queue(hackathon.id, user_id)
    return jsonify([
        {
            'submission': submission.to_dict(),
            'team_name': submission.team.name,
            'my_review': review.to_dict() if review else None,
        }
        for submission, review in queue
    ])


@main_bp.route('/users/search')
@login_required
def search_users():
    query = request.args.get('q', '')
    limit = request.args.get('limit', 10, type=int)
    # Отрицательный LIMIT в SQLite снимает ограничение
    limit = max(1, min(limit, SEARCH_LIMIT_MAX))
    users = store.search_users(query, limit=limit)
    return jsonify([u.to_dict() for u in users])
