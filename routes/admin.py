# routes/admin.py
# Действия организатора хакатона

from flask import Blueprint, request, jsonify

import store
from errors import NotFound
from guard import current_user_id, require_organizer
from invalidation import notify_views_changed
from routes.auth import login_required

admin_bp = Blueprint('admin', __name__, url_prefix='/api/admin')


@admin_bp.route('/hackathons/<int:hackathon_id>/leaderboard/publish', methods=['POST'])
@login_required
def publish_leaderboard(hackathon_id):
    hackathon = store.get_hackathon(hackathon_id)
    if not hackathon:
        raise NotFound('Hackathon not found')
    require_organizer(current_user_id(), hackathon)

    data = request.get_json(silent=True) or {}
    # Без явного значения — переключаем
    published = data.get('published')
    if published is None:
        published = not hackathon.leaderboard_published

    views = store.set_leaderboard_published(hackathon, published)
    notify_views_changed(views)
    return jsonify({'published': hackathon.leaderboard_published, 'changed_views': views})
