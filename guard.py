# guard.py
# Проверки прав: кто может писать, менять и удалять отзывы

from flask import session

from errors import Unauthorized
from models import Judge


def current_user_id():
    """Доверенный идентификатор пользователя из сессии (или None)."""
    return session.get('user_id')


def require_identity(authenticated_user_id, user_id):
    # Идентификатор из запроса — лишь удобный параметр; доверяем только сессии
    if authenticated_user_id is None or authenticated_user_id != user_id:
        raise Unauthorized()


def is_judge(user_id, hackathon_id):
    if user_id is None or hackathon_id is None:
        return False
    return Judge.query.filter_by(user_id=user_id, hackathon_id=hackathon_id).first() is not None


def require_judge(authenticated_user_id, hackathon_id):
    if authenticated_user_id is None or not is_judge(authenticated_user_id, hackathon_id):
        raise Unauthorized('Only judges can access this hackathon\'s submissions')


def require_organizer(authenticated_user_id, hackathon):
    if authenticated_user_id is None or hackathon.organizer_id != authenticated_user_id:
        raise Unauthorized('Only the organizer can do this')


def can_view_leaderboard(authenticated_user_id, hackathon):
    return bool(hackathon.leaderboard_published) or (
        authenticated_user_id is not None and hackathon.organizer_id == authenticated_user_id
    )
