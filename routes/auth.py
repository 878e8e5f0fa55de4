# routes/auth.py
# Маршруты для авторизации: сессия хранит доверенный user_id

from functools import wraps
from flask import Blueprint, request, session, jsonify
from errors import Unauthorized
from extensions import db
from models.user import User # Импортируем нашу модель User

auth_bp = Blueprint('auth', __name__)


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if 'user_id' not in session:
            raise Unauthorized('Login required')
        return f(*args, **kwargs)
    return decorated_function


@auth_bp.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or request.form
    user_code = data.get('code')
    if not user_code:
        return jsonify({'error': 'Code is required'}), 400

    # Ищем пользователя в базе данных по коду
    user = User.query.filter_by(code=user_code).first()
    if not user:
        raise Unauthorized('Invalid access code')

    session.clear() # Очищаем старую сессию для безопасности
    session['user_id'] = user.id
    return jsonify(user.to_dict())


@auth_bp.route('/logout', methods=['POST'])
def logout():
    session.clear()
    return jsonify({'status': 'ok'})


@auth_bp.route('/me')
@login_required
def me():
    user = db.session.get(User, session['user_id'])
    if not user:
        session.clear()
        raise Unauthorized('Login required')
    return jsonify(user.to_dict())
