# errors.py
# Ошибки ядра отзывов и рейтинга

from flask import jsonify


class ReviewError(Exception):
    status_code = 500
    message = 'Internal error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class Unauthorized(ReviewError):
    """Нет пользователя в сессии, он не совпадает с действующим или у него нет роли."""
    status_code = 401
    message = 'Unauthorized'


class NotFound(ReviewError):
    """
    Объект не найден от имени вызывающего.
    Чужой отзыв и несуществующий для вызывающего выглядят одинаково.
    """
    status_code = 404
    message = 'Not found'


class PersistenceFailure(ReviewError):
    status_code = 500
    message = 'Storage failure'


def handle_review_error(error):
    return jsonify({'error': error.message}), error.status_code
