# routes/reviews.py
# Отзывы судей на работы команд

from flask import Blueprint, request, jsonify, current_app
from werkzeug.exceptions import BadRequest

import store
from guard import current_user_id, require_identity
from invalidation import notify_views_changed
from routes.auth import login_required

reviews_bp = Blueprint('reviews', __name__, url_prefix='/api')


def _acting_user_id(data):
    # user_id из запроса — только удобный параметр, сверяется с сессией
    user_id = data.get('user_id')
    if user_id is None:
        user_id = request.args.get('user_id', type=int)
    return user_id


def _review_fields(data):
    content = data.get('content')
    rating = data.get('rating')

    if not isinstance(content, str) or not content.strip():
        raise BadRequest('Review content is required')
    if isinstance(rating, bool) or not isinstance(rating, (int, float)):
        raise BadRequest('Rating must be a number')

    low, high = current_app.config['RATING_MIN'], current_app.config['RATING_MAX']
    if not low <= rating <= high:
        raise BadRequest(f'Rating must be between {low} and {high}')
    return content, rating


@reviews_bp.route('/submissions/<int:submission_id>/reviews', methods=['GET'])
@login_required
def list_reviews(submission_id):
    reviews = store.list_reviews_by_submission(submission_id)
    return jsonify([r.to_dict() for r in reviews])


@reviews_bp.route('/submissions/<int:submission_id>/reviews/mine', methods=['GET'])
@login_required
def my_review(submission_id):
    review = store.get_review_by_user_and_submission(current_user_id(), submission_id)
    return jsonify(review.to_dict() if review else None)


@reviews_bp.route('/submissions/<int:submission_id>/reviews', methods=['POST'])
def create_review(submission_id):
    data = request.get_json(silent=True) or {}
    user_id = _acting_user_id(data)
    require_identity(current_user_id(), user_id)
    content, rating = _review_fields(data)

    review, views = store.create_review(submission_id, user_id, content, rating)
    notify_views_changed(views)
    return jsonify({'review': review.to_dict(), 'changed_views': views}), 201


@reviews_bp.route('/reviews/<int:review_id>', methods=['PUT'])
def update_review(review_id):
    data = request.get_json(silent=True) or {}
    user_id = _acting_user_id(data)
    require_identity(current_user_id(), user_id)
    content, rating = _review_fields(data)

    views = store.update_review(review_id, user_id, content, rating)
    notify_views_changed(views)
    return jsonify({'changed_views': views})


@reviews_bp.route('/reviews/<int:review_id>', methods=['DELETE'])
def delete_review(review_id):
    data = request.get_json(silent=True) or {}
    user_id = _acting_user_id(data)
    require_identity(current_user_id(), user_id)

    views = store.delete_review(review_id, user_id)
    notify_views_changed(views)
    return jsonify({'changed_views': views})
