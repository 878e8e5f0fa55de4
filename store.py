# store.py
# Хранилище отзывов: создание, изменение, удаление и выборки

import logging
from contextlib import contextmanager
from datetime import datetime

from sqlalchemy import or_, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from extensions import db
from errors import NotFound, PersistenceFailure
from invalidation import views_for_submission
from models import Hackathon, Review, Submission, Team, TeamMember, User

logger = logging.getLogger(__name__)


@contextmanager
def persistence(action):
    """Откатывает сессию и превращает ошибку БД в PersistenceFailure."""
    try:
        yield
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Persistence failure during %s", action)
        raise PersistenceFailure() from e


def get_submission(submission_id):
    with persistence('submission lookup'):
        return db.session.get(Submission, submission_id)


def get_hackathon(hackathon_id):
    with persistence('hackathon lookup'):
        return db.session.get(Hackathon, hackathon_id)


# --- Мутации отзывов ---

def create_review(submission_id, user_id, content, rating):
    """
    Создаёт отзыв. Дубликаты (submission_id, user_id) не отклоняются:
    вызывающий код сам проверяет их через get_review_by_user_and_submission.
    Возвращает (review, изменённые представления).
    """
    with persistence('create review'):
        submission = db.session.get(Submission, submission_id)
        if not submission:
            raise NotFound('Submission not found')

        review = Review(
            submission_id=submission_id,
            user_id=user_id,
            content=content,
            rating=rating,
            created_at=datetime.utcnow()
        )
        db.session.add(review)
        views = views_for_submission(submission.hackathon_id, submission.id)
        db.session.commit()

    logger.info("Review %s created by user %s on submission %s", review.id, user_id, submission_id)
    return review, views


def update_review(review_id, user_id, content, rating):
    with persistence('update review'):
        # Один UPDATE с условием (id, user_id): чужой отзыв не найдётся
        matched = Review.query.filter_by(id=review_id, user_id=user_id).update({
            'content': content,
            'rating': rating,
            'updated_at': datetime.utcnow(),
        })
        if not matched:
            db.session.rollback()
            raise NotFound('Review not found')

        submission = Submission.query.join(Review, Review.submission_id == Submission.id).filter(
            Review.id == review_id
        ).first()
        views = views_for_submission(submission.hackathon_id, submission.id)
        db.session.commit()

    logger.info("Review %s updated by user %s", review_id, user_id)
    return views


def delete_review(review_id, user_id):
    with persistence('delete review'):
        submission = Submission.query.join(Review, Review.submission_id == Submission.id).filter(
            Review.id == review_id,
            Review.user_id == user_id
        ).first()
        if not submission:
            raise NotFound('Review not found')
        views = views_for_submission(submission.hackathon_id, submission.id)

        matched = Review.query.filter_by(id=review_id, user_id=user_id).delete()
        if not matched:
            db.session.rollback()
            raise NotFound('Review not found')
        db.session.commit()

    logger.info("Review %s deleted by user %s", review_id, user_id)
    return views


# --- Выборки отзывов ---

def get_review_by_user_and_submission(user_id, submission_id):
    with persistence('review lookup'):
        return Review.query.filter_by(user_id=user_id, submission_id=submission_id).order_by(
            Review.created_at.desc(), Review.id.desc()
        ).first()


def list_reviews_by_submission(submission_id):
    with persistence('review listing'):
        return Review.query.options(joinedload(Review.user)).filter_by(
            submission_id=submission_id
        ).order_by(Review.created_at.desc(), Review.id.desc()).all()


def list_judging_queue(hackathon_id, user_id):
    """Работы хакатона вместе с собственным отзывом судьи (или None)."""
    with persistence('judging queue'):
        submissions = Submission.query.join(Submission.team).filter(
            Team.hackathon_id == hackathon_id
        ).options(joinedload(Submission.team)).order_by(Submission.id).all()

        submission_ids = [s.id for s in submissions]
        own_reviews = {}
        if submission_ids:
            # При дубликатах побеждает самый свежий отзыв
            for review in Review.query.filter(
                Review.user_id == user_id,
                Review.submission_id.in_(submission_ids)
            ).order_by(Review.created_at, Review.id):
                own_reviews[review.submission_id] = review

    return [(s, own_reviews.get(s.id)) for s in submissions]


# --- Снимок хакатона для рейтинга ---

def load_hackathon_submissions(hackathon_id):
    """
    Один запрос Submission -> Team -> Members -> User и Submission -> Reviews,
    материализованный в обычные словари для чистой функции рейтинга.
    """
    with persistence('leaderboard snapshot'):
        submissions = Submission.query.join(Submission.team).filter(
            Team.hackathon_id == hackathon_id
        ).options(
            joinedload(Submission.team).joinedload(Team.members).joinedload(TeamMember.user),
            joinedload(Submission.reviews)
        ).order_by(Submission.id).all()

        return [_submission_snapshot(s) for s in submissions]


def _submission_snapshot(submission):
    team = submission.team
    return {
        'id': submission.id,
        'team_id': submission.team_id,
        'track_id': submission.track_id,
        'project_name': submission.project_name,
        'team': {
            'id': team.id,
            'name': team.name,
            'hackathon_id': team.hackathon_id,
            'members': [
                {
                    'role': member.role,
                    'user': {
                        'first_name': member.user.first_name,
                        'last_name': member.user.last_name,
                        'image_url': member.user.image_url,
                    } if member.user else None,
                }
                for member in team.members
            ],
        },
        'reviews': [
            {'id': r.id, 'user_id': r.user_id, 'rating': r.rating}
            for r in submission.reviews
        ],
    }


def set_leaderboard_published(hackathon, published):
    with persistence('leaderboard publish'):
        hackathon.leaderboard_published = bool(published)
        db.session.commit()

    logger.info("Leaderboard of hackathon %s %s", hackathon.id, 'published' if published else 'hidden')
    return [
        f'/hackathons/{hackathon.id}/dashboard/leaderboard',
        f'/hackathons/{hackathon.id}',
    ]


# --- Поиск пользователей (best-effort) ---

def search_users(query, limit=10):
    if not query or not query.strip():
        return []

    term = f'%{query.strip().lower()}%'
    try:
        return User.query.filter(or_(
            func.lower(User.email).like(term),
            func.lower(User.first_name).like(term),
            func.lower(User.last_name).like(term)
        )).limit(limit).all()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error searching users")
        return []
