# ranking.py
# Подсчёт рейтинга команд хакатона по отзывам судей

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from store import load_hackathon_submissions

LEADER_ROLES = ('leader', 'owner')


def average_score(ratings):
    """
    Средняя оценка, округлённая до одного знака (половина вверх).
    Работа без отзывов получает 0, а не исключается из рейтинга.
    """
    ratings = list(ratings)
    if not ratings:
        return 0

    # inf и nan округлять нечего
    if not all(math.isfinite(r) for r in ratings):
        return sum(ratings) / len(ratings)

    total = sum(Decimal(str(r)) for r in ratings)
    with localcontext() as ctx:
        # Точности хватает на все целые цифры и один знак после запятой
        ctx.prec = max(ctx.prec, total.adjusted() + 3)
        average = (total / len(ratings)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
    return float(average)


def resolve_leader(members):
    """Первый участник с ролью 'leader' или 'owner' (с учётом регистра)."""
    for member in members:
        if member.get('role') in LEADER_ROLES:
            user = member.get('user') or {}
            name = ' '.join(
                part for part in (user.get('first_name'), user.get('last_name')) if part
            )
            return {'name': name, 'image': user.get('image_url')}
    return None


def rank_teams(submissions):
    """
    Строит рейтинг по снимку работ хакатона (см. store.load_hackathon_submissions).

    Сортировка стабильная и только по средней оценке: при равенстве команды
    остаются в порядке входного списка.
    """
    results = []
    for submission in submissions:
        team = submission.get('team') or {}
        members = team.get('members') or []
        ratings = [review['rating'] for review in submission.get('reviews') or []]

        results.append({
            'team_id': team.get('id', submission.get('team_id')),
            'team_name': team.get('name'),
            'average_score': average_score(ratings),
            'member_count': len(members),
            'project_name': submission.get('project_name'),
            'track_id': submission.get('track_id'),
            'leader': resolve_leader(members),
            'review_count': len(ratings),
        })

    # sorted() стабилен и при reverse=True
    results = sorted(results, key=lambda r: r['average_score'], reverse=True)
    for position, entry in enumerate(results, start=1):
        entry['rank'] = position
    return results


def filter_by_track(entries, track_id):
    """Вкладка трека: те же записи с общим местом, только нужного трека."""
    return [entry for entry in entries if entry['track_id'] == track_id]


def compute_leaderboard(hackathon_id, track_id=None):
    entries = rank_teams(load_hackathon_submissions(hackathon_id))
    if track_id is not None:
        entries = filter_by_track(entries, track_id)
    return entries
