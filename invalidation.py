# invalidation.py
# Уведомление о том, какие представления устарели после изменения отзывов

import logging

from extensions import signals

logger = logging.getLogger(__name__)

# Получатели подписываются: views_changed.connect(handler)
views_changed = signals.signal('views-changed')


def views_for_submission(hackathon_id, submission_id):
    """
    Возвращает два логических представления, которые меняются вместе с отзывом:
    страницу работы и список работ в панели судейства.
    """
    return [
        f'/hackathons/{hackathon_id}/submissions/{submission_id}',
        f'/hackathons/{hackathon_id}/dashboard/submissions',
    ]


def notify_views_changed(paths, sender=None):
    """Рассылает сигнал без ожидания: ошибка получателя не отменяет изменение."""
    if not paths:
        return
    for receiver in views_changed.receivers_for(sender):
        try:
            receiver(sender, paths=list(paths))
        except Exception:
            logger.warning("View invalidation receiver %r failed for %s", receiver, paths, exc_info=True)
