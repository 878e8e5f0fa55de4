from invalidation import views_changed, views_for_submission, notify_views_changed


def test_views_for_submission():
    assert views_for_submission(3, 11) == [
        '/hackathons/3/submissions/11',
        '/hackathons/3/dashboard/submissions',
    ]


def test_notify_sends_paths_to_receivers():
    received = []

    def receiver(sender, paths):
        received.append(paths)

    with views_changed.connected_to(receiver):
        notify_views_changed(['/a', '/b'])

    assert received == [['/a', '/b']]


def test_failing_receiver_does_not_propagate():
    received = []

    def broken(sender, paths):
        raise RuntimeError('cache is down')

    def healthy(sender, paths):
        received.append(paths)

    with views_changed.connected_to(broken), views_changed.connected_to(healthy):
        notify_views_changed(['/a'])

    assert received == [['/a']]


def test_nothing_sent_for_empty_paths():
    received = []

    def receiver(sender, paths):
        received.append(paths)

    with views_changed.connected_to(receiver):
        notify_views_changed([])

    assert received == []
