import pytest

import store
from errors import Unauthorized
from guard import (
    require_identity,
    is_judge,
    require_judge,
    require_organizer,
    can_view_leaderboard,
)


def test_require_identity_accepts_matching_user():
    require_identity(7, 7)


@pytest.mark.parametrize('authenticated, acting', [
    (None, 7),
    (None, None),
    (7, 8),
    (7, None),
])
def test_require_identity_rejects(authenticated, acting):
    with pytest.raises(Unauthorized):
        require_identity(authenticated, acting)


def test_is_judge_uses_registry(hackathon_data):
    h = hackathon_data['hackathon_id']
    assert is_judge(hackathon_data['u1'], h) is True
    # invited but not yet accepted still counts as registered
    assert is_judge(hackathon_data['u2'], h) is True
    assert is_judge(hackathon_data['outsider'], h) is False
    assert is_judge(hackathon_data['u1'], h + 1) is False
    assert is_judge(None, h) is False


def test_require_judge(hackathon_data):
    h = hackathon_data['hackathon_id']
    require_judge(hackathon_data['u1'], h)
    with pytest.raises(Unauthorized):
        require_judge(hackathon_data['outsider'], h)
    with pytest.raises(Unauthorized):
        require_judge(None, h)


def test_require_organizer(hackathon_data):
    hackathon = store.get_hackathon(hackathon_data['hackathon_id'])
    require_organizer(hackathon_data['organizer_id'], hackathon)
    with pytest.raises(Unauthorized):
        require_organizer(hackathon_data['u1'], hackathon)
    with pytest.raises(Unauthorized):
        require_organizer(None, hackathon)


def test_leaderboard_visibility(hackathon_data):
    hackathon = store.get_hackathon(hackathon_data['hackathon_id'])
    assert can_view_leaderboard(hackathon_data['organizer_id'], hackathon) is True
    assert can_view_leaderboard(hackathon_data['u1'], hackathon) is False

    store.set_leaderboard_published(hackathon, True)
    assert can_view_leaderboard(hackathon_data['u1'], hackathon) is True
    assert can_view_leaderboard(None, hackathon) is True
