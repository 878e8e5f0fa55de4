import pytest

from app import create_app
from config import TestConfig
from extensions import db as _db
from models import User, Hackathon, Track, Team, TeamMember, Submission, Judge


@pytest.fixture
def app():
    """Create an app bound to a fresh in-memory database."""
    app = create_app(TestConfig)
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def hackathon_data(db):
    """Hackathon H with teams A and B, one submission each, and two judges."""
    organizer = User(code='000001', email='org@example.com', first_name='Olga', last_name='Org')
    u1 = User(code='200001', email='u1@example.com', first_name='Uma', last_name='One')
    u2 = User(code='200002', email='u2@example.com', first_name='Ugo', last_name='Two')
    alice = User(code='100001', email='alice@example.com', first_name='Alice', last_name='Adams',
                 image_url='https://img.example.com/alice.png')
    bob = User(code='100002', email='bob@example.com', first_name='Bob', last_name='Brown')
    outsider = User(code='300001', email='out@example.com', first_name='Otto', last_name='Side')
    db.session.add_all([organizer, u1, u2, alice, bob, outsider])
    db.session.flush()

    hackathon = Hackathon(name='H', organizer_id=organizer.id)
    db.session.add(hackathon)
    db.session.flush()

    track = Track(hackathon_id=hackathon.id, name='AI')
    db.session.add(track)
    db.session.flush()

    team_a = Team(hackathon_id=hackathon.id, name='A')
    team_a.members.append(TeamMember(user_id=bob.id, role='member'))
    team_a.members.append(TeamMember(user_id=alice.id, role='leader'))
    team_b = Team(hackathon_id=hackathon.id, name='B')
    db.session.add_all([team_a, team_b])
    db.session.flush()

    sub_a = Submission(team_id=team_a.id, track_id=track.id, project_name='Project A', description='a')
    sub_b = Submission(team_id=team_b.id, project_name='Project B', description='b')
    db.session.add_all([sub_a, sub_b])
    db.session.flush()

    db.session.add_all([
        Judge(user_id=u1.id, hackathon_id=hackathon.id, is_accepted=True),
        Judge(user_id=u2.id, hackathon_id=hackathon.id),
    ])
    db.session.commit()

    return {
        'hackathon_id': hackathon.id,
        'organizer_id': organizer.id,
        'track_id': track.id,
        'u1': u1.id,
        'u2': u2.id,
        'alice': alice.id,
        'outsider': outsider.id,
        'team_a': team_a.id,
        'team_b': team_b.id,
        'sub_a': sub_a.id,
        'sub_b': sub_b.id,
    }


@pytest.fixture
def login(client):
    """Put a trusted principal into the session, as the identity provider would."""
    def _login(user_id):
        with client.session_transaction() as sess:
            sess["user_id"] = user_id
    return _login
