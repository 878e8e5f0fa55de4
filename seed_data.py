# seed_data.py
# Демонстрационные данные: flask --app app seed-demo

import click
from flask.cli import with_appcontext
from extensions import db
from models import User, Hackathon, Track, Team, TeamMember, Submission, Judge, Review


def clear_data():
    # Идем в обратном порядке зависимостей
    db.session.query(Review).delete()
    db.session.query(Judge).delete()
    db.session.query(Submission).delete()
    db.session.query(TeamMember).delete()
    db.session.query(Team).delete()
    db.session.query(Track).delete()
    db.session.query(Hackathon).delete()
    db.session.query(User).delete()
    db.session.commit()


def seed_demo():
    organizer = User(code='000001', email='organizer@example.com', first_name='Olga', last_name='Orlova')
    alice = User(code='100001', email='alice@example.com', first_name='Alice', last_name='Adams')
    bob = User(code='100002', email='bob@example.com', first_name='Bob', last_name='Brown')
    carol = User(code='100003', email='carol@example.com', first_name='Carol', last_name='Clark')
    judge1 = User(code='200001', email='judge1@example.com', first_name='Jules', last_name='Verne')
    judge2 = User(code='200002', email='judge2@example.com', first_name='Jane', last_name='Doe')
    db.session.add_all([organizer, alice, bob, carol, judge1, judge2])
    db.session.flush()

    hackathon = Hackathon(name='Demo Hackathon', organizer_id=organizer.id)
    db.session.add(hackathon)
    db.session.flush()

    ai_track = Track(hackathon_id=hackathon.id, name='AI')
    web_track = Track(hackathon_id=hackathon.id, name='Web')
    db.session.add_all([ai_track, web_track])
    db.session.flush()

    team_a = Team(hackathon_id=hackathon.id, name='Team A')
    team_a.members.append(TeamMember(user_id=alice.id, role='leader'))
    team_a.members.append(TeamMember(user_id=bob.id, role='member'))
    team_b = Team(hackathon_id=hackathon.id, name='Team B')
    team_b.members.append(TeamMember(user_id=carol.id, role='owner'))
    db.session.add_all([team_a, team_b])
    db.session.flush()

    sub_a = Submission(team_id=team_a.id, track_id=ai_track.id, project_name='Smart Notes',
                       description='Notes that summarize themselves')
    sub_b = Submission(team_id=team_b.id, track_id=web_track.id, project_name='Queue Buddy',
                       description='Virtual queue for events')
    db.session.add_all([sub_a, sub_b])
    db.session.flush()

    db.session.add_all([
        Judge(user_id=judge1.id, hackathon_id=hackathon.id, is_accepted=True),
        Judge(user_id=judge2.id, hackathon_id=hackathon.id, is_accepted=True),
        Review(submission_id=sub_a.id, user_id=judge1.id, content='Great demo', rating=90),
        Review(submission_id=sub_a.id, user_id=judge2.id, content='Solid execution', rating=80),
    ])
    db.session.commit()
    return hackathon


@click.command('seed-demo')
@with_appcontext
def seed_demo_command():
    """Очищает базу и добавляет демонстрационный хакатон."""
    db.create_all()
    click.echo("Очистка старых данных...")
    clear_data()
    click.echo("Добавление тестовых данных...")
    try:
        hackathon = seed_demo()
    except Exception:
        db.session.rollback()
        raise
    click.echo(f"Готово: хакатон #{hackathon.id} '{hackathon.name}'.")
