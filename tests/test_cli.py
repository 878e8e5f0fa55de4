from models import Hackathon, Review, User
from ranking import compute_leaderboard
from seed_data import seed_demo_command


def test_seed_demo_command(app):
    runner = app.test_cli_runner()

    result = runner.invoke(seed_demo_command)

    assert result.exit_code == 0, result.output
    hackathon = Hackathon.query.one()
    assert User.query.count() == 6
    assert Review.query.count() == 2

    entries = compute_leaderboard(hackathon.id)
    assert [(e['team_name'], e['average_score'], e['leader']['name']) for e in entries] == [
        ('Team A', 85.0, 'Alice Adams'),
        ('Team B', 0, 'Carol Clark'),
    ]


def test_seed_demo_is_repeatable(app):
    runner = app.test_cli_runner()
    runner.invoke(seed_demo_command)
    result = runner.invoke(seed_demo_command)

    assert result.exit_code == 0, result.output
    assert Hackathon.query.count() == 1
