# models/team.py

from extensions import db
from datetime import datetime

class Team(db.Model):
    __tablename__ = 'teams'
    id = db.Column(db.Integer, primary_key=True)
    hackathon_id = db.Column(db.Integer, db.ForeignKey('hackathons.id', ondelete='CASCADE'), nullable=False)
    name = db.Column(db.String, nullable=False)

    # Порядок участников важен: лидер определяется первым совпадением
    members = db.relationship(
        'TeamMember',
        backref='team',
        order_by='TeamMember.id',
        cascade="all, delete-orphan"
    )
    submissions = db.relationship('Submission', backref='team', lazy=True, cascade="all, delete-orphan")


class TeamMember(db.Model):
    __tablename__ = 'team_members'
    id = db.Column(db.Integer, primary_key=True)
    team_id = db.Column(db.Integer, db.ForeignKey('teams.id', ondelete='CASCADE'), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    # 'leader', 'owner' или любая другая роль
    role = db.Column(db.String(50), nullable=False, default='member')
    joined_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.UniqueConstraint('team_id', 'user_id', name='unique_team_member'),
    )
