# models/hackathon.py

from extensions import db

class Hackathon(db.Model):
    __tablename__ = 'hackathons'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String, nullable=False)
    organizer_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    leaderboard_published = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, server_default=db.func.current_timestamp())

    teams = db.relationship('Team', backref='hackathon', lazy=True, cascade="all, delete-orphan")
    tracks = db.relationship('Track', backref='hackathon', lazy=True, cascade="all, delete-orphan")
    judges = db.relationship('Judge', backref='hackathon', lazy=True, cascade="all, delete-orphan")
