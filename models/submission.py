# models/submission.py

from extensions import db
from datetime import datetime

class Submission(db.Model):
    __tablename__ = 'submissions'

    id = db.Column(db.Integer, primary_key=True)
    team_id = db.Column(db.Integer, db.ForeignKey('teams.id', ondelete='CASCADE'), nullable=False)
    track_id = db.Column(db.Integer, db.ForeignKey('tracks.id', ondelete='SET NULL'), nullable=True)
    project_name = db.Column(db.String, nullable=False)
    description = db.Column(db.Text, nullable=False, default='')
    repo_url = db.Column(db.String, nullable=True)
    demo_url = db.Column(db.String, nullable=True)
    submitted_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Свежие отзывы первыми
    reviews = db.relationship(
        'Review',
        backref='submission',
        order_by='[Review.created_at.desc(), Review.id.desc()]',
        cascade="all, delete-orphan"
    )

    @property
    def hackathon_id(self):
        return self.team.hackathon_id if self.team else None

    def to_dict(self):
        return {
            'id': self.id,
            'team_id': self.team_id,
            'track_id': self.track_id,
            'project_name': self.project_name,
            'description': self.description,
            'repo_url': self.repo_url,
            'demo_url': self.demo_url,
        }
