from extensions import db
from datetime import datetime

class Judge(db.Model):
    __tablename__ = 'judges'
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    hackathon_id = db.Column(db.Integer, db.ForeignKey('hackathons.id', ondelete='CASCADE'), nullable=False)
    is_accepted = db.Column(db.Boolean, nullable=False, default=False)
    invited_at = db.Column(db.DateTime, default=datetime.utcnow)

    user = db.relationship('User')

    __table_args__ = (
        db.UniqueConstraint('user_id', 'hackathon_id', name='unique_judge_hackathon'),
    )
