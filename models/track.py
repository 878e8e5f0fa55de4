from extensions import db

class Track(db.Model):
    __tablename__ = 'tracks'
    id = db.Column(db.Integer, primary_key=True)
    hackathon_id = db.Column(db.Integer, db.ForeignKey('hackathons.id', ondelete='CASCADE'), nullable=False)
    name = db.Column(db.String, nullable=False)

    __table_args__ = (
        db.UniqueConstraint('hackathon_id', 'name', name='unique_hackathon_track'),
    )
