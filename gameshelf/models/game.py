"""
Model: Game
A catalog entry, linked to genres and platforms through the join tables.
"""

from gameshelf.db import db
from gameshelf.utils import now_utc


class Game(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    igdb_id = db.Column(db.Integer, unique=True, nullable=False, index=True)  # ID no IGDB
    name = db.Column(db.String, nullable=False)
    rating = db.Column(db.Float)  # 0-100
    release_date = db.Column(db.DateTime)
    cover_url = db.Column(db.String)

    created_at = db.Column(db.DateTime, default=now_utc)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc)

    genres = db.relationship("Genre", secondary="game_genre", backref=db.backref("games", lazy="dynamic"))
    platforms = db.relationship("Platform", secondary="game_platform", backref=db.backref("games", lazy="dynamic"))

    __table_args__ = (db.Index("idx_game_rating", "rating"),)

    def __repr__(self):
        return f"<Game {self.id} {self.name!r}>"
