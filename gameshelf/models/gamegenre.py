"""
Model: GameGenre
"""

from gameshelf.db import db


class GameGenre(db.Model):
    game_id = db.Column(db.Integer, db.ForeignKey("game.id", ondelete="CASCADE"), primary_key=True)
    genre_id = db.Column(db.Integer, db.ForeignKey("genre.id", ondelete="CASCADE"), primary_key=True)
