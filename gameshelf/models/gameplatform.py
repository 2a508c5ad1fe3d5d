"""
Model: GamePlatform
"""

from gameshelf.db import db


class GamePlatform(db.Model):
    game_id = db.Column(db.Integer, db.ForeignKey("game.id", ondelete="CASCADE"), primary_key=True)
    platform_id = db.Column(db.Integer, db.ForeignKey("platform.id", ondelete="CASCADE"), primary_key=True)
