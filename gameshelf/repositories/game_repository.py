"""
Repository for Game database operations
"""

from sqlalchemy.orm import selectinload
from gameshelf.db import db
from gameshelf.models.game import Game


class GameRepository:
    """Repository for Game database operations"""

    @staticmethod
    def get_all():
        """Get all games with genres and platforms, best rated first (unrated last)"""
        return (
            Game.query.options(selectinload(Game.genres), selectinload(Game.platforms))
            .order_by(Game.rating.is_(None), Game.rating.desc(), Game.id)
            .all()
        )

    @staticmethod
    def get_by_id(id):
        """Get Game by primary key ID"""
        return db.session.get(Game, id)

    @staticmethod
    def get_by_igdb_id(igdb_id):
        """Get Game by its IGDB identifier"""
        return Game.query.filter_by(igdb_id=igdb_id).first()

    @staticmethod
    def delete(id):
        """Delete Game record, join rows go with it"""
        item = db.session.get(Game, id)
        if not item:
            return False

        db.session.delete(item)
        db.session.commit()
        return True

    @staticmethod
    def count():
        """Count total Game records"""
        return Game.query.count()
