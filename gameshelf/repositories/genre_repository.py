"""
Repository for Genre database operations
"""

from sqlalchemy.exc import SQLAlchemyError
from gameshelf.db import db
from gameshelf.models.genre import Genre


class GenreRepository:
    """Repository for Genre database operations"""

    @staticmethod
    def get_all():
        """Get all Genre records sorted by name"""
        return Genre.query.order_by(Genre.name).all()

    @staticmethod
    def get_or_create(name):
        """Get a Genre by name, adding it to the session when missing (no commit)"""
        item = Genre.query.filter_by(name=name).first()
        if not item:
            item = Genre(name=name)
            db.session.add(item)
            db.session.flush()
        return item

    @staticmethod
    def upsert(name):
        """Create the Genre if it does not exist yet and commit"""
        try:
            item = GenreRepository.get_or_create(name)
            db.session.commit()
            return item
        except SQLAlchemyError as e:
            db.session.rollback()
            raise e

    @staticmethod
    def count():
        """Count total Genre records"""
        return Genre.query.count()
