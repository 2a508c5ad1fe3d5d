"""
Repository for Platform database operations
"""

from sqlalchemy.exc import SQLAlchemyError
from gameshelf.db import db
from gameshelf.models.platform import Platform


class PlatformRepository:
    """Repository for Platform database operations"""

    @staticmethod
    def get_all():
        """Get all Platform records sorted by name"""
        return Platform.query.order_by(Platform.name).all()

    @staticmethod
    def get_or_create(name):
        """Get a Platform by name, adding it to the session when missing (no commit)"""
        item = Platform.query.filter_by(name=name).first()
        if not item:
            item = Platform(name=name)
            db.session.add(item)
            db.session.flush()
        return item

    @staticmethod
    def upsert(name):
        """Create the Platform if it does not exist yet and commit"""
        try:
            item = PlatformRepository.get_or_create(name)
            db.session.commit()
            return item
        except SQLAlchemyError as e:
            db.session.rollback()
            raise e

    @staticmethod
    def count():
        """Count total Platform records"""
        return Platform.query.count()
