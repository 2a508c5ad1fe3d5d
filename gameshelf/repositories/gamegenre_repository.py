"""
Repository for GameGenre database operations
"""

from gameshelf.models.gamegenre import GameGenre


class GameGenreRepository:
    """Repository for GameGenre database operations"""

    @staticmethod
    def count_by_game_id(game_id):
        """Count genre links of a game"""
        return GameGenre.query.filter_by(game_id=game_id).count()

    @staticmethod
    def count():
        """Count total GameGenre records"""
        return GameGenre.query.count()
