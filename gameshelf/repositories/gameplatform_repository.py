"""
Repository for GamePlatform database operations
"""

from gameshelf.models.gameplatform import GamePlatform


class GamePlatformRepository:
    """Repository for GamePlatform database operations"""

    @staticmethod
    def count_by_game_id(game_id):
        """Count platform links of a game"""
        return GamePlatform.query.filter_by(game_id=game_id).count()

    @staticmethod
    def count():
        """Count total GamePlatform records"""
        return GamePlatform.query.count()
