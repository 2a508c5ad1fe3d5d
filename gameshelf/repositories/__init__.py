"""
Repositories package

Each repository encapsulates database operations for a model:
- game_repository.py
- genre_repository.py / platform_repository.py
- gamegenre_repository.py / gameplatform_repository.py

Usage:
    from gameshelf.repositories.game_repository import GameRepository
    games = GameRepository.get_all()
"""
