"""
Models package

One model per file:
- game.py
- genre.py / platform.py (tags)
- gamegenre.py / gameplatform.py (join tables)
"""

from .game import Game
from .genre import Genre
from .platform import Platform
from .gamegenre import GameGenre
from .gameplatform import GamePlatform

__all__ = [
    "Game",
    "Genre",
    "Platform",
    "GameGenre",
    "GamePlatform",
]
