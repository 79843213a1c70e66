"""
simulation - Партии и поиск seed

Экспортирует:
- Game, run_simulation: одна жадная партия по seed
- SeedSearcher, find_winning_seed: поиск партии с одним колышком
"""

from .game import Game, GameStatus, SimulationResult, run_simulation
from .search import (
    SeedSearcher, SearchStats, find_winning_seed,
    DEFAULT_GRANULARITY, default_workers
)

__all__ = [
    'Game', 'GameStatus', 'SimulationResult', 'run_simulation',
    'SeedSearcher', 'SearchStats', 'find_winning_seed',
    'DEFAULT_GRANULARITY', 'default_workers',
]
