"""
core - Ядро симулятора

Доска, поиск и применение ходов, источник смещений.
"""

from .utils import (
    CellState, Coordinate, DIRECTIONS,
    DEFAULT_BOARD_SIZE, MIN_BOARD_SIZE, MAX_BOARD_SIZE, CORNER_CELLS
)
from .board import Board, make_board, get_cell, score
from .moves import Move, Offset, find_move, apply_move, is_legal_move
from .random_source import OffsetSource, RAND_MAX, draw_seed

__all__ = [
    'CellState', 'Coordinate', 'DIRECTIONS',
    'DEFAULT_BOARD_SIZE', 'MIN_BOARD_SIZE', 'MAX_BOARD_SIZE', 'CORNER_CELLS',
    'Board', 'make_board', 'get_cell', 'score',
    'Move', 'Offset', 'find_move', 'apply_move', 'is_legal_move',
    'OffsetSource', 'RAND_MAX', 'draw_seed',
]
