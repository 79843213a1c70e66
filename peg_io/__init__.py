"""
peg_io - Ввод/вывод симулятора

Экспортирует:
- Визуализация доски, ходов и итогов
- Кэширование выигрышных seed
"""

from .visualizer import (
    display_board, format_move, format_history, format_report, format_frame,
    format_search_summary,
)
from .cache import load_seeds, save_seed, get_cached_seed

__all__ = [
    'display_board',
    'format_move',
    'format_history',
    'format_report',
    'format_frame',
    'format_search_summary',
    'load_seeds',
    'save_seed',
    'get_cached_seed',
]
