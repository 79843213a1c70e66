"""
utils - Логирование, ошибки и мониторинг
"""

from .logging import get_logger, setup_file_logging
from .error_handling import (
    SimulationError, InvalidBoardError, InvalidSeedError,
    InvariantViolationError, validate_board_size, parse_seed
)
from .monitoring import PerformanceMonitor

__all__ = [
    'get_logger', 'setup_file_logging',
    'SimulationError', 'InvalidBoardError', 'InvalidSeedError',
    'InvariantViolationError', 'validate_board_size', 'parse_seed',
    'PerformanceMonitor',
]
