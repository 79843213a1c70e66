"""
core/utils.py

Общие константы и типы для симулятора крестовой доски.
"""

from enum import Enum
from typing import List, Tuple

Coordinate = Tuple[int, int]


class CellState(Enum):
    """Состояние клетки доски."""
    UNUSABLE = 0    # Вне креста
    EMPTY = 1       # Дырка
    OCCUPIED = 2    # Колышек


# Порядок направлений фиксирован: от него зависит воспроизводимость партии по seed
DIRECTIONS: List[Tuple[int, int]] = [(0, 1), (1, 0), (-1, 0), (0, -1)]

# Символы для отображения
UNUSABLE_CHAR = ' '
EMPTY_CHAR = '.'
OCCUPIED_CHAR = '@'

CELL_CHARS = {
    CellState.UNUSABLE: UNUSABLE_CHAR,
    CellState.EMPTY: EMPTY_CHAR,
    CellState.OCCUPIED: OCCUPIED_CHAR,
}
CHAR_CELLS = {char: state for state, char in CELL_CHARS.items()}

DEFAULT_BOARD_SIZE = 9
MIN_BOARD_SIZE = 5
# Поиск хода обходит size^2 клеток на каждом из ~size^2 ходов
MAX_BOARD_SIZE = 99

# Вырезы по углам: 4 клетки в крайних рядах и 2 в соседних, для каждой стороны
CORNER_CELLS = 12


def is_valid_position(r: int, c: int, size: int) -> bool:
    """Проверяет, находится ли позиция в пределах доски."""
    return 0 <= r < size and 0 <= c < size


def midpoint(a: Coordinate, b: Coordinate) -> Coordinate:
    """Середина отрезка между двумя клетками (покомпонентно)."""
    return (a[0] + b[0]) // 2, (a[1] + b[1]) // 2
