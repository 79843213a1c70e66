"""
core/random_source.py

Явный источник псевдослучайных смещений для одной партии.
"""

import random
from typing import Optional, Tuple

# Диапазон значений как у rand() в glibc
RAND_MAX = 2 ** 31 - 1


class OffsetSource:
    """
    Детерминированная последовательность неотрицательных целых.

    Каждая партия владеет своим экземпляром; глобальное состояние
    модуля random не используется.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_int(self) -> int:
        """Следующее число из [0, RAND_MAX]."""
        return self._rng.randint(0, RAND_MAX)

    def next_offset(self) -> Tuple[int, int]:
        """Смещение (row, column) для очередного хода."""
        row = self.next_int()
        column = self.next_int()
        return row, column


def draw_seed(rng: random.Random) -> int:
    """Случайный seed из [1, RAND_MAX]; 0 зарезервирован под «выбрать случайно»."""
    return rng.randint(1, RAND_MAX)
