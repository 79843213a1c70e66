"""
utils/monitoring.py

Счётчики и тайминги поиска seed.
"""

from typing import Dict, List, Any, Optional
from collections import defaultdict


class PerformanceMonitor:
    """
    Монитор производительности одного поиска.

    Хранит длительности операций (например, 'search_batch') и счётчики
    (например, 'simulations'); summary() сводит их в скорость поиска.
    """

    def __init__(self):
        self.metrics: Dict[str, List[float]] = defaultdict(list)
        self.counters: Dict[str, int] = defaultdict(int)

    def record_time(self, operation: str, elapsed: float):
        """
        Записывает время выполнения операции.

        Args:
            operation: имя операции
            elapsed: время в секундах
        """
        self.metrics[operation].append(elapsed)

    def increment_counter(self, counter: str, value: int = 1):
        self.counters[counter] += value

    def get_stats(self, operation: str) -> Dict[str, Any]:
        """Количество, сумма, среднее, минимум и максимум по операции."""
        times = self.metrics.get(operation, [])
        return {
            'count': len(times),
            'total': sum(times),
            'average': sum(times) / len(times) if times else 0.0,
            'min': min(times) if times else 0.0,
            'max': max(times) if times else 0.0,
        }

    def summary(self, counter: str = 'simulations', operation: str = 'search',
                batch_operation: str = 'search_batch') -> Dict[str, Any]:
        """
        Сводка поиска.

        Returns:
            {'simulations', 'elapsed', 'rate', 'batches', 'batch_average'};
            rate — партий в секунду (0, если время не записано)
        """
        total = self.counters.get(counter, 0)
        elapsed = self.get_stats(operation)['total']
        batches = self.get_stats(batch_operation)
        return {
            'simulations': total,
            'elapsed': elapsed,
            'rate': total / elapsed if elapsed > 0 else 0.0,
            'batches': batches['count'],
            'batch_average': batches['average'],
        }

    def reset(self):
        self.metrics.clear()
        self.counters.clear()
