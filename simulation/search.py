"""
simulation/search.py

Перебор случайных seed в поисках партии, заканчивающейся одним колышком.
"""

import random
import time
import multiprocessing
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from core.random_source import draw_seed
from core.utils import DEFAULT_BOARD_SIZE
from utils.error_handling import validate_board_size
from utils.logging import get_logger
from utils.monitoring import PerformanceMonitor
from .game import SimulationResult, run_simulation

DEFAULT_GRANULARITY = 100000
# Сколько seed отдаётся одному процессу за раз
CHUNK_SIZE = 250
# Пачек в очереди на процесс за один раунд
CHUNKS_PER_WORKER = 4


def _score_seeds(args: Tuple[int, List[int]]) -> List[Tuple[int, int]]:
    """Играет партии для пачки seed (для параллельного запуска)."""
    size, seeds = args
    return [(seed, run_simulation(seed, size).score) for seed in seeds]


@dataclass
class SearchStats:
    """Статистика поиска. best_* относятся к текущей пачке из granularity партий."""
    runs: int = 0
    batch_runs: int = 0
    batches: int = 0
    best_score: Optional[int] = None
    best_seed: Optional[int] = None
    elapsed: float = 0.0

    def reset_batch(self) -> None:
        self.batch_runs = 0
        self.best_score = None
        self.best_seed = None

    def __str__(self) -> str:
        return (
            f"best score in {self.batch_runs} runs is {self.best_score} "
            f"for seed {self.best_seed}"
        )


ReportCallback = Callable[[SearchStats], None]


class SeedSearcher:
    """
    Последовательный или многопроцессный поиск выигрышного seed.

    Каждая партия независима: своя доска и свой OffsetSource,
    поэтому результат воспроизводится по одному seed.
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE,
                 granularity: int = DEFAULT_GRANULARITY,
                 master_seed: Optional[int] = None,
                 workers: int = 1,
                 max_runs: Optional[int] = None,
                 target_score: int = 1,
                 on_report: Optional[ReportCallback] = None):
        """
        Args:
            size: размер доски
            granularity: через сколько партий печатать отчёт и сбрасывать лучший результат
            master_seed: seed генератора кандидатов (None — от системного времени)
            workers: количество процессов (1 — без пула)
            max_runs: ограничение числа партий (None — до победы)
            target_score: сколько колышков считать победой
            on_report: вызывается после каждой пачки
        """
        if granularity < 1:
            raise ValueError(f"granularity должно быть положительным, получено {granularity}")
        if workers < 1:
            raise ValueError(f"workers должно быть положительным, получено {workers}")
        self.size = validate_board_size(size)
        self.granularity = granularity
        self.workers = workers
        self.max_runs = max_runs
        self.target_score = target_score
        self.on_report = on_report
        self.stats = SearchStats()
        self._rng = random.Random(master_seed)
        self._logger = get_logger()
        self.monitor = PerformanceMonitor()
        self._batch_start = 0.0

    def search(self) -> Optional[SimulationResult]:
        """
        Ищет seed с target_score колышками.

        Returns:
            Итог выигрышной партии или None, если исчерпан max_runs
        """
        self.stats = SearchStats()
        self.monitor.reset()
        start = time.time()
        self._batch_start = start
        self._logger.info(
            f"Searching for score {self.target_score} on {self.size}x{self.size} "
            f"(workers={self.workers}, granularity={self.granularity})"
        )

        try:
            if self.workers == 1:
                winner = self._search_sequential()
            else:
                winner = self._search_parallel()
        finally:
            self.stats.elapsed = time.time() - start
            self.monitor.record_time('search', self.stats.elapsed)

        if winner is None:
            self._logger.info(f"No winning seed in {self.stats.runs} runs")
            return None

        self._logger.info(f"Winning seed {winner.seed} after {self.stats.runs} runs")
        return winner

    def _remaining(self) -> Optional[int]:
        if self.max_runs is None:
            return None
        return self.max_runs - self.stats.runs

    def _search_sequential(self) -> Optional[SimulationResult]:
        while self._remaining() is None or self._remaining() > 0:
            result = run_simulation(draw_seed(self._rng), self.size)
            if self._record(result.seed, result.score):
                return result
        return None

    def _search_parallel(self) -> Optional[SimulationResult]:
        with ProcessPoolExecutor(max_workers=self.workers) as executor:
            while self._remaining() is None or self._remaining() > 0:
                total = self.workers * CHUNKS_PER_WORKER * CHUNK_SIZE
                if self._remaining() is not None:
                    total = min(total, self._remaining())
                seeds = [draw_seed(self._rng) for _ in range(total)]
                chunks = [seeds[i:i + CHUNK_SIZE] for i in range(0, total, CHUNK_SIZE)]

                # map сохраняет порядок: побеждает самый ранний seed, а не самый быстрый процесс
                for scored in executor.map(_score_seeds, [(self.size, chunk) for chunk in chunks]):
                    for seed, score in scored:
                        if self._record(seed, score):
                            # Ещё не начатые пачки не нужны
                            executor.shutdown(wait=True, cancel_futures=True)
                            return run_simulation(seed, self.size)
        return None

    def _record(self, seed: int, score: int) -> bool:
        """Учитывает партию; True, если она выигрышная."""
        stats = self.stats
        stats.runs += 1
        stats.batch_runs += 1
        self.monitor.increment_counter('simulations')

        if stats.best_score is None or score < stats.best_score:
            stats.best_score = score
            stats.best_seed = seed

        if score == self.target_score:
            return True

        if stats.batch_runs >= self.granularity:
            self._report()
        return False

    def _report(self) -> None:
        now = time.time()
        self.monitor.record_time('search_batch', now - self._batch_start)
        self._batch_start = now

        self.stats.batches += 1
        self._logger.info(str(self.stats))
        if self.on_report is not None:
            self.on_report(self.stats)
        self.stats.reset_batch()


def find_winning_seed(size: int = DEFAULT_BOARD_SIZE, workers: int = 1,
                      master_seed: Optional[int] = None,
                      max_runs: Optional[int] = None,
                      granularity: int = DEFAULT_GRANULARITY,
                      target_score: int = 1) -> Optional[SimulationResult]:
    """Ищет seed, после которого на доске остаётся target_score колышков (по умолчанию один)."""
    searcher = SeedSearcher(size=size, granularity=granularity, master_seed=master_seed,
                            workers=workers, max_runs=max_runs, target_score=target_score)
    return searcher.search()


def default_workers() -> int:
    return multiprocessing.cpu_count()
