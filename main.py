#!/usr/bin/env python3
"""
main.py

Точка входа симулятора.

Использование:
    python main.py simulate 12345          # воспроизвести партию по seed
    python main.py simulate                # случайный seed
    python main.py simulate --cached       # лучший seed из кэша
    python main.py find                    # искать seed с одним колышком
    python main.py find --workers 8        # многопроцессный поиск
"""

import sys
import time
import random
import logging
import argparse

from core.utils import DEFAULT_BOARD_SIZE
from core.random_source import draw_seed
from peg_io import format_report, format_frame, format_search_summary, save_seed, get_cached_seed
from simulation import Game, SeedSearcher, DEFAULT_GRANULARITY, default_workers
from utils.error_handling import SimulationError, parse_seed, validate_board_size
from utils.logging import get_logger, setup_file_logging


def simulate(seed: int, size: int, delay: float, quiet: bool) -> int:
    """Играет одну партию и печатает её покадрово."""
    if seed == 0:
        seed = draw_seed(random.Random())

    game = Game(seed, size)

    def show(board, move):
        if delay > 0:
            time.sleep(delay)
        print(format_frame(board, move))

    if not quiet:
        print(format_frame(game.board))
    result = game.run(on_move=None if quiet else show)

    print(format_report(result))
    return 0


def simulate_cached(size: int, delay: float, quiet: bool) -> int:
    """Воспроизводит лучший сохранённый seed для размера доски."""
    seed = get_cached_seed(size)
    if seed is None:
        print(f"❌ В кэше нет seed для доски {size}x{size}", file=sys.stderr)
        return 1
    return simulate(seed, size, delay, quiet)


def find(args) -> int:
    """Ищет seed, после которого остаётся один колышек."""
    def report(stats):
        print(stats)

    searcher = SeedSearcher(
        size=args.size,
        granularity=args.granularity,
        master_seed=args.master_seed,
        workers=args.workers or default_workers(),
        max_runs=args.max_runs,
        on_report=report,
    )
    result = searcher.search()
    print(format_search_summary(searcher.monitor.summary()))

    if result is None:
        print(f"❌ Выигрышный seed не найден за {searcher.stats.runs} партий")
        return 1

    print(f"* * * winning seed is: {result.seed}")
    if args.save:
        save_seed(result)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Greedy peg solitaire simulator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py simulate 42           # партия по seed 42
  python main.py simulate 0            # случайный seed
  python main.py find --granularity 1000
        """
    )
    parser.add_argument('--size', type=int, default=DEFAULT_BOARD_SIZE,
                        help=f'Сторона доски, нечётная (default: {DEFAULT_BOARD_SIZE})')
    parser.add_argument('-v', '--verbose', action='store_true', help='Отладочный лог')
    parser.add_argument('--log-file', help='Дублировать лог в файл')

    commands = parser.add_subparsers(dest='command', required=True)

    sim = commands.add_parser('simulate', help='Воспроизвести партию по seed')
    sim.add_argument('seed', nargs='?', default='0',
                     help='Seed партии; 0 — случайный')
    sim.add_argument('--delay', type=float, default=0.5,
                     help='Пауза между кадрами в секундах (default: 0.5)')
    sim.add_argument('--quiet', '-q', action='store_true',
                     help='Печатать только итог')
    sim.add_argument('--cached', action='store_true',
                     help='Воспроизвести лучший seed из кэша (seed не указывается)')

    fnd = commands.add_parser('find', help='Искать seed с одним колышком')
    fnd.add_argument('--granularity', type=int, default=DEFAULT_GRANULARITY,
                     help='Партий в одном отчёте')
    fnd.add_argument('--workers', '-w', type=int, default=1,
                     help='Количество процессов; 0 — по числу CPU (default: 1)')
    fnd.add_argument('--max-runs', type=int, help='Остановиться после N партий')
    fnd.add_argument('--master-seed', type=int, help='Seed генератора кандидатов')
    fnd.add_argument('--save', action='store_true', help='Сохранить найденный seed в кэш')

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger()
    logger.set_level(logging.DEBUG if args.verbose else logging.INFO)
    if args.log_file:
        setup_file_logging(args.log_file)

    try:
        size = validate_board_size(args.size)
        if args.command == 'simulate':
            if args.cached:
                return simulate_cached(size, args.delay, args.quiet)
            return simulate(parse_seed(args.seed), size, args.delay, args.quiet)
        return find(args)
    except (SimulationError, ValueError) as e:
        print(f"❌ Ошибка: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
