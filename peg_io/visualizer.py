"""
peg_io/visualizer.py

Визуализация доски, ходов и итогов партии.
"""

from typing import Iterable, List, Optional

from core.board import Board
from core.moves import Move

CLEAR_SCREEN = "\033[2J\033[H"


def display_board(board: Board) -> str:
    """
    Текстовое представление доски: ' ' вне креста, '.' дырка, '@' колышек.

    Args:
        board: доска

    Returns:
        Строка для вывода (по строке на ряд)
    """
    return board.to_string()


def format_move(move: Move) -> str:
    """Ход в виде "(r, c) ~> (r, c)"."""
    return str(move)


def format_history(moves: Iterable[Move]) -> str:
    """Ходы через " ; "."""
    return " ; ".join(format_move(m) for m in moves)


def format_report(result) -> str:
    """
    Итог партии для вывода пользователю.

    Args:
        result: SimulationResult

    Returns:
        Форматированная строка
    """
    lines = [
        f"Using seed {result.seed}.",
        f"Ended with {result.score} pegs remaining. Took {len(result.moves)} moves:",
        format_history(result.moves),
    ]
    return "\n".join(lines)


def format_frame(board: Board, move: Optional[Move] = None) -> str:
    """Кадр для покадрового воспроизведения партии."""
    lines: List[str] = [CLEAR_SCREEN + display_board(board).rstrip('\n')]
    if move is not None:
        lines.append(f"last move: {format_move(move)}")
    return "\n".join(lines)


def format_search_summary(summary: dict) -> str:
    """Сводка поиска из PerformanceMonitor.summary()."""
    line = (
        f"{summary['simulations']} runs in {summary['elapsed']:.2f}s "
        f"({summary['rate']:.0f} runs/s)"
    )
    if summary['batches']:
        line += f", {summary['batches']} batches, {summary['batch_average']:.2f}s per batch"
    return line
