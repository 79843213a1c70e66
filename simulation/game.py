"""
simulation/game.py

Жадная партия: на каждом ходу новое смещение и первый найденный прыжок.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from core.board import Board
from core.moves import Move, find_move, apply_move
from core.random_source import OffsetSource
from core.utils import DEFAULT_BOARD_SIZE
from utils.error_handling import InvariantViolationError
from utils.logging import get_logger

MoveCallback = Callable[[Board, Move], None]


class GameStatus(Enum):
    PLAYING = 'playing'
    FINISHED = 'finished'


@dataclass
class SimulationResult:
    """Итог одной партии."""
    seed: Optional[int]
    size: int
    score: int
    initial_pegs: int
    moves: List[Move] = field(default_factory=list)

    @property
    def is_win(self) -> bool:
        return self.score == 1

    def to_dict(self) -> dict:
        return {
            'seed': self.seed,
            'size': self.size,
            'score': self.score,
            'initial_pegs': self.initial_pegs,
            'moves': [list(m.as_tuple()) for m in self.moves],
        }


class Game:
    """
    Одна партия на собственной доске.

    Состояния: PLAYING → FINISHED. Переход происходит, когда
    find_move больше не находит ходов.
    """

    def __init__(self, seed: Optional[int] = None, size: int = DEFAULT_BOARD_SIZE,
                 source: Optional[OffsetSource] = None):
        """
        Args:
            seed: seed партии; нельзя передавать вместе с source
            size: размер доски
            source: готовый источник смещений (seed берётся из него)
        """
        if seed is not None and source is not None:
            raise ValueError("Передайте либо seed, либо source, но не оба")
        self.board = Board.make(size)
        self.source = source if source is not None else OffsetSource(seed)
        self.seed = self.source.seed
        self.status = GameStatus.PLAYING
        self.history: List[Move] = []
        self.initial_pegs = self.board.peg_count()
        self.pegs = self.initial_pegs

    @property
    def finished(self) -> bool:
        return self.status == GameStatus.FINISHED

    def step(self) -> Optional[Move]:
        """
        Делает один ход.

        Returns:
            Применённый ход или None, если партия закончилась
        """
        if self.finished:
            return None

        move = find_move(self.board, self.source.next_offset())
        if move is None:
            self.status = GameStatus.FINISHED
            return None

        apply_move(self.board, move)
        self.history.append(move)
        self.pegs -= 1
        return move

    def run(self, on_move: Optional[MoveCallback] = None) -> SimulationResult:
        """Играет до конца и возвращает итог."""
        while True:
            move = self.step()
            if move is None:
                break
            if on_move is not None:
                on_move(self.board, move)

        if self.pegs != self.board.peg_count():
            raise InvariantViolationError(
                f"Счётчик колышков {self.pegs} расходится с доской ({self.board.peg_count()})"
            )

        get_logger().debug(
            f"seed={self.seed}: {self.pegs} pegs left after {len(self.history)} moves"
        )
        return self.result()

    def result(self) -> SimulationResult:
        return SimulationResult(
            seed=self.seed,
            size=self.board.size,
            score=self.pegs,
            initial_pegs=self.initial_pegs,
            moves=list(self.history),
        )


def run_simulation(seed: Optional[int], size: int = DEFAULT_BOARD_SIZE,
                   on_move: Optional[MoveCallback] = None) -> SimulationResult:
    """
    Играет партию от seed до конца.

    Одинаковый seed даёт одинаковую историю ходов и счёт.
    """
    return Game(seed, size).run(on_move)
