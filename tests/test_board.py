"""
tests/test_board.py

Тесты построения доски, доступа к клеткам и подсчёта колышков.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import Board, make_board, get_cell, score
from core.utils import CellState, CORNER_CELLS, MAX_BOARD_SIZE
from utils.error_handling import InvalidBoardError


STANDARD_START = (
    "  @@@@@  \n"
    " @@@@@@@ \n"
    "@@@@@@@@@\n"
    "@@@@@@@@@\n"
    "@@@@.@@@@\n"
    "@@@@@@@@@\n"
    "@@@@@@@@@\n"
    " @@@@@@@ \n"
    "  @@@@@  \n"
)


# =====================================================
# Построение
# =====================================================

def test_make_board_standard_layout():
    """Доска 9x9: крест с пустым центром."""
    board = make_board(9)

    assert board.size == 9
    assert board.to_string() == STANDARD_START
    assert board.get(4, 4) == CellState.EMPTY


def test_make_board_initial_peg_count():
    """На стартовой доске 9x9 68 колышков: 81 клетка минус 12 вырезов минус центр."""
    board = make_board(9)
    assert score(board) == 68
    assert score(board) == 9 * 9 - 13


@pytest.mark.parametrize("size", [5, 7, 9, 11, 13])
def test_make_board_counts_for_odd_sizes(size):
    """Для любого нечётного размера: 12 вырезов, одна дырка в центре, остальное — колышки."""
    board = make_board(size)
    center = size // 2

    assert board.count(CellState.UNUSABLE) == CORNER_CELLS
    assert board.count(CellState.EMPTY) == 1
    assert board.get(center, center) == CellState.EMPTY
    assert board.peg_count() == size * size - CORNER_CELLS - 1


@pytest.mark.parametrize("size", [5, 9, 11])
def test_make_board_corner_cutouts(size):
    """Вырезы стоят ровно в углах."""
    board = make_board(size)
    last = size - 1
    expected = set()
    for r in (0, last):
        expected |= {(r, 0), (r, 1), (r, last - 1), (r, last)}
    for r in (1, last - 1):
        expected |= {(r, 0), (r, last)}

    unusable = {coord for coord in board.coords() if board.get(*coord) == CellState.UNUSABLE}
    assert unusable == expected


@pytest.mark.parametrize("size", [4, 8, 10, 0, -2])
def test_make_board_rejects_even_size(size):
    """Чётный размер отклоняется до создания доски."""
    with pytest.raises(InvalidBoardError):
        make_board(size)


@pytest.mark.parametrize("size", [1, 3, -1])
def test_make_board_rejects_too_small(size):
    with pytest.raises(InvalidBoardError):
        make_board(size)


def test_make_board_size_upper_bound():
    assert make_board(MAX_BOARD_SIZE).size == MAX_BOARD_SIZE
    with pytest.raises(InvalidBoardError):
        make_board(MAX_BOARD_SIZE + 2)


def test_make_board_rejects_non_integer():
    with pytest.raises(InvalidBoardError):
        make_board("9")
    with pytest.raises(InvalidBoardError):
        make_board(9.0)


def test_invalid_board_error_is_value_error():
    """Ошибка конфигурации ловится как ValueError."""
    with pytest.raises(ValueError):
        make_board(4)


# =====================================================
# Доступ к клеткам
# =====================================================

def test_get_cell_out_of_range_is_none():
    """Вне [0, size) get_cell возвращает None, а не исключение."""
    board = make_board(9)
    for r in range(-3, 12):
        for c in range(-3, 12):
            inside = 0 <= r < 9 and 0 <= c < 9
            cell = get_cell(board, r, c)
            if inside:
                assert cell == board.cells[r][c]
            else:
                assert cell is None, f"({r}, {c}) должна быть вне доски"


def test_get_cell_large_coordinates():
    board = make_board(9)
    assert get_cell(board, 10 ** 12, 0) is None
    assert get_cell(board, 0, -(10 ** 12)) is None


# =====================================================
# Текстовый формат
# =====================================================

def test_from_string_roundtrip():
    board = make_board(7)
    parsed = Board.from_string(board.to_string())

    assert parsed == board
    assert parsed is not board


def test_from_string_pads_short_lines():
    """Короткие строки дополняются пробелами (вырезанные клетки)."""
    board = Board.from_string("@@.\n@\n\n")
    assert board.size == 3
    assert board.get(1, 1) == CellState.UNUSABLE
    assert board.get(2, 0) == CellState.UNUSABLE
    assert board.get(0, 2) == CellState.EMPTY


def test_from_string_rejects_unknown_char():
    with pytest.raises(InvalidBoardError):
        Board.from_string("@@x\n...\n...\n")


def test_from_string_rejects_long_line():
    with pytest.raises(InvalidBoardError):
        Board.from_string("@@@@\n...\n...\n")


def test_copy_is_independent():
    board = make_board(9)
    clone = board.copy()
    clone.set((0, 2), CellState.EMPTY)

    assert board.get(0, 2) == CellState.OCCUPIED
    assert clone != board


def test_score_is_pure():
    board = make_board(9)
    before = board.to_string()
    assert score(board) == score(board)
    assert board.to_string() == before
