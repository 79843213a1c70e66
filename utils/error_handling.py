"""
utils/error_handling.py

Исключения симулятора и валидация входных параметров.
"""


class SimulationError(Exception):
    """Базовое исключение симулятора."""
    pass


class InvalidBoardError(SimulationError, ValueError):
    """Невалидная конфигурация доски (размер, текстовое описание)."""
    pass


class InvalidSeedError(SimulationError, ValueError):
    """Seed не является неотрицательным целым."""
    pass


class InvariantViolationError(AssertionError):
    """
    Нарушение внутреннего инварианта (ошибка в коде, а не во входных данных).

    Не наследует SimulationError: CLI и web перехватывают только ошибки
    конфигурации, продолжать игру на испорченной доске нельзя.
    """
    pass


def validate_board_size(size) -> int:
    """
    Валидирует размер доски.

    Args:
        size: сторона квадрата

    Returns:
        size как int

    Raises:
        InvalidBoardError: если размер не целый, чётный или вне [MIN_BOARD_SIZE, MAX_BOARD_SIZE]
    """
    from core.utils import MIN_BOARD_SIZE, MAX_BOARD_SIZE

    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidBoardError(f"Размер доски должен быть целым числом, получено {size!r}")

    if size % 2 == 0:
        raise InvalidBoardError(f"Размер доски должен быть нечётным, получено {size}")

    if size < MIN_BOARD_SIZE:
        raise InvalidBoardError(
            f"Размер доски должен быть не меньше {MIN_BOARD_SIZE}, получено {size}"
        )

    if size > MAX_BOARD_SIZE:
        raise InvalidBoardError(
            f"Размер доски должен быть не больше {MAX_BOARD_SIZE}, получено {size}"
        )

    return size


def parse_seed(text: str) -> int:
    """
    Разбирает seed из строки.

    Raises:
        InvalidSeedError: если строка не является неотрицательным целым
    """
    if isinstance(text, (bool, float)):
        raise InvalidSeedError(f"Seed должен быть целым числом, получено {text!r}")
    try:
        seed = int(text)
    except (TypeError, ValueError):
        raise InvalidSeedError(f"Не удалось разобрать seed: {text!r}")
    if seed < 0:
        raise InvalidSeedError(f"Seed должен быть неотрицательным, получено {seed}")
    return seed
