"""
web/app.py

Flask JSON API для симулятора.
"""

import os
import sys
from flask import Flask, request, jsonify

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.board import Board
from core.utils import DEFAULT_BOARD_SIZE
from simulation import Game
from peg_io.visualizer import format_history
from utils.error_handling import SimulationError, InvalidBoardError, parse_seed, validate_board_size
from utils.logging import get_logger

app = Flask(__name__)


def _parse_size(value):
    """Размер доски из query/JSON; None — размер по умолчанию."""
    if value is None:
        return DEFAULT_BOARD_SIZE
    if isinstance(value, (bool, float)):
        raise InvalidBoardError(f"Размер доски должен быть целым числом, получено {value!r}")
    try:
        size = int(value)
    except (TypeError, ValueError):
        raise InvalidBoardError(f"Некорректный размер доски: {value!r}")
    return validate_board_size(size)


def _simulate(seed, size):
    game = Game(seed, size)
    result = game.run()
    return {
        'success': True,
        'seed': result.seed,
        'size': result.size,
        'score': result.score,
        'initial_pegs': result.initial_pegs,
        'moves': [list(m.as_tuple()) for m in result.moves],
        'history': format_history(result.moves),
        'board': game.board.to_lines(),
    }


@app.errorhandler(SimulationError)
def handle_simulation_error(error):
    get_logger().warning(f"{request.path}: {error}")
    return jsonify({'success': False, 'error': str(error)}), 400


@app.route('/api/board', methods=['GET'])
def board():
    """Стартовая позиция."""
    size = _parse_size(request.args.get('size'))
    start = Board.make(size)
    return jsonify({
        'success': True,
        'size': size,
        'board': start.to_lines(),
        'pegs': start.peg_count(),
    })


@app.route('/api/simulate/<int:seed>', methods=['GET'])
def simulate_seed(seed):
    size = _parse_size(request.args.get('size'))
    return jsonify(_simulate(seed, size))


@app.route('/api/simulate', methods=['POST'])
def simulate():
    """
    Партия по seed.

    JSON: {"seed": 42, "size": 9}
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'seed' not in data:
        return jsonify({'success': False, 'error': 'Не указан seed'}), 400

    seed = parse_seed(data['seed'])
    size = _parse_size(data.get('size'))
    return jsonify(_simulate(seed, size))


if __name__ == '__main__':
    app.run(debug=True, port=5000)
