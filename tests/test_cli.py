"""
tests/test_cli.py

Тесты CLI: команды simulate и find.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import random
from functools import partial

import main as main_module
from core.random_source import draw_seed
from peg_io import cache as cache_module
from peg_io.cache import load_seeds, save_seed
from simulation.game import run_simulation
from simulation.search import SeedSearcher


def test_simulate_quiet_prints_report(capsys):
    code = main_module.main(['simulate', '42', '--quiet'])
    out = capsys.readouterr().out

    expected = run_simulation(42)
    assert code == 0
    assert "Using seed 42." in out
    assert f"Ended with {expected.score} pegs remaining. Took {len(expected.moves)} moves:" in out


def test_simulate_replay_prints_frames(capsys):
    code = main_module.main(['simulate', '7', '--delay', '0'])
    out = capsys.readouterr().out

    expected = run_simulation(7)
    assert code == 0
    # Стартовая позиция и по кадру на каждый ход
    assert out.count("\033[2J\033[H") == len(expected.moves) + 1
    assert "Using seed 7." in out


def test_simulate_zero_seed_picks_random(capsys):
    code = main_module.main(['simulate', '0', '-q'])
    out = capsys.readouterr().out

    assert code == 0
    assert "Using seed 0." not in out
    assert "Using seed " in out


def test_simulate_bad_seed(capsys):
    code = main_module.main(['simulate', 'abc', '-q'])
    err = capsys.readouterr().err

    assert code == 1
    assert "seed" in err


def test_even_size_rejected(capsys):
    code = main_module.main(['--size', '4', 'simulate', '1', '-q'])
    assert code == 1
    assert "нечётным" in capsys.readouterr().err


def test_find_reports_batches_without_win(capsys, monkeypatch):
    """Без победы find печатает отчёты по пачкам и завершается с кодом 1."""
    monkeypatch.setattr(main_module, "SeedSearcher", partial(SeedSearcher, target_score=0))

    code = main_module.main(['find', '--max-runs', '4', '--granularity', '2', '--master-seed', '1'])
    out = capsys.readouterr().out

    # Строки лога начинаются с даты, отчёты CLI — с текста
    reports = [line for line in out.splitlines() if line.startswith("best score in 2 runs is")]
    assert code == 1
    assert len(reports) == 2
    assert "* * * winning seed is" not in out


def test_find_reports_winning_seed_and_saves(capsys, monkeypatch, tmp_path):
    seed = draw_seed(random.Random(9))
    target = run_simulation(seed).score
    monkeypatch.setattr(main_module, "SeedSearcher", partial(SeedSearcher, target_score=target))
    monkeypatch.setattr(cache_module, "CACHE_FILE", str(tmp_path / "seeds.json"), raising=True)

    code = main_module.main(['find', '--master-seed', '9', '--max-runs', '3', '--save'])
    out = capsys.readouterr().out

    assert code == 0
    assert f"* * * winning seed is: {seed}" in out
    assert load_seeds()['9'][0]['seed'] == seed


def test_find_prints_search_summary(capsys, monkeypatch):
    monkeypatch.setattr(main_module, "SeedSearcher", partial(SeedSearcher, target_score=0))

    main_module.main(['find', '--max-runs', '4', '--granularity', '2', '--master-seed', '1'])
    out = capsys.readouterr().out

    summary = [line for line in out.splitlines() if line.startswith("4 runs in ")]
    assert len(summary) == 1
    assert "runs/s" in summary[0]
    assert "2 batches" in summary[0]


def test_simulate_cached_replays_best_seed(capsys, monkeypatch, tmp_path):
    monkeypatch.setattr(cache_module, "CACHE_FILE", str(tmp_path / "seeds.json"), raising=True)
    save_seed(run_simulation(42))

    code = main_module.main(['simulate', '--cached', '-q'])
    out = capsys.readouterr().out

    assert code == 0
    assert "Using seed 42." in out


def test_simulate_cached_without_entry(capsys, monkeypatch, tmp_path):
    monkeypatch.setattr(cache_module, "CACHE_FILE", str(tmp_path / "seeds.json"), raising=True)

    code = main_module.main(['simulate', '--cached', '-q'])
    captured = capsys.readouterr()

    assert code == 1
    assert "Using seed" not in captured.out
    assert "кэше" in captured.err
