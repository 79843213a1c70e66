"""
peg_io/cache.py

Хранение найденных выигрышных seed на диске.
"""

import json
import os
from typing import Dict, List, Optional

CACHE_FILE = "seeds_cache.json"


def load_seeds() -> Dict[str, List[dict]]:
    """Загружает все seed из кэша, сгруппированные по размеру доски."""
    if not os.path.exists(CACHE_FILE):
        return {}

    try:
        with open(CACHE_FILE, 'r') as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError):
        return {}
    return data if isinstance(data, dict) else {}


def save_seeds(seeds: Dict[str, List[dict]]) -> None:
    """Сохраняет весь кэш."""
    with open(CACHE_FILE, 'w') as f:
        json.dump(seeds, f, indent=2)


def save_seed(result) -> None:
    """
    Сохраняет итог партии в кэш (повторный seed не дублируется).

    Args:
        result: SimulationResult
    """
    db = load_seeds()
    entries = db.setdefault(str(result.size), [])
    if any(entry.get('seed') == result.seed for entry in entries):
        return
    entries.append({'seed': result.seed, 'score': result.score, 'moves': len(result.moves)})
    save_seeds(db)


def get_cached_seed(size: int) -> Optional[int]:
    """
    Лучший сохранённый seed для размера доски.

    Returns:
        seed с минимальным счётом или None
    """
    entries = load_seeds().get(str(size), [])
    if not entries:
        return None
    return min(entries, key=lambda e: e.get('score', float('inf')))['seed']
