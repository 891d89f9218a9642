from pathlib import Path

# Centralized paths for data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
MEALS_FILE = DATA_DIR / 'meals.json'

__all__ = ['DATA_DIR', 'MEALS_FILE']
