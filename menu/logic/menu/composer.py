"""Menu composition: turn a meal catalog and a per-protein day count into N meals.

Stages (each one skips meals already chosen):
  1. bucket the catalog by protein tag
  2. honor the requested protein counts, in mapping order
  3. fill the remainder with random unused meals
  4. pad with random repeats when the catalog has run out
  5. shuffle the whole menu and cut it to exactly ``days`` meals
"""
import logging
import random
from collections import Counter, defaultdict
from typing import Dict, List, Mapping, Optional, Sequence, Set

from menu.domain.Meal import Meal
from menu.logic.menu.shuffle import fisher_yates

logger = logging.getLogger(__name__)


def _bucket_by_protein(catalog: Sequence[Meal]) -> Dict[str, List[Meal]]:
    buckets: Dict[str, List[Meal]] = defaultdict(list)
    for meal in catalog:
        buckets[meal.protein].append(meal)
    return buckets


def _take_preferred(buckets: Dict[str, List[Meal]], distribution: Mapping[str, int],
                    used: Set, rng: random.Random) -> List[Meal]:
    """Pick up to ``count`` unused meals for every requested protein."""
    picked: List[Meal] = []
    for protein, count in distribution.items():
        if not count or count <= 0:
            continue
        available = [m for m in buckets.get(protein, []) if m.id not in used]
        if not available:
            logger.info("No unused meals for protein '%s' (requested %s)", protein, count)
            continue
        fisher_yates(available, rng)
        chosen = available[:count]
        if len(chosen) < count:
            logger.info("Protein '%s': only %s of %s requested meals available", protein, len(chosen), count)
        for meal in chosen:
            used.add(meal.id)
        picked.extend(chosen)
    return picked


def _take_remaining(catalog: Sequence[Meal], needed: int, used: Set, rng: random.Random) -> List[Meal]:
    remaining = [m for m in catalog if m.id not in used]
    fisher_yates(remaining, rng)
    chosen = remaining[:needed]
    for meal in chosen:
        used.add(meal.id)
    return chosen


def compose_menu(catalog: Sequence[Meal], distribution: Optional[Mapping[str, int]], days: int,
                 rng: Optional[random.Random] = None) -> List[Meal]:
    """Compose ``days`` meals from ``catalog`` honoring ``distribution`` first.

    Returns an empty list for an empty catalog or ``days <= 0``. Duplicates
    only appear once every distinct meal of the catalog has been used.
    Counts are expected to be validated (0..7) by the caller.
    """
    if days <= 0 or not catalog:
        return []
    rng = rng or random.Random()
    distribution = distribution or {}
    used: Set = set()

    menu = _take_preferred(_bucket_by_protein(catalog), distribution, used, rng)
    total_assigned = len(menu)

    if total_assigned < days:
        menu.extend(_take_remaining(catalog, days - total_assigned, used, rng))

    padded = 0
    while len(menu) < days:
        menu.append(catalog[rng.randrange(len(catalog))])
        padded += 1
    if padded:
        logger.info("Catalog has %s distinct meals for %s days; padded with %s repeats",
                    len(catalog), days, padded)

    fisher_yates(menu, rng)
    menu = menu[:days]
    logger.debug("Composed %s meals, protein split: %s", len(menu), dict(Counter(m.protein for m in menu)))
    return menu


__all__ = ["compose_menu"]
