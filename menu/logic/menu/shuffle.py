"""Uniform in-place shuffle used by every menu composition stage."""
import random
from typing import MutableSequence


def fisher_yates(items: MutableSequence, rng: random.Random) -> None:
    """Permute ``items`` in place with the decreasing-index Fisher-Yates walk.

    For i from the last index down to 1, j is drawn uniformly from [0, i]
    and items i and j are swapped.
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


__all__ = ["fisher_yates"]
