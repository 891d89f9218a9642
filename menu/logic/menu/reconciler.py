"""Merge freshly composed meals into a week while keeping pinned slots untouched."""
import logging
from typing import List, Mapping, Optional, Sequence

from menu.domain.Meal import Meal
from menu.domain.Plan import PlanSlot, WeekPlan

logger = logging.getLogger(__name__)


def unpinned_indexes(week: WeekPlan, pins: Optional[Mapping[int, bool]]) -> List[int]:
    pins = pins or {}
    return [i for i in range(len(week)) if not pins.get(i)]


def reconcile_week(current_week: WeekPlan, pins: Optional[Mapping[int, bool]],
                   replacements: Sequence[Meal]) -> WeekPlan:
    """Return a new week where unpinned slots take ``replacements`` in order.

    Pinned slots are kept as-is (meal, date and weather). A replaced slot keeps
    the date and weather of the slot it replaces, since those describe the day,
    not the meal. When ``replacements`` runs short the remaining unpinned slots
    keep their previous meal.
    """
    pins = pins or {}
    pending = iter(replacements)
    slots: List[PlanSlot] = []
    consumed = 0
    stale = 0
    for index, slot in enumerate(current_week):
        if pins.get(index):
            slots.append(slot)
            continue
        meal = next(pending, None)
        if meal is None:
            stale += 1
            slots.append(slot)
            continue
        consumed += 1
        slots.append(PlanSlot(meal, slot.date, slot.weather))

    if stale:
        logger.warning("Received %s replacement meals for %s unpinned slots; %s slots left unchanged",
                       consumed, consumed + stale, stale)
    elif consumed < len(replacements):
        logger.debug("Ignoring %s surplus replacement meals", len(replacements) - consumed)
    return WeekPlan(slots)


__all__ = ["reconcile_week", "unpinned_indexes"]
