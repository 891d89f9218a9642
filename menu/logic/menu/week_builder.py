"""Week assembly: compose meals, attach calendar dates and forecast, reshuffle unpinned slots.

The forecast provider is any ``async (days, start_date) -> list`` callable;
``menu.infra.Weather_Client.fetch_forecast`` in production.
"""
import logging
import random
from datetime import date, timedelta
from typing import Awaitable, Callable, List, Mapping, Optional, Sequence

from menu.domain.Meal import Meal
from menu.domain.Plan import PlanSlot, WeekPlan
from menu.domain.Weather import WeatherDay
from menu.logic.menu.composer import compose_menu
from menu.logic.menu.reconciler import reconcile_week, unpinned_indexes

logger = logging.getLogger(__name__)

ForecastProvider = Callable[[int, Optional[date]], Awaitable[List[Optional[WeatherDay]]]]


def week_dates(start_date: Optional[date], days: int) -> List[date]:
    start = start_date or date.today()
    return [start + timedelta(days=i) for i in range(max(days, 0))]


def attach_week(meals: Sequence[Meal], start_date: Optional[date],
                forecast: Sequence[Optional[WeatherDay]]) -> WeekPlan:
    """Pair meal i with day start+i and the forecast for offset i (None when missing)."""
    dates = week_dates(start_date, len(meals))
    return WeekPlan(
        PlanSlot(meal, dates[i], forecast[i] if i < len(forecast) else None)
        for i, meal in enumerate(meals)
    )


async def forecast_or_nulls(provider: ForecastProvider, days: int,
                            start_date: Optional[date]) -> List[Optional[WeatherDay]]:
    """Forecast for ``days`` days, or ``days`` Nones if the provider fails."""
    try:
        return list(await provider(days, start_date))
    except Exception as e:
        logger.warning("Weather forecast unavailable, continuing without it: %s", e)
        return [None] * days


async def generate_week(catalog: Sequence[Meal], distribution: Optional[Mapping[str, int]], days: int,
                        start_date: Optional[date], provider: ForecastProvider,
                        rng: Optional[random.Random] = None) -> WeekPlan:
    meals = compose_menu(catalog, distribution, days, rng)
    if not meals:
        logger.warning("Empty catalog, no menu generated for %s days", days)
        return WeekPlan()
    forecast = await forecast_or_nulls(provider, len(meals), start_date)
    week = attach_week(meals, start_date, forecast)
    logger.info("Generated %s-day menu starting %s", len(week), week[0].date)
    return week


def reshuffle_week(catalog: Sequence[Meal], current_week: WeekPlan, pins: Optional[Mapping[int, bool]],
                   distribution: Optional[Mapping[str, int]], rng: Optional[random.Random] = None) -> WeekPlan:
    """Recompose only the unpinned slots; dates and weather stay with their slots."""
    to_replace = unpinned_indexes(current_week, pins)
    if not to_replace:
        logger.info("All %s slots pinned, nothing to shuffle", len(current_week))
        return current_week
    replacements = compose_menu(catalog, distribution, len(to_replace), rng)
    logger.info("Reshuffling slots %s", to_replace)
    return reconcile_week(current_week, pins, replacements)


__all__ = ["week_dates", "attach_week", "forecast_or_nulls", "generate_week", "reshuffle_week"]
