import asyncio
import random
import unittest
from datetime import date, timedelta
from menu.domain.Meal import Meal
from menu.domain.Weather import WeatherDay
from menu.logic.menu.week_builder import (
    attach_week, forecast_or_nulls, generate_week, reshuffle_week, week_dates
)

START = date(2025, 9, 1)
CATALOG = [Meal(id=i, name=f"Meal {i}", protein=p)
           for i, p in enumerate(["chicken", "chicken", "beef", "beef", "fish", "veggie", "veggie", "pork", "pork"], 1)]


async def sunny_forecast(days, start_date):
    return [WeatherDay(start_date + timedelta(days=i), 70 + i, "Clear", "clear sky") for i in range(days)]


async def broken_forecast(days, start_date):
    raise ConnectionError("weather service down")


class TestWeekBuilder(unittest.TestCase):
    def test_week_dates_consecutive(self):
        dates = week_dates(START, 7)
        self.assertEqual(dates[0], START)
        self.assertEqual(dates[-1], date(2025, 9, 7))
        self.assertEqual(week_dates(None, 1), [date.today()])

    def test_attach_week_short_forecast(self):
        meals = CATALOG[:3]
        week = attach_week(meals, START, [WeatherDay(START, 65, "Rain", "rain")])
        self.assertEqual([s.date for s in week], week_dates(START, 3))
        self.assertEqual(week[0].weather.condition, "Rain")
        self.assertIsNone(week[1].weather)
        self.assertIsNone(week[2].weather)

    def test_generate_week_with_forecast(self):
        week = asyncio.run(generate_week(CATALOG, {"chicken": 2}, 7, START, sunny_forecast, random.Random(1)))
        self.assertEqual(len(week), 7)
        self.assertEqual(sum(1 for m in week.meals if m.protein == "chicken"), 2)
        for i, slot in enumerate(week):
            self.assertEqual(slot.date, START + timedelta(days=i))
            self.assertEqual(slot.weather.date, slot.date)

    def test_generate_week_survives_forecast_failure(self):
        with self.assertLogs("menu.logic.menu.week_builder", level="WARNING"):
            week = asyncio.run(generate_week(CATALOG, {}, 7, START, broken_forecast, random.Random(2)))
        self.assertEqual(len(week), 7)
        self.assertTrue(all(slot.weather is None for slot in week))

    def test_generate_week_empty_catalog(self):
        week = asyncio.run(generate_week([], {"beef": 1}, 7, START, sunny_forecast))
        self.assertEqual(len(week), 0)

    def test_forecast_or_nulls(self):
        self.assertEqual(asyncio.run(forecast_or_nulls(broken_forecast, 3, START)), [None, None, None])
        self.assertEqual(len(asyncio.run(forecast_or_nulls(sunny_forecast, 3, START))), 3)

    def test_reshuffle_keeps_pinned_and_weather(self):
        rng = random.Random(3)
        week = asyncio.run(generate_week(CATALOG, {}, 7, START, sunny_forecast, rng))
        pins = {0: True, 3: True, 6: True}
        result = reshuffle_week(CATALOG, week, pins, {"veggie": 1}, rng)
        self.assertEqual(len(result), 7)
        for idx in pins:
            self.assertIs(result[idx], week[idx])
        for idx in range(7):
            self.assertEqual(result[idx].date, week[idx].date)
            self.assertIs(result[idx].weather, week[idx].weather)
        # replacements are distinct among themselves
        replaced = [result[i].meal.id for i in (1, 2, 4, 5)]
        self.assertEqual(len(replaced), len(set(replaced)))

    def test_reshuffle_everything_pinned_is_noop(self):
        week = asyncio.run(generate_week(CATALOG, {}, 3, START, sunny_forecast, random.Random(4)))
        result = reshuffle_week(CATALOG, week, {0: True, 1: True, 2: True}, {})
        self.assertIs(result, week)


if __name__ == '__main__':
    unittest.main()
