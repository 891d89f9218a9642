import random
import unittest
from datetime import date, timedelta
from menu.domain.Meal import Meal
from menu.domain.Plan import PlanSlot, WeekPlan
from menu.domain.Weather import WeatherDay
from menu.logic.menu.composer import compose_menu
from menu.logic.menu.reconciler import reconcile_week, unpinned_indexes

MONDAY = date(2025, 9, 1)


def _week(n=7):
    slots = []
    for i in range(n):
        day = MONDAY + timedelta(days=i)
        meal = Meal(id=100 + i, name=f"Old {i}", protein="beef")
        slots.append(PlanSlot(meal, day, WeatherDay(day, 60 + i, "Clear", "clear sky")))
    return WeekPlan(slots)


def _replacements(n):
    return [Meal(id=200 + i, name=f"New {i}", protein="chicken") for i in range(n)]


class TestReconcileWeek(unittest.TestCase):
    def test_pinned_mon_thu_scenario(self):
        week = _week()
        pins = {0: True, 3: True}
        new = _replacements(5)
        result = reconcile_week(week, pins, new)

        self.assertEqual(len(result), 7)
        for idx in (0, 3):
            self.assertIs(result[idx], week[idx])
        for pos, idx in enumerate((1, 2, 4, 5, 6)):
            self.assertIs(result[idx].meal, new[pos])
        self.assertIs(result[1].meal, new[0])
        self.assertIs(result[6].meal, new[4])

    def test_date_and_weather_stay_with_slot(self):
        week = _week()
        result = reconcile_week(week, {2: True}, _replacements(6))
        for idx in range(7):
            self.assertEqual(result[idx].date, week[idx].date)
            self.assertIs(result[idx].weather, week[idx].weather)

    def test_false_pins_are_unpinned(self):
        week = _week(3)
        result = reconcile_week(week, {0: False, 1: True}, _replacements(2))
        self.assertEqual([s.meal.id for s in result], [200, 101, 201])

    def test_short_replacements_keep_stale_slots(self):
        week = _week()
        with self.assertLogs("menu.logic.menu.reconciler", level="WARNING"):
            result = reconcile_week(week, {0: True}, _replacements(2))
        self.assertEqual(len(result), 7)
        self.assertEqual([s.meal.id for s in result], [100, 200, 201, 103, 104, 105, 106])

    def test_surplus_replacements_ignored(self):
        week = _week(3)
        result = reconcile_week(week, {}, _replacements(5))
        self.assertEqual([s.meal.id for s in result], [200, 201, 202])

    def test_input_week_not_mutated(self):
        week = _week()
        before = [s.meal.id for s in week]
        reconcile_week(week, {}, _replacements(7))
        self.assertEqual([s.meal.id for s in week], before)

    def test_pin_preservation_with_composed_replacements(self):
        catalog = [Meal(id=i, name=f"M{i}", protein=("chicken" if i % 2 else "fish")) for i in range(1, 15)]
        rng = random.Random(21)
        for _ in range(100):
            week = _week()
            pins = {i: rng.random() < 0.4 for i in range(7)}
            todo = unpinned_indexes(week, pins)
            result = reconcile_week(week, pins, compose_menu(catalog, {"chicken": 2}, len(todo), rng))
            self.assertEqual(len(result), 7)
            for idx, pinned in pins.items():
                if pinned:
                    self.assertIs(result[idx].meal, week[idx].meal)
                    self.assertEqual(result[idx].date, week[idx].date)
                    self.assertIs(result[idx].weather, week[idx].weather)
                else:
                    self.assertIn(result[idx].meal, catalog)

    def test_unpinned_indexes(self):
        self.assertEqual(unpinned_indexes(_week(4), {1: True, 2: False}), [0, 2, 3])
        self.assertEqual(unpinned_indexes(_week(2), None), [0, 1])


if __name__ == '__main__':
    unittest.main()
