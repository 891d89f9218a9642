"""Plan domain entities: a week is an ordered list of slots (meal + calendar date + optional weather)."""
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from menu.domain.Meal import Meal
from menu.domain.Weather import WeatherDay


class PlanSlot:
    def __init__(self, meal: Meal, day: date, weather: Optional[WeatherDay] = None):
        self.meal = meal
        self.date = day
        self.weather = weather

    def __str__(self) -> str:
        return f"{self.date.isoformat()}: {self.meal.name}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "PlanSlot":
        """Parse the flattened wire form (meal fields + date + weather)."""
        weather = data.get("weather")
        return PlanSlot(
            Meal.from_dict(data),
            date.fromisoformat(str(data.get("date"))),
            WeatherDay.from_dict(weather) if isinstance(weather, dict) else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.meal.to_dict(),
            "date": self.date.isoformat(),
            "weather": self.weather.to_dict() if self.weather else None,
        }


class WeekPlan:
    def __init__(self, slots: Optional[Iterable[PlanSlot]] = None):
        self.slots: List[PlanSlot] = list(slots) if slots else []

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self):
        return iter(self.slots)

    def __getitem__(self, index: int) -> PlanSlot:
        return self.slots[index]

    @property
    def meals(self) -> List[Meal]:
        return [slot.meal for slot in self.slots]

    @staticmethod
    def from_list(items: Iterable[Dict[str, Any]]) -> "WeekPlan":
        return WeekPlan(PlanSlot.from_dict(item) for item in items)

    def to_list(self) -> List[Dict[str, Any]]:
        return [slot.to_dict() for slot in self.slots]
