"""Weather domain entity: one forecast day (date, temperature in F, condition, description)."""
from datetime import date
from typing import Any, Dict


class WeatherDay:
    def __init__(self, day: date, temp_f: int, condition: str, description: str = ""):
        self.date = day
        self.temp_f = temp_f
        self.condition = condition
        self.description = description

    def __str__(self) -> str:
        return f"{self.date.isoformat()} - {self.temp_f}F - {self.condition} ({self.description})"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, WeatherDay):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "WeatherDay":
        raw_date = data.get("date")
        day = raw_date if isinstance(raw_date, date) else date.fromisoformat(str(raw_date))
        return WeatherDay(
            day,
            int(data.get("tempF", data.get("temp_f", 0)) or 0),
            data.get("condition") or "",
            data.get("description") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "tempF": self.temp_f,
            "condition": self.condition,
            "description": self.description,
        }
