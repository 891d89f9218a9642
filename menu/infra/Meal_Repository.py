"""Meal catalog repository (JSON file persistence)."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from menu.domain.Meal import Meal
from menu.infra import paths

logger = logging.getLogger(__name__)

# wire name -> Meal attribute
FILTER_FIELDS = {
    "protein": "protein",
    "cuisine": "cuisine",
    "cookTime": "cook_time",
    "cookMethod": "cook_method",
    "source": "source",
    "category": "category",
}


def _is_wildcard(value: Optional[str]) -> bool:
    return value is None or value == "" or value == "all"


class MealRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else paths.MEALS_FILE

    # -------------------- persistence --------------------
    def _read(self) -> List[Dict[str, Any]]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f) or []
        except FileNotFoundError:
            logger.warning("Meals file not found: %s. Returning empty list.", self.path)
            return []
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in meals file %s: %s", self.path, e)
            return []

    def _write(self, rows: List[Dict[str, Any]]) -> None:
        os.makedirs(self.path.parent, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".meals_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(rows, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    # -------------------- queries --------------------
    def list_meals(self) -> List[Meal]:
        """Load the whole catalog; each call is a fresh snapshot."""
        return [Meal.from_dict(row) for row in self._read()]

    def get_meal(self, meal_id: int) -> Optional[Meal]:
        return next((m for m in self.list_meals() if m.id == meal_id), None)

    def filter_meals(self, protein: Optional[str] = None, cuisine: Optional[str] = None,
                     cook_time: Optional[str] = None, cook_method: Optional[str] = None) -> List[Meal]:
        """Exact-match filter; None, '' and 'all' disable a criterion. Sorted by name."""
        criteria = {"protein": protein, "cuisine": cuisine, "cook_time": cook_time, "cook_method": cook_method}
        active = {k: v for k, v in criteria.items() if not _is_wildcard(v)}
        meals = [m for m in self.list_meals() if all(getattr(m, k) == v for k, v in active.items())]
        return sorted(meals, key=lambda m: m.name.lower())

    def list_distinct_values(self, field: str) -> List[str]:
        """Distinct trimmed, non-empty values of a meal field (wire or attribute name)."""
        attr = FILTER_FIELDS.get(field, field)
        if attr not in FILTER_FIELDS.values():
            raise ValueError(f"Unknown meal field: {field}")
        values = {str(getattr(m, attr) or "").strip() for m in self.list_meals()}
        values.discard("")
        return sorted(values)

    def filter_options(self) -> Dict[str, List[str]]:
        return {
            "proteins": self.list_distinct_values("protein"),
            "cuisines": self.list_distinct_values("cuisine"),
            "cookTimes": self.list_distinct_values("cookTime"),
            "cookMethods": self.list_distinct_values("cookMethod"),
        }

    # -------------------- commands --------------------
    def add_meal(self, data: Dict[str, Any]) -> Meal:
        rows = self._read()
        next_id = max((int(r.get("id") or 0) for r in rows), default=0) + 1
        meal = Meal.from_dict({**data, "id": next_id})
        rows.append(meal.to_dict())
        self._write(rows)
        logger.info("Added meal '%s' (id %s)", meal.name, meal.id)
        return meal

    def update_meal(self, meal_id: int, data: Dict[str, Any]) -> Optional[Meal]:
        rows = self._read()
        for idx, row in enumerate(rows):
            if int(row.get("id") or 0) == meal_id:
                meal = Meal.from_dict({**data, "id": meal_id})
                rows[idx] = meal.to_dict()
                self._write(rows)
                logger.info("Updated meal %s", meal_id)
                return meal
        return None

    def delete_meal(self, meal_id: int) -> bool:
        rows = self._read()
        kept = [r for r in rows if int(r.get("id") or 0) != meal_id]
        if len(kept) == len(rows):
            return False
        self._write(kept)
        logger.info("Deleted meal %s", meal_id)
        return True


__all__ = ["MealRepository", "FILTER_FIELDS"]
