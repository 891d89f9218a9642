"""Meal domain entity: a catalog entry tagged by protein, cuisine, cook time and method."""
from typing import Any, Dict, Optional


class Meal:
    def __init__(self, id: Optional[int] = None, name: str = "", protein: str = "", cuisine: str = "",
                 cook_time: str = "", cook_method: str = "", source: str = "", category: str = ""):
        self.id = id
        self.name = name
        self.protein = protein
        self.cuisine = cuisine
        self.cook_time = cook_time
        self.cook_method = cook_method
        self.source = source
        self.category = category

    def __str__(self) -> str:
        return f"{self.name} (#{self.id}) - {self.protein} - {self.cuisine} - {self.cook_time} - {self.cook_method}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Meal):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self.id, self.name))

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Meal":
        d = dict(data or {})
        raw_id = d.get("id")
        return Meal(
            id=int(raw_id) if raw_id not in (None, "") else None,
            name=d.get("name") or "",
            protein=d.get("protein") or "",
            cuisine=d.get("cuisine") or "",
            cook_time=d.get("cookTime", d.get("cook_time")) or "",
            cook_method=d.get("cookMethod", d.get("cook_method")) or "",
            source=d.get("source") or "",
            category=d.get("category") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "protein": self.protein,
            "cuisine": self.cuisine,
            "cookTime": self.cook_time,
            "cookMethod": self.cook_method,
            "source": self.source,
            "category": self.category,
        }
