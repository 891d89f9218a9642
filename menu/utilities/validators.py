"""
Input validation schemas using Pydantic for request bodies.
"""
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from menu.utilities.constants import DAYS_IN_WEEK, MAX_DAYS_PER_PROTEIN, FORECAST_MAX_DAYS


def clamp_distribution(raw: Optional[Dict[str, Any]]) -> Dict[str, int]:
    """Clamp each protein count to [0, 7] and drop 'no preference' entries; keeps order."""
    if raw is not None and not isinstance(raw, dict):
        raise ValueError("proteinDistribution must be an object of protein -> count")
    out: Dict[str, int] = {}
    for protein, count in (raw or {}).items():
        key = str(protein).strip()
        if not key or count is None:
            continue
        try:
            value = int(count)
        except (TypeError, ValueError):
            raise ValueError(f"Count for '{key}' must be an integer")
        value = max(0, min(value, MAX_DAYS_PER_PROTEIN))
        if value:
            out[key] = value
    return out


class MealInput(BaseModel):
    """Schema for meal create/update."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=200)
    protein: str = Field("", max_length=50)
    cuisine: str = Field("", max_length=50)
    cook_time: str = Field("", alias="cookTime", max_length=50)
    cook_method: str = Field("", alias="cookMethod", max_length=50)
    source: str = Field("", max_length=500)
    category: str = Field("", max_length=50)

    @field_validator('name', 'protein', 'cuisine', 'cook_time', 'cook_method', 'source', 'category', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace; None becomes empty."""
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v:
            raise ValueError('Meal name cannot be empty')
        return v

    def to_meal_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class MenuGenerateInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    protein_distribution: Dict[str, int] = Field(default_factory=dict, alias="proteinDistribution")
    days: int = Field(DAYS_IN_WEEK, ge=1, le=FORECAST_MAX_DAYS)
    start_date: Optional[date] = Field(None, alias="startDate")

    @field_validator('protein_distribution', mode='before')
    @classmethod
    def clamp_counts(cls, v):
        return clamp_distribution(v)


class MenuShuffleInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    menu: List[Dict[str, Any]] = Field(default_factory=list)
    pins: Dict[int, bool] = Field(default_factory=dict)
    protein_distribution: Dict[str, int] = Field(default_factory=dict, alias="proteinDistribution")

    @field_validator('protein_distribution', mode='before')
    @classmethod
    def clamp_counts(cls, v):
        return clamp_distribution(v)
