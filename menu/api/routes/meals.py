from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Response

from menu.infra.Meal_Repository import MealRepository
from menu.utilities.validators import MealInput

router = APIRouter(prefix="/api/meals", tags=["meals"])


@router.get("")
def list_meals():
    return [m.to_dict() for m in MealRepository().list_meals()]


@router.get("/filter")
def filter_meals(protein: Optional[str] = Query(default=None),
                 cuisine: Optional[str] = Query(default=None),
                 cook_time: Optional[str] = Query(default=None, alias="cookTime"),
                 cook_method: Optional[str] = Query(default=None, alias="cookMethod")):
    meals = MealRepository().filter_meals(protein, cuisine, cook_time, cook_method)
    return [m.to_dict() for m in meals]


@router.get("/{meal_id}")
def get_meal(meal_id: int):
    meal = MealRepository().get_meal(meal_id)
    if meal is None:
        raise HTTPException(status_code=404, detail="Meal not found")
    return meal.to_dict()


@router.post("")
def add_meal(payload: MealInput):
    meal = MealRepository().add_meal(payload.to_meal_dict())
    return meal.to_dict()


@router.put("/{meal_id}")
def update_meal(meal_id: int, payload: MealInput):
    meal = MealRepository().update_meal(meal_id, payload.to_meal_dict())
    if meal is None:
        raise HTTPException(status_code=404, detail="Meal not found")
    return meal.to_dict()


@router.delete("/{meal_id}", status_code=204)
def delete_meal(meal_id: int):
    if not MealRepository().delete_meal(meal_id):
        raise HTTPException(status_code=404, detail="Meal not found")
    return Response(status_code=204)
