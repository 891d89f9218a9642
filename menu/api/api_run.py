from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from datetime import datetime, timezone, date as _date
from typing import Optional
import logging

from menu.domain.Plan import WeekPlan
from menu.infra.Meal_Repository import MealRepository
from menu.infra.Weather_Client import fetch_forecast
from menu.logic.menu.week_builder import forecast_or_nulls, generate_week, reshuffle_week
from menu.utilities.constants import MAX_PROTEIN_TOTAL, FORECAST_MAX_DAYS
from menu.utilities.validators import MenuGenerateInput, MenuShuffleInput

# Routers
from menu.api.routes import meals

# Logging
logger = logging.getLogger("menu_app")

# Initialize FastAPI app
app = FastAPI(title="Weekly Menu Generator API")
app.include_router(meals.router)


def _too_many_proteins(total: int) -> JSONResponse:
    return JSONResponse(status_code=400, content={
        "error": "Too many protein selections",
        "message": f"Total protein selections cannot exceed {MAX_PROTEIN_TOTAL}. Current total: {total}",
    })


# -------------------- Health + filters --------------------
@app.get("/api/health")
def health():
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get("/api/filters")
def filters():
    return MealRepository().filter_options()


# -------------------- Menu --------------------
@app.post("/api/menu/generate")
async def menu_generate(payload: MenuGenerateInput):
    logger.info("Menu generate: distribution=%s days=%s start=%s",
                payload.protein_distribution, payload.days, payload.start_date)
    total = sum(payload.protein_distribution.values())
    if total > MAX_PROTEIN_TOTAL:
        logger.warning("Rejected protein distribution with total %s", total)
        return _too_many_proteins(total)

    catalog = MealRepository().list_meals()
    week = await generate_week(catalog, payload.protein_distribution, payload.days,
                               payload.start_date or _date.today(), fetch_forecast)
    return week.to_list()


@app.post("/api/menu/shuffle")
def menu_shuffle(payload: MenuShuffleInput):
    total = sum(payload.protein_distribution.values())
    if total > MAX_PROTEIN_TOTAL:
        return _too_many_proteins(total)
    try:
        current = WeekPlan.from_list(payload.menu)
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid menu slot: {e}")

    catalog = MealRepository().list_meals()
    week = reshuffle_week(catalog, current, payload.pins, payload.protein_distribution)
    return week.to_list()


# -------------------- Weather --------------------
@app.get("/api/weather/forecast")
async def weather_forecast(days: int = Query(default=7, ge=1, le=FORECAST_MAX_DAYS),
                           start_date: Optional[_date] = Query(default=None, alias="startDate")):
    forecast = await forecast_or_nulls(fetch_forecast, days, start_date)
    return [w.to_dict() if w else None for w in forecast]
