"""Open-Meteo daily forecast client.

Returns one WeatherDay per requested day. In the default ``midday`` mode the
temperature and weather code come from the least cloudy hour between 11:00
and 15:00, so a sunny afternoon is not reported as cloudy because of a grey
morning. Errors (HTTP status, transport, malformed payload) propagate to the
caller, which decides how to degrade.
"""
import logging
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import httpx

from menu.domain.Weather import WeatherDay
from menu.utilities import config
from menu.utilities.constants import (
    DAILY_TEMP_FIELDS,
    FORECAST_MAX_DAYS,
    FORECAST_URL,
    MIDDAY_HOURS,
    SUNNY_CLOUD_THRESHOLD,
    UNKNOWN_CLOUD_COVER,
    WMO_DESCRIPTIONS,
)

logger = logging.getLogger(__name__)


def _today_in(tz_name: str) -> date:
    try:
        return datetime.now(ZoneInfo(tz_name)).date()
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using local date", tz_name)
        return date.today()


def condition_for(code: int, cloud_cover: Optional[int] = None) -> str:
    """Map a WMO weather code to a coarse condition, leaning sunny when clouds are low."""
    if code in (45, 48):
        return "Mist"
    if 51 <= code <= 57:
        return "Drizzle"
    if 61 <= code <= 67 or 80 <= code <= 82:
        return "Rain"
    if 71 <= code <= 77 or 85 <= code <= 86:
        return "Snow"
    if code in (95, 96, 99):
        return "Thunderstorm"
    cc = UNKNOWN_CLOUD_COVER if cloud_cover is None else max(0, min(100, cloud_cover))
    return "Clear" if cc <= SUNNY_CLOUD_THRESHOLD else "Clouds"


def description_for(code: int) -> str:
    return WMO_DESCRIPTIONS.get(code, "cloudy")


def _number(value: Any) -> Optional[float]:
    """The value if it is a real number; Open-Meteo sends null for gaps in a series."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _pick_sunniest_midday(day: date, hourly: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Return code/cloud/temp of the least cloudy 11:00-15:00 hour of ``day``, or None."""
    times = hourly.get("time") or []
    codes = hourly.get("weathercode") or []
    if not times or not codes:
        return None
    clouds = hourly.get("cloudcover") or []
    temps = hourly.get("temperature_2m") or []

    prefix = day.isoformat() + "T"
    candidates = [i for i, t in enumerate(times) if t.startswith(prefix) and t[11:13] in MIDDAY_HOURS
                  and i < len(codes) and _number(codes[i]) is not None]
    if not candidates:
        return None

    best_idx, best_cloud = candidates[0], 101
    for i in candidates:
        cc = UNKNOWN_CLOUD_COVER
        if len(clouds) == len(times) and _number(clouds[i]) is not None:
            cc = int(clouds[i])
        if cc < best_cloud:
            best_idx, best_cloud = i, cc

    temp_f = None
    if len(temps) == len(times) and _number(temps[best_idx]) is not None:
        temp_f = round(temps[best_idx])
    return {"hour": times[best_idx], "code": int(codes[best_idx]), "cloud": best_cloud, "temp_f": temp_f}


def parse_forecast(payload: Dict[str, Any], days: int, temp_mode: str = "midday") -> List[Optional[WeatherDay]]:
    """Turn an Open-Meteo response into ``days`` entries (missing days are None)."""
    use_midday = temp_mode in ("", "midday", "daytime")
    temp_field = DAILY_TEMP_FIELDS.get(temp_mode, "temperature_2m_max")

    daily = payload["daily"]
    hourly = payload.get("hourly") or {}
    dates = daily["time"]
    temps = daily[temp_field]
    codes = daily["weathercode"]

    out: List[Optional[WeatherDay]] = []
    for i in range(min(len(dates), len(temps), len(codes), days)):
        day = date.fromisoformat(dates[i])
        code = _number(codes[i])
        temp_f = _number(temps[i])
        pick = _pick_sunniest_midday(day, hourly)
        cloud = None
        if pick is not None:
            code, cloud = pick["code"], pick["cloud"]
            if use_midday and pick["temp_f"] is not None:
                temp_f = pick["temp_f"]
        if code is None or temp_f is None:
            logger.warning("Incomplete forecast for %s (code=%s temp=%s), leaving it empty", day, code, temp_f)
            out.append(None)
            continue
        code, temp_f = int(code), round(temp_f)
        out.append(WeatherDay(day, temp_f, condition_for(code, cloud), description_for(code)))
        logger.debug("WX %s: %sF code=%s clouds=%s", day, temp_f, code, cloud)

    out.extend([None] * (days - len(out)))
    return out


async def fetch_forecast(days: int, start_date: Optional[date] = None,
                         client: Optional[httpx.AsyncClient] = None) -> List[Optional[WeatherDay]]:
    """Fetch ``days`` daily forecasts starting at ``start_date`` (today in WEATHER_TZ by default).

    Open-Meteo serves at most 14 days; later days come back as None.
    """
    if days <= 0:
        return []
    requested = max(1, min(days, FORECAST_MAX_DAYS))
    start = start_date or _today_in(config.WEATHER_TZ)
    end = start + timedelta(days=requested - 1)
    temp_mode = config.WEATHER_TEMP_MODE
    temp_field = DAILY_TEMP_FIELDS.get(temp_mode, "temperature_2m_max")

    params = {
        "latitude": config.WEATHER_LAT,
        "longitude": config.WEATHER_LON,
        "daily": f"{temp_field},weathercode",
        "hourly": "weathercode,cloudcover,temperature_2m",
        "temperature_unit": "fahrenheit",
        "timezone": config.WEATHER_TZ,
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
    }
    logger.info("Forecast request lat=%s lon=%s tz=%s mode=%s %s..%s",
                config.WEATHER_LAT, config.WEATHER_LON, config.WEATHER_TZ, temp_mode, start, end)

    if client is None:
        async with httpx.AsyncClient(timeout=config.WEATHER_TIMEOUT) as own_client:
            response = await own_client.get(FORECAST_URL, params=params)
    else:
        response = await client.get(FORECAST_URL, params=params)
    response.raise_for_status()
    return parse_forecast(response.json(), days, temp_mode)


__all__ = ["fetch_forecast", "parse_forecast", "condition_for", "description_for"]
