from typing import Final

DAYS_IN_WEEK: Final[int] = 7
MAX_DAYS_PER_PROTEIN: Final[int] = 7
MAX_PROTEIN_TOTAL: Final[int] = 7

FORECAST_URL: Final[str] = "https://api.open-meteo.com/v1/forecast"
FORECAST_MAX_DAYS: Final[int] = 14
MIDDAY_HOURS: Final[tuple[str, ...]] = ("11", "12", "13", "14", "15")
SUNNY_CLOUD_THRESHOLD: Final[int] = 35
UNKNOWN_CLOUD_COVER: Final[int] = 50

DAILY_TEMP_FIELDS: Final[dict[str, str]] = {
    "min": "temperature_2m_min",
    "mean": "temperature_2m_mean",
    "avg": "temperature_2m_mean",
    "average": "temperature_2m_mean",
    "max": "temperature_2m_max",
}

WMO_DESCRIPTIONS: Final[dict[int, str]] = {
    0: "clear sky",
    1: "mainly clear",
    2: "partly cloudy",
    3: "overcast",
    45: "fog", 48: "fog",
    51: "drizzle", 53: "drizzle", 55: "drizzle",
    56: "freezing drizzle", 57: "freezing drizzle",
    61: "rain", 63: "rain", 65: "rain",
    66: "freezing rain", 67: "freezing rain",
    71: "snow", 73: "snow", 75: "snow",
    77: "snow grains",
    80: "rain showers", 81: "rain showers", 82: "rain showers",
    85: "snow showers", 86: "snow showers",
    95: "thunderstorm",
    96: "thunderstorm with hail", 99: "thunderstorm with hail",
}
