"""Configuration management for the Menu Generator application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# Weather (Open-Meteo, no API key needed). Defaults point at San Jose, CA.
WEATHER_LAT: Final[float] = float(os.getenv('WEATHER_LAT', '37.3382'))
WEATHER_LON: Final[float] = float(os.getenv('WEATHER_LON', '-121.8863'))
WEATHER_TZ: Final[str] = os.getenv('WEATHER_TZ', 'America/Los_Angeles')
# midday | max | min | mean
WEATHER_TEMP_MODE: Final[str] = os.getenv('WEATHER_TEMP_MODE', 'midday').strip().lower()
WEATHER_TIMEOUT: Final[float] = float(os.getenv('WEATHER_TIMEOUT', '10'))
