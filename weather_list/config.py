import os
from pathlib import Path

# ---------------------------- Config ---------------------------------

APP_TITLE = "Weather Forecast"
HOST = os.environ.get("WEATHER_LIST_HOST", "127.0.0.1")
PORT = os.environ.get("PORT", "8080")
LOG_LEVEL = os.environ.get("WEATHER_LIST_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

TEMPLATES_DIR = Path(__file__).parent / "templates"
