# ABOUTME: Runtime settings for the ShoreSquad page client.
# ABOUTME: Loads .env, then reads endpoint, timeout and storage overrides from environment variables.

import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_FORECAST_URL = "https://api.data.gov.sg/v1/environment/24-hour-weather-forecast"
PREFERENCES_KEY = "shoresquad_preferences"


class Settings(BaseModel):
    """Endpoint, storage and page-behaviour constants shared by every component."""

    forecast_url: str = DEFAULT_FORECAST_URL
    http_timeout: float = 10.0
    prefs_path: str = ".shoresquad_prefs.json"
    log_level: str = "INFO"
    preferences_key: str = PREFERENCES_KEY

    # Scroll behaviour (pixels / seconds)
    scroll_throttle: float = 0.1
    header_offset: int = 80
    section_threshold: int = 100
    header_scrolled_threshold: int = 50

    # Simulated map latency (seconds)
    search_delay: float = 1.0
    highlight_duration: float = 2.0

    reveal_threshold: float = 0.1
    reveal_margin_bottom: int = -100
    reveal_unobserve: bool = False


def load_settings() -> Settings:
    """Build Settings from SHORESQUAD_* environment variables, falling back to defaults."""
    env = {
        "forecast_url": os.environ.get("SHORESQUAD_FORECAST_URL"),
        "http_timeout": os.environ.get("SHORESQUAD_HTTP_TIMEOUT"),
        "prefs_path": os.environ.get("SHORESQUAD_PREFS_PATH"),
        "log_level": os.environ.get("SHORESQUAD_LOG_LEVEL"),
    }
    return Settings(**{k: v for k, v in env.items() if v})
