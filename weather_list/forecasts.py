"""
Random forecast generation.

Usage:
    from weather_list.forecasts import ForecastGenerator

    generator = ForecastGenerator(rng=random.Random(42))
    batch = generator.generate()
    # Returns five WeatherForecast records, tomorrow first
"""

import logging
import random
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from .models import WeatherForecast

logger = logging.getLogger(__name__)


SUMMARIES = [
    "Freezing", "Bracing", "Chilly", "Cool", "Mild",
    "Warm", "Balmy", "Hot", "Sweltering", "Scorching",
]
FORECAST_DAYS = 5
MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 55  # exclusive


class ForecastGenerator:
    """Builds batches of random forecasts from an injected random source and clock."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
        days: int = FORECAST_DAYS,
    ):
        """
        Initialize the generator.

        Args:
            rng: Random source; a fresh unseeded one if omitted
            clock: Returns the current time; defaults to local datetime.now
            days: Number of records per batch
        """
        self.rng = rng or random.Random()
        self.clock = clock or datetime.now
        self.days = days

    def generate(self) -> List[WeatherForecast]:
        """Return one record per day, starting tomorrow relative to the clock."""
        today = self.clock().date()
        out = []
        for i in range(1, self.days + 1):
            out.append(WeatherForecast(
                date=today + timedelta(days=i),
                temperature_c=self.rng.randrange(MIN_TEMPERATURE_C, MAX_TEMPERATURE_C),
                summary=self.rng.choice(SUMMARIES),
            ))
        logger.debug(f"Generated {len(out)} forecasts from {today.isoformat()}")
        return out


# Singleton instance
_generator: Optional[ForecastGenerator] = None

def get_forecast_generator() -> ForecastGenerator:
    """Get or create the forecast generator singleton."""
    global _generator
    if _generator is None:
        _generator = ForecastGenerator()
    return _generator
