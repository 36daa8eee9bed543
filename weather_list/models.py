from datetime import date as _date
from typing import Optional

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel


# Stands in for 5/9 when deriving Fahrenheit.
FAHRENHEIT_DIVISOR = 0.5556


def celsius_to_fahrenheit(temperature_c: int) -> int:
    """
    Convert whole degrees Celsius to whole degrees Fahrenheit.

    Divides by 0.5556 and truncates toward zero, so results can sit one
    degree below the textbook ``c * 1.8 + 32`` (25 -> 76, -10 -> 15).
    """
    return 32 + int(temperature_c / FAHRENHEIT_DIVISOR)


class WeatherForecast(BaseModel):
    """One generated forecast for a single day."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    date: _date
    temperature_c: int
    summary: Optional[str] = None

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        return celsius_to_fahrenheit(self.temperature_c)
