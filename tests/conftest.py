import random
from datetime import datetime

import httpx
import pytest

from weather_list.app import app
from weather_list.forecasts import ForecastGenerator, get_forecast_generator


FIXED_NOW = datetime(2025, 10, 30, 23, 59, 30)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def seeded_generator() -> ForecastGenerator:
    return ForecastGenerator(rng=random.Random(1234), clock=lambda: FIXED_NOW)


@pytest.fixture
async def client():
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def use_generator():
    """Route /weatherforecast through the given generator for one test."""
    def _use(generator):
        app.dependency_overrides[get_forecast_generator] = lambda: generator
    yield _use
    app.dependency_overrides.clear()
