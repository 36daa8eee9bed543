import logging
from typing import List

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from .config import APP_TITLE, TEMPLATES_DIR
from .forecasts import ForecastGenerator, get_forecast_generator
from .models import WeatherForecast

logger = logging.getLogger(__name__)


# Only the two routes below are served; no generated docs.
app = FastAPI(title=APP_TITLE, docs_url=None, redoc_url=None, openapi_url=None)
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse({"error": "Internal server error"}, status_code=500)


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {"title": APP_TITLE})


@app.get("/weatherforecast", response_model=List[WeatherForecast])
async def weather_forecast(generator: ForecastGenerator = Depends(get_forecast_generator)):
    return generator.generate()
