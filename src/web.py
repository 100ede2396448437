# ABOUTME: ASGI web entry point serving the weather dashboard page and its fragments.
# ABOUTME: Creates a Starlette app whose /dashboard endpoint runs one controller flow per request.

import contextlib
import json
import logging

import httpx
import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, PlainTextResponse, Response
from starlette.routing import Route

from src import config
from src.controller import EMPTY_CITY_ALERT, DashboardController
from src.dashboard import DashboardView, render_error, render_loading
from src.deps import DashboardDeps, create_http_client
from src.location import BrowserPosition, BrowserPositionError, LocationService
from src.pipeline import WEATHER_FETCH_FAILED

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Weather Dashboard</title>
</head>
<body>
<div class="search">
  <input id="cityInput" type="text" placeholder="Enter city name" autocomplete="off">
  <button id="searchButton" type="button">Search</button>
  <button id="locateButton" type="button">Locate me</button>
</div>
<div id="dashboard">__LOADING__</div>
<script>
const LOADING = __LOADING_JSON__;
const FETCH_FAILED = __FETCH_FAILED_JSON__;
const EMPTY_CITY_ALERT = __EMPTY_CITY_ALERT_JSON__;
const dashboard = document.getElementById("dashboard");
const cityInput = document.getElementById("cityInput");
let latest = 0;

function localizeWeekdays() {
  for (const el of dashboard.querySelectorAll(".forecast-day[data-date]")) {
    const day = new Date(el.dataset.date + "T00:00:00");
    if (!isNaN(day)) el.textContent = day.toLocaleDateString(undefined, {weekday: "short"});
  }
}

async function show(params) {
  const token = ++latest;
  dashboard.innerHTML = LOADING;
  let body;
  try {
    const resp = await fetch("/dashboard?" + new URLSearchParams(params));
    body = await resp.text();
    if (resp.status === 422) { alert(body); body = FETCH_FAILED; }
  } catch (err) {
    body = FETCH_FAILED;
  }
  if (token !== latest) return;
  dashboard.innerHTML = body;
  localizeWeekdays();
}

function locateMe() {
  if (!navigator.geolocation) { show({location_error: "unsupported"}); return; }
  dashboard.innerHTML = LOADING;
  navigator.geolocation.getCurrentPosition(
    pos => show({latitude: pos.coords.latitude, longitude: pos.coords.longitude}),
    () => show({location_error: "denied"})
  );
}

function searchCity() {
  const city = cityInput.value.trim();
  if (!city) { alert(EMPTY_CITY_ALERT); return; }
  cityInput.value = "";
  show({city: city});
}

cityInput.addEventListener("keypress", e => { if (e.key === "Enter") searchCity(); });
document.getElementById("searchButton").addEventListener("click", searchCity);
document.getElementById("locateButton").addEventListener("click", locateMe);
document.addEventListener("DOMContentLoaded", locateMe);
</script>
</body>
</html>
"""


def build_page() -> str:
    """Build the page shell with the dashboard container pre-filled with the loading state."""
    loading = render_loading()
    substitutions = {
        "__LOADING_JSON__": json.dumps(loading),
        "__FETCH_FAILED_JSON__": json.dumps(render_error(WEATHER_FETCH_FAILED)),
        "__EMPTY_CITY_ALERT_JSON__": json.dumps(EMPTY_CITY_ALERT),
        "__LOADING__": loading,
    }
    page = PAGE_TEMPLATE
    for marker, value in substitutions.items():
        page = page.replace(marker, value)
    return page


def location_service_from_query(query) -> LocationService | None:
    """Wrap the browser's geolocation outcome, forwarded as query parameters, as a LocationService.

    Returns None when the browser reported that geolocation is not supported.
    """
    error = query.get("location_error")
    if error == "unsupported":
        return None
    if error:
        return BrowserPositionError(error)
    try:
        return BrowserPosition(float(query["latitude"]), float(query["longitude"]))
    except (KeyError, ValueError):
        return BrowserPositionError("invalid position")


async def index(request: Request) -> Response:
    return HTMLResponse(build_page())


async def dashboard(request: Request) -> Response:
    """Run one dashboard flow and return the resulting container content.

    With ``city`` the city search runs; otherwise the location flow runs with the
    browser-reported position. An input alert is returned as 422 plain text.

    Each request gets its own DashboardView, so the generation guard only orders the
    loading and result renders of this one flow. Ordering across overlapping requests
    is done by the page script's request counter.
    """
    alerts: list[str] = []
    controller = DashboardController(
        deps=request.app.state.deps,
        view=DashboardView(),
        alert=alerts.append,
        location_service=location_service_from_query(request.query_params),
    )
    if "city" in request.query_params:
        controller.city_input = request.query_params["city"]
        await controller.search_city()
    else:
        await controller.on_load()

    if alerts:
        return PlainTextResponse(alerts[-1], status_code=422)
    return HTMLResponse(controller.view.html)


def create_app(http_client: httpx.AsyncClient | None = None) -> Starlette:
    """Create the dashboard app. Without ``http_client`` one is created and closed with the app."""

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        if http_client is not None:
            app.state.deps = DashboardDeps(http_client=http_client)
            yield
            return
        async with create_http_client() as client:
            app.state.deps = DashboardDeps(http_client=client)
            yield

    return Starlette(
        routes=[
            Route("/", index),
            Route("/dashboard", dashboard),
        ],
        lifespan=lifespan,
    )


app = create_app()


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Serving weather dashboard on http://%s:%d", config.DASHBOARD_HOST, config.DASHBOARD_PORT)
    uvicorn.run(app, host=config.DASHBOARD_HOST, port=config.DASHBOARD_PORT)


if __name__ == "__main__":
    main()
