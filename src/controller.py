# ABOUTME: Input and event wiring for the dashboard: page load, city search and the Enter key.
# ABOUTME: Runs one pipeline flow per user action and commits its render to the DashboardView.

import logging
from collections.abc import Awaitable, Callable

from src.dashboard import DashboardView, render_dashboard, render_error, render_loading
from src.deps import DashboardDeps
from src.location import LocationService
from src.models import PlaceLabel, WeatherReport
from src.pipeline import DashboardError, weather_for_city, weather_for_position

logger = logging.getLogger(__name__)

EMPTY_CITY_ALERT = "Enter a city name first!"
COMMIT_KEY = "Enter"


class DashboardController:
    """Connects the city input, the "locate me" action and page load to the pipeline.

    ``alert`` is the blocking prompt used for input validation; the dashboard error
    panel is reserved for pipeline failures.
    """

    def __init__(
        self,
        deps: DashboardDeps,
        view: DashboardView,
        alert: Callable[[str], None],
        location_service: LocationService | None = None,
    ):
        self.deps = deps
        self.view = view
        self.alert = alert
        self.location_service = location_service
        self.city_input = ""

    async def on_load(self) -> None:
        await self.locate_me()

    async def on_key_press(self, key: str) -> None:
        if key == COMMIT_KEY:
            await self.search_city()

    async def locate_me(self) -> None:
        await self._run(weather_for_position(self.deps.http_client, self.location_service))

    async def search_city(self) -> None:
        city = self.city_input.strip()
        if not city:
            self.alert(EMPTY_CITY_ALERT)
            return
        flow = weather_for_city(self.deps.http_client, city)
        self.city_input = ""
        await self._run(flow)

    async def _run(self, flow: Awaitable[tuple[WeatherReport, PlaceLabel]]) -> None:
        token = self.view.begin()
        self.view.commit(token, render_loading())
        try:
            report, place = await flow
        except DashboardError as e:
            logger.info("Dashboard flow %d failed: %s", token, e.message)
            self.view.commit(token, render_error(e.message))
            return
        self.view.commit(token, render_dashboard(report, place))
