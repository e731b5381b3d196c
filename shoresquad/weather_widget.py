# ABOUTME: Weather widget controller: drives the #weather-display panel through loading, loaded and error.
# ABOUTME: Fetches the forecast, renders it, and wires the refresh button and the retry control.

import asyncio
import logging

import httpx

from shoresquad.deps import PageDeps
from shoresquad.dom import Element
from shoresquad.models import WeatherView
from shoresquad.state import AppState, PanelState, panel_transition
from shoresquad.weather_service import fetch_forecast, parse_forecast
from shoresquad.weather_view import build_weather_view, render_error_html, render_loading_html, render_weather_html

logger = logging.getLogger(__name__)

DISPLAY_ID = "weather-display"
REFRESH_ID = "weather-refresh-btn"
RETRY_ID = "weather-retry-btn"


class WeatherWidget:
    """Owns the weather panel. Every refresh replaces the panel content wholesale.

    Refreshes are not cancelled: when two overlap, whichever resolves last wins.
    """

    def __init__(self, deps: PageDeps, state: AppState):
        self.deps = deps
        self.state = state
        self.view: WeatherView | None = None
        self.last_task: asyncio.Task | None = None
        # The loop only holds weak references to tasks
        self.pending: set[asyncio.Task] = set()

    @property
    def display(self) -> Element | None:
        return self.deps.document.get_element_by_id(DISPLAY_ID)

    def bind(self) -> None:
        """Hook the refresh button and load the forecast once."""
        refresh_btn = self.deps.document.get_element_by_id(REFRESH_ID)
        if refresh_btn is not None:
            refresh_btn.add_event_listener("click", lambda e: self.trigger())
        self.trigger()

    def trigger(self) -> asyncio.Task:
        """Start a refresh on the running event loop without waiting for it."""
        task = asyncio.get_running_loop().create_task(self.refresh())
        self.pending.add(task)
        task.add_done_callback(self.pending.discard)
        self.last_task = task
        return task

    def _move(self, action: str) -> None:
        self.state.weather = panel_transition(self.state.weather, action)

    async def refresh(self) -> PanelState | None:
        """Fetch and render the forecast. Returns the resulting panel state, None without a display."""
        display = self.display
        if display is None:
            return None

        self._move("start")
        display.class_name = "weather-display loading-state"
        display.set_content(render_loading_html())

        try:
            logger.info("Fetching weather data")
            data = await fetch_forecast(self.deps.http_client, self.deps.settings.forecast_url)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Weather API error: %s", e)
            self.show_error(f"Failed to load weather data: {e}")
            return self.state.weather

        self.show_forecast(data)
        return self.state.weather

    def show_forecast(self, data) -> None:
        display = self.display
        if display is None:
            return
        try:
            view = build_weather_view(parse_forecast(data))
        except ValueError as e:
            logger.error("Error displaying weather: %s", e)
            self.show_error(f"Failed to display weather data: {e}")
            return

        display.class_name = "weather-display"
        display.set_content(render_weather_html(view))
        self.view = view
        self._move("succeed")
        logger.info("Weather display updated with %d card(s)", len(view.cards))

    def show_error(self, message: str) -> None:
        """Render the error panel with a retry control that re-runs the same pipeline."""
        display = self.display
        if display is None:
            return
        display.class_name = "weather-display"
        display.set_content(render_error_html(message))
        retry = display.append_child(Element("button", id=RETRY_ID, classes="btn btn-primary", text="Try Again"))
        retry.add_event_listener("click", lambda e: self.trigger())
        self.view = None
        self._move("fail")
