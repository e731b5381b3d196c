# ABOUTME: Page-ready bootstrap that runs every component initializer once.
# ABOUTME: Initializers are fault-isolated: one failing component is logged and the rest still start.

import logging
from collections.abc import Callable
from datetime import datetime

from shoresquad.actions import init_event_listeners
from shoresquad.deps import PageDeps
from shoresquad.map_interactions import MapController
from shoresquad.navigation import NavigationController, init_smooth_scroll
from shoresquad.preferences import load_preferences, save_preferences
from shoresquad.reveal import RevealObserver
from shoresquad.scheduling import format_date
from shoresquad.state import AppState
from shoresquad.weather_widget import WeatherWidget

logger = logging.getLogger(__name__)

CHAT_WIDGET_GLOBAL = "Tawk_API"


class Page:
    """A booted page: its state, the live component controllers and any initializers that failed."""

    def __init__(self, deps: PageDeps, state: AppState):
        self.deps = deps
        self.state = state
        self.navigation: NavigationController | None = None
        self.weather: WeatherWidget | None = None
        self.map: MapController | None = None
        self.reveal: RevealObserver | None = None
        self.failures: list[str] = []

    def save_preferences(self, preferences: dict) -> None:
        save_preferences(self.deps.storage, preferences, self.deps.settings.preferences_key)
        self.state.preferences = preferences


def _init_navigation(page: Page) -> None:
    page.navigation = NavigationController(page.deps, page.state)
    page.navigation.bind()


def _init_smooth_scroll(page: Page) -> None:
    init_smooth_scroll(page.deps)


def _init_weather(page: Page) -> None:
    page.weather = WeatherWidget(page.deps, page.state)
    page.weather.bind()


def _init_event_listeners(page: Page) -> None:
    page.map, page.reveal = init_event_listeners(page.deps, page.state)


def _init_preferences(page: Page) -> None:
    page.state.preferences = load_preferences(page.deps.storage, page.deps.settings.preferences_key)


INITIALIZERS: list[tuple[str, Callable[[Page], None]]] = [
    ("navigation", _init_navigation),
    ("smooth scroll", _init_smooth_scroll),
    ("weather widget", _init_weather),
    ("event listeners", _init_event_listeners),
    ("user preferences", _init_preferences),
]


def init_page(deps: PageDeps) -> Page:
    """Run all initializers once. Must be called with an event loop running (the weather fetch starts here)."""
    logger.info("ShoreSquad - initializing application (%s)", format_date(datetime.now()))
    page = Page(deps, AppState())

    for name, initializer in INITIALIZERS:
        try:
            initializer(page)
        except Exception:
            logger.exception("%s init error", name.capitalize())
            page.failures.append(name)
        else:
            logger.info("%s initialized", name.capitalize())

    if CHAT_WIDGET_GLOBAL in deps.window.globals:
        logger.info("Chat widget loaded")
    else:
        logger.info("Chat widget loading...")

    if page.failures:
        logger.warning("ShoreSquad initialized with failures: %s", ", ".join(page.failures))
    else:
        logger.info("ShoreSquad initialized successfully")
    return page
