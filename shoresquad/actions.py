# ABOUTME: Event-listener registrar for the call-to-action buttons, the map and scroll reveal.
# ABOUTME: CTA handlers are placeholders that raise a blocking acknowledgement via window.alert.

import logging

from shoresquad.deps import PageDeps
from shoresquad.dom import Event
from shoresquad.map_interactions import MapController
from shoresquad.reveal import RevealObserver, observe_elements
from shoresquad.state import AppState

logger = logging.getLogger(__name__)

CTA_MESSAGE = "Feature coming soon! 🌊"
EVENT_JOIN_MESSAGE = "Event registration coming soon! 🏖️"
SIGNUP_MESSAGE = "Squad signup coming soon! 👥"

# selector -> acknowledgement shown on click
BUTTON_MESSAGES = [
    (".hero-buttons .btn", CTA_MESSAGE),
    (".event-card .btn", EVENT_JOIN_MESSAGE),
    (".cta .btn, .nav-cta", SIGNUP_MESSAGE),
]


def _acknowledge(deps: PageDeps, message: str):
    def handler(event: Event) -> None:
        label = event.current_target.text_content if event.current_target is not None else ""
        logger.info("Button clicked: %s", label)
        deps.window.alert(message)

    return handler


def init_event_listeners(deps: PageDeps, state: AppState) -> tuple[MapController, RevealObserver]:
    """Attach CTA handlers, wire the map simulation and start the reveal observer."""
    for selector, message in BUTTON_MESSAGES:
        for btn in deps.document.query_selector_all(selector):
            btn.add_event_listener("click", _acknowledge(deps, message))

    map_controller = MapController(deps, state)
    map_controller.bind()

    settings = deps.settings
    observer = observe_elements(
        deps.window, settings.reveal_threshold, settings.reveal_margin_bottom, settings.reveal_unobserve
    )
    return map_controller, observer
