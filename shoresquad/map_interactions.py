# ABOUTME: Simulated cleanup-map interactions: search, filter buttons, list highlight and pin info.
# ABOUTME: There is no mapping engine behind this; counts are fixed and latency comes from the scheduler.

import logging

from shoresquad.deps import PageDeps
from shoresquad.dom import Element, Event
from shoresquad.state import AppState

logger = logging.getLogger(__name__)

FILTER_COUNTS = {
    "all": 3,
    "upcoming": 3,
    "today": 1,
    "near-me": 2,
}
SEARCH_RESULT_COUNT = 2
HIGHLIGHT_COLOR = "#E0F2FE"


def filter_count(token: str | None) -> int:
    """Number of events shown for a filter token; unknown tokens show none."""
    return FILTER_COUNTS.get(token or "", 0)


def location_info_message(name: str) -> str:
    return f'📍 {name}\n\nClick "View Details" on the event card to learn more!'


class MapController:
    def __init__(self, deps: PageDeps, state: AppState):
        self.deps = deps
        self.state = state
        self.document = deps.document

    @property
    def event_count(self) -> Element | None:
        return self.document.get_element_by_id("event-count")

    def bind(self) -> None:
        search_btn = self.document.get_element_by_id("map-search-btn")
        search_input = self.document.get_element_by_id("map-search")
        if search_btn is not None and search_input is not None:
            search_btn.add_event_listener("click", lambda e: self._on_search(search_input))

            def on_keypress(event: Event) -> None:
                if event.key == "Enter":
                    search_btn.click()

            search_input.add_event_listener("keypress", on_keypress)

        filter_btns = self.document.query_selector_all(".filter-btn")
        for btn in filter_btns:
            btn.add_event_listener("click", lambda e, btn=btn: self._on_filter(btn, filter_btns))

        for item in self.document.query_selector_all(".map-event-item"):
            item.add_event_listener("click", lambda e, item=item: self._on_item_click(e, item))

        for pin in self.document.query_selector_all(".demo-pin"):
            pin.add_event_listener("click", lambda e, pin=pin: self._on_pin_click(pin))

    def _on_search(self, search_input: Element) -> None:
        term = (search_input.get_attribute("value") or "").strip()
        if term:
            self.search(term)

    def search(self, term: str) -> None:
        """Show a searching message now and a fixed result count after the simulated delay."""
        logger.info("Searching map for: %s", term)
        label = self.event_count
        if label is None:
            return
        label.text_content = f'Searching for "{term}"...'

        def finish() -> None:
            label.text_content = f'{SEARCH_RESULT_COUNT} events found near "{term}"'

        self.deps.scheduler.call_later(self.deps.settings.search_delay, finish)

    def _on_filter(self, btn: Element, all_btns: list[Element]) -> None:
        for other in all_btns:
            other.remove_class("active")
        btn.add_class("active")
        self.apply_filter(btn.get_attribute("data-filter"))

    def apply_filter(self, token: str | None) -> int:
        logger.info("Filtering by: %s", token)
        count = filter_count(token)
        self.state.active_filter = token or ""
        label = self.event_count
        if label is not None:
            label.text_content = f"{count} events found"
        return count

    def _on_item_click(self, event: Event, item: Element) -> None:
        # Buttons inside the list item have their own action
        if event.target is not None and event.target.has_class("btn"):
            return
        self.highlight_location(item.get_attribute("data-location"))

    def highlight_location(self, location: str | None) -> None:
        """Reset pin emphasis and briefly tint the list items for this location."""
        logger.info("Highlighting location: %s", location)
        for pin in self.document.query_selector_all(".demo-pin"):
            pin.style.pop("transform", None)

        for item in self.document.query_selector_all(".map-event-item"):
            if item.get_attribute("data-location") == location:
                item.style["background-color"] = HIGHLIGHT_COLOR
                self.deps.scheduler.call_later(
                    self.deps.settings.highlight_duration, lambda item=item: item.style.pop("background-color", None)
                )

    def _on_pin_click(self, pin: Element) -> None:
        label = pin.query_selector(".pin-label")
        self.show_location_info(label.text_content if label is not None else "")

    def show_location_info(self, name: str) -> None:
        logger.info("Showing info for: %s", name)
        self.deps.window.alert(location_info_message(name))
