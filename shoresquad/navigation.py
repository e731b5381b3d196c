# ABOUTME: Navigation controller (mobile menu, active-section highlight, header style) and smooth scroll.
# ABOUTME: Section and header calculations are pure; the controller applies them to the DOM on scroll.

import logging

from shoresquad.deps import PageDeps
from shoresquad.dom import Event
from shoresquad.scheduling import throttle
from shoresquad.state import AppState, MenuState, menu_transition

logger = logging.getLogger(__name__)


def compute_active_section(sections: list[tuple[str, float]], scroll_y: float, threshold: float = 100) -> str:
    """Return the id of the last section whose top is at or above scroll_y + threshold, or ''."""
    current = ""
    for section_id, top in sections:
        if scroll_y >= top - threshold:
            current = section_id
    return current


def header_is_scrolled(scroll_y: float, threshold: float = 50) -> bool:
    return scroll_y > threshold


def scroll_target(rect_top: float, scroll_y: float, header_offset: float = 80) -> float:
    """Document offset that puts an element's top just below the fixed header."""
    return rect_top + scroll_y - header_offset


class NavigationController:
    def __init__(self, deps: PageDeps, state: AppState):
        self.deps = deps
        self.state = state
        self.document = deps.document
        self.window = deps.window
        self.toggle = self.document.get_element_by_id("nav-toggle")
        self.menu = self.document.get_element_by_id("nav-menu")

    def bind(self) -> None:
        if self.toggle is not None and self.menu is not None:
            self.toggle.add_event_listener("click", self._on_toggle)

        for link in self.document.query_selector_all(".nav-link"):
            link.add_event_listener("click", lambda e: self.collapse())

        self.document.add_event_listener("click", self._on_document_click)

        settings = self.deps.settings
        self.update_active_nav_link()
        self.window.add_event_listener(
            "scroll", throttle(lambda e: self.update_active_nav_link(), settings.scroll_throttle, self.deps.scheduler)
        )
        self.update_header()
        self.window.add_event_listener(
            "scroll", throttle(lambda e: self.update_header(), settings.scroll_throttle, self.deps.scheduler)
        )

    def _apply_menu(self, menu_state: MenuState) -> None:
        self.state.menu = menu_state
        expanded = menu_state is MenuState.EXPANDED
        if self.menu is not None:
            if expanded:
                self.menu.add_class("active")
            else:
                self.menu.remove_class("active")
        if self.toggle is not None:
            self.toggle.set_attribute("aria-expanded", expanded)

    def _on_toggle(self, event: Event) -> None:
        self._apply_menu(menu_transition(self.state.menu, "toggle"))

    def collapse(self) -> None:
        self._apply_menu(menu_transition(self.state.menu, "collapse"))

    def _on_document_click(self, event: Event) -> None:
        inside_menu = self.menu is not None and self.menu.contains(event.target)
        on_toggle = self.toggle is not None and self.toggle.contains(event.target)
        if not inside_menu and not on_toggle:
            self.collapse()

    def update_active_nav_link(self) -> str:
        sections = [(s.id or "", s.offset_top) for s in self.document.query_selector_all(".section")]
        current = compute_active_section(sections, self.window.scroll_y, self.deps.settings.section_threshold)
        self.state.active_section = current
        logger.debug("Active section: %s", current or "(none)")
        for link in self.document.query_selector_all(".nav-link"):
            if link.get_attribute("href") == f"#{current}":
                link.add_class("active")
            else:
                link.remove_class("active")
        return current

    def update_header(self) -> bool:
        scrolled = header_is_scrolled(self.window.scroll_y, self.deps.settings.header_scrolled_threshold)
        self.state.header_scrolled = scrolled
        header = self.document.get_element_by_id("header")
        if header is not None:
            if scrolled:
                header.add_class("scrolled")
            else:
                header.remove_class("scrolled")
        return scrolled


def init_smooth_scroll(deps: PageDeps) -> None:
    """Intercept in-page anchor clicks and scroll the target just below the fixed header."""
    document, window = deps.document, deps.window
    offset = deps.settings.header_offset

    def on_click(event: Event) -> None:
        href = event.current_target.get_attribute("href") or ""
        if href == "#":
            return
        event.prevent_default()
        target = document.get_element_by_id(href[1:])
        if target is not None:
            window.scroll_to(scroll_target(window.bounding_top(target), window.scroll_y, offset), behavior="smooth")

    for link in document.query_selector_all('a[href^="#"]'):
        link.add_event_listener("click", on_click)
