# ABOUTME: Scroll-reveal observer: adds a permanent "visible" class to cards as they enter the viewport.
# ABOUTME: Intersection is measured against the window viewport with a negative bottom margin.

import logging

from shoresquad.dom import Element, Event, Window

logger = logging.getLogger(__name__)

REVEAL_SELECTOR = ".feature-card, .event-card, .hero-content, .hero-image"


def intersection_ratio(top: float, height: float, view_top: float, view_bottom: float) -> float:
    """Fraction of an element's height that lies inside [view_top, view_bottom]."""
    visible = min(top + height, view_bottom) - max(top, view_top)
    if visible <= 0:
        return 0.0
    if height <= 0:
        return 1.0
    return visible / height


class RevealObserver:
    """Watches elements and marks each one visible the first time it intersects the viewport."""

    def __init__(
        self,
        window: Window,
        threshold: float = 0.1,
        margin_bottom: float = -100,
        unobserve_on_reveal: bool = False,
    ):
        self.window = window
        self.threshold = threshold
        self.margin_bottom = margin_bottom
        self.unobserve_on_reveal = unobserve_on_reveal
        self.targets: list[Element] = []
        self._listening = False

    def observe(self, element: Element) -> None:
        if element not in self.targets:
            self.targets.append(element)
        if not self._listening:
            self.window.add_event_listener("scroll", self._on_scroll)
            self._listening = True
        self._check(element)

    def unobserve(self, element: Element) -> None:
        if element in self.targets:
            self.targets.remove(element)

    def is_intersecting(self, element: Element) -> bool:
        view_top = self.window.scroll_y
        view_bottom = view_top + self.window.inner_height + self.margin_bottom
        ratio = intersection_ratio(element.offset_top, element.offset_height, view_top, view_bottom)
        return ratio > 0 and ratio >= self.threshold

    def _check(self, element: Element) -> None:
        if self.is_intersecting(element):
            element.add_class("visible")
            if self.unobserve_on_reveal:
                self.unobserve(element)

    def check_all(self) -> None:
        for element in list(self.targets):
            self._check(element)

    def _on_scroll(self, event: Event) -> None:
        self.check_all()


def observe_elements(
    window: Window,
    threshold: float = 0.1,
    margin_bottom: float = -100,
    unobserve_on_reveal: bool = False,
) -> RevealObserver:
    """Start watching the page's cards and hero blocks."""
    observer = RevealObserver(
        window, threshold=threshold, margin_bottom=margin_bottom, unobserve_on_reveal=unobserve_on_reveal
    )
    elements = window.document.query_selector_all(REVEAL_SELECTOR)
    for el in elements:
        observer.observe(el)
    logger.info("Observing %d element(s) for scroll reveal", len(elements))
    return observer
