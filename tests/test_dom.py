# ABOUTME: Tests for the in-memory DOM adapter: selectors, classes, attributes and event bubbling.
# ABOUTME: Also checks the landing page builder exposes every element the components look up.

import pytest

from shoresquad.dom import Document, Element, Event, Window
from shoresquad.page import build_landing_page


@pytest.fixture
def doc() -> Document:
    return build_landing_page()


class TestSelectors:
    def test_class_and_id(self, doc):
        assert len(doc.query_selector_all(".nav-link")) == 5
        assert doc.query_selector("#weather-display").id == "weather-display"

    def test_descendant(self, doc):
        """Descendant selectors only match inside the named ancestor.

        Implementation: Compares '.hero-buttons .btn' against all '.btn' elements.
        Passing implies: CTA handlers attach to the right buttons.
        """
        hero = doc.query_selector_all(".hero-buttons .btn")
        assert [b.text_content for b in hero] == ["Find a Cleanup", "Learn More"]
        assert len(doc.query_selector_all(".btn")) > len(hero)

    def test_attribute_prefix(self, doc):
        links = doc.query_selector_all('a[href^="#"]')
        assert len(links) == 6
        assert all(l.tag == "a" for l in links)

    def test_comma_group(self, doc):
        found = doc.query_selector_all(".cta .btn, .nav-cta")
        assert [el.text_content for el in found] == ["Join a Squad", "Start Your Squad"]

    def test_compound_with_attribute(self, doc):
        assert len(doc.query_selector_all(".filter-btn[data-filter]")) == 4
        assert doc.query_selector('.filter-btn[data-filter="today"]').text_content == "today"

    def test_unsupported_selector(self, doc):
        with pytest.raises(ValueError, match="Unsupported selector"):
            doc.query_selector_all("div > p")


class TestElement:
    def test_class_helpers(self):
        el = Element(classes="a b")
        assert el.toggle_class("c") is True
        assert el.toggle_class("a") is False
        assert el.class_name == "b c"

    def test_boolean_attribute_is_stringified(self):
        el = Element()
        el.set_attribute("aria-expanded", True)
        assert el.get_attribute("aria-expanded") == "true"

    def test_set_content_detaches_children(self):
        parent = Element()
        child = parent.append_child(Element())
        parent.set_content("<p>hi</p>")
        assert parent.children == []
        assert child.parent is None
        assert parent.inner_html == "<p>hi</p>"


class TestEvents:
    def test_bubbles_to_ancestors_and_document(self, doc):
        """A click on a nested element reaches its ancestors and then the document.

        Implementation: Listens on an item, its section and the document.
        Passing implies: Outside-click and delegated handlers can observe clicks.
        """
        order = []
        item = doc.query_selector(".map-event-item")
        button = item.query_selector(".btn")
        item.add_event_listener("click", lambda e: order.append(("item", e.target, e.current_target)))
        doc.get_element_by_id("map").add_event_listener("click", lambda e: order.append(("map", e.target, None)))
        doc.add_event_listener("click", lambda e: order.append(("doc", e.target, None)))

        button.click()

        assert [o[0] for o in order] == ["item", "map", "doc"]
        assert all(o[1] is button for o in order)
        assert order[0][2] is item

    def test_stop_propagation(self, doc):
        seen = []
        item = doc.query_selector(".map-event-item")
        item.add_event_listener("click", lambda e: e.stop_propagation())
        doc.add_event_listener("click", lambda e: seen.append(e))

        item.click()

        assert seen == []

    def test_removed_listener_is_not_called(self, doc):
        seen = []
        button = doc.get_element_by_id("map-search-btn")
        listener = seen.append
        button.add_event_listener("click", listener)

        button.click()
        button.remove_event_listener("click", listener)
        button.remove_event_listener("click", listener)
        button.click()

        assert len(seen) == 1

    def test_window_scroll_and_alert(self, doc):
        window = Window(doc)
        events = []
        window.add_event_listener("scroll", events.append)

        window.scroll_to(-20, behavior="smooth")
        window.alert("hello")

        assert window.scroll_y == 0
        assert window.scroll_requests == [(-20, "smooth")]
        assert isinstance(events[0], Event)
        assert window.alerts == ["hello"]


class TestLandingPage:
    @pytest.mark.parametrize(
        "element_id",
        ["header", "nav-toggle", "nav-menu", "weather-display", "weather-refresh-btn",
         "map-search", "map-search-btn", "event-count"],
    )
    def test_expected_ids_exist(self, doc, element_id):
        assert doc.get_element_by_id(element_id) is not None

    def test_sections_have_geometry(self, doc):
        tops = [s.offset_top for s in doc.query_selector_all(".section")]
        assert tops == sorted(tops)
        assert len(tops) == 6
