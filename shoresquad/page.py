# ABOUTME: Builds the ShoreSquad landing page element tree for the in-memory DOM.
# ABOUTME: Mirrors the ids, classes and data attributes the page components expect to find.

from shoresquad.dom import Document, Element

SECTION_HEIGHT = 600

NAV_SECTIONS = [
    ("home", "Home"),
    ("features", "Features"),
    ("events", "Events"),
    ("map", "Map"),
    ("weather", "Weather"),
    ("join", "Join"),
]

BEACHES = ["East Coast Park", "Pasir Ris Beach", "Sentosa Siloso Beach"]

FILTERS = ["all", "upcoming", "today", "near-me"]


def _section(doc_body: Element, section_id: str, index: int, classes: str = "section") -> Element:
    return doc_body.append_child(
        Element(
            "section",
            id=section_id,
            classes=classes,
            offset_top=index * SECTION_HEIGHT,
            offset_height=SECTION_HEIGHT,
        )
    )


def build_landing_page() -> Document:
    """Return a Document laid out like the production landing page, one section per 600px."""
    doc = Document()
    body = doc.body

    header = body.append_child(Element("header", id="header", classes="header"))
    nav = header.append_child(Element("nav", classes="nav"))
    nav.append_child(Element("button", id="nav-toggle", classes="nav-toggle", attrs={"aria-expanded": "false"}))
    menu = nav.append_child(Element("ul", id="nav-menu", classes="nav-menu"))
    for section_id, label in NAV_SECTIONS[:-1]:
        item = menu.append_child(Element("li"))
        item.append_child(Element("a", classes="nav-link", attrs={"href": f"#{section_id}"}, text=label))
    menu.append_child(Element("a", classes="btn nav-cta", attrs={"href": "#join"}, text="Join a Squad"))

    hero = _section(body, "home", 0, classes="section hero")
    content = hero.append_child(Element(classes="hero-content", offset_top=100, offset_height=300))
    buttons = content.append_child(Element(classes="hero-buttons"))
    buttons.append_child(Element("button", classes="btn btn-primary", text="Find a Cleanup"))
    buttons.append_child(Element("button", classes="btn btn-secondary", text="Learn More"))
    hero.append_child(Element(classes="hero-image", offset_top=100, offset_height=400))

    features = _section(body, "features", 1)
    for i in range(3):
        features.append_child(Element(classes="feature-card", offset_top=700 + i * 150, offset_height=120))

    events = _section(body, "events", 2)
    for i, beach in enumerate(BEACHES):
        card = events.append_child(Element(classes="event-card", offset_top=1300 + i * 150, offset_height=120))
        card.append_child(Element("h3", text=beach))
        card.append_child(Element("button", classes="btn btn-primary", text="Join Event"))

    map_section = _section(body, "map", 3)
    map_section.append_child(Element("input", id="map-search", attrs={"value": ""}))
    map_section.append_child(Element("button", id="map-search-btn", classes="btn", text="Search"))
    for token in FILTERS:
        classes = "filter-btn active" if token == "all" else "filter-btn"
        map_section.append_child(Element("button", classes=classes, attrs={"data-filter": token}, text=token))
    map_section.append_child(Element("span", id="event-count", text="3 events found"))
    for beach in BEACHES:
        item = map_section.append_child(Element(classes="map-event-item", attrs={"data-location": beach}))
        item.append_child(Element("h4", text=beach))
        item.append_child(Element("button", classes="btn btn-small", text="View Details"))
    for beach in BEACHES:
        pin = map_section.append_child(Element(classes="demo-pin"))
        pin.append_child(Element("span", classes="pin-label", text=beach))

    weather = _section(body, "weather", 4)
    weather.append_child(Element(id="weather-display", classes="weather-display"))
    weather.append_child(Element("button", id="weather-refresh-btn", classes="btn", text="Refresh"))

    join = _section(body, "join", 5, classes="section cta")
    join.append_child(Element("button", classes="btn btn-primary", text="Start Your Squad"))

    return doc
