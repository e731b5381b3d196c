# ABOUTME: Minimal in-memory DOM adapter: elements, documents, the window and event dispatch.
# ABOUTME: Lets page components run and be tested without a live browser.

import logging
import re
from collections import defaultdict
from collections.abc import Callable, Iterator

logger = logging.getLogger(__name__)

Listener = Callable[["Event"], None]

_COMPOUND_RE = re.compile(
    r"(?P<tag>^[a-zA-Z][\w-]*)"
    r"|#(?P<id>[\w-]+)"
    r"|\.(?P<cls>[\w-]+)"
    r"|\[(?P<attr>[\w-]+)(?:(?P<op>\^?=)\"?(?P<val>[^\]\"]*)\"?)?\]"
)


class Event:
    """A dispatched DOM event. Handlers may cancel the default action or stop bubbling."""

    def __init__(self, type: str, target: "Element | None" = None, key: str | None = None):
        self.type = type
        self.target = target
        self.current_target: "Element | Document | None" = None
        self.key = key
        self.default_prevented = False
        self.propagation_stopped = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class EventTarget:
    def __init__(self):
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    def add_event_listener(self, type: str, listener: Listener) -> None:
        self._listeners[type].append(listener)

    def remove_event_listener(self, type: str, listener: Listener) -> None:
        if listener in self._listeners[type]:
            self._listeners[type].remove(listener)

    def _fire(self, event: Event) -> None:
        # Copy so a handler can register or remove listeners while we iterate
        for listener in list(self._listeners[event.type]):
            listener(event)


def _parse_compound(text: str) -> list[tuple[str, str, str | None, str | None]]:
    parts = []
    pos = 0
    while pos < len(text):
        m = _COMPOUND_RE.match(text, pos)
        if m is None or m.end() == pos:
            raise ValueError(f"Unsupported selector: {text!r}")
        if m.group("tag"):
            parts.append(("tag", m.group("tag").lower(), None, None))
        elif m.group("id"):
            parts.append(("id", m.group("id"), None, None))
        elif m.group("cls"):
            parts.append(("cls", m.group("cls"), None, None))
        else:
            parts.append(("attr", m.group("attr"), m.group("op"), m.group("val")))
        pos = m.end()
    return parts


def _parse_selector(selector: str) -> list[list[list[tuple]]]:
    """Split a selector into comma groups of descendant-combined compound selectors."""
    return [[_parse_compound(c) for c in group.split()] for group in selector.split(",") if group.strip()]


class Element(EventTarget):
    """A node with classes, attributes, inline style, text and layout geometry."""

    def __init__(
        self,
        tag: str = "div",
        id: str | None = None,
        classes: str = "",
        attrs: dict[str, str] | None = None,
        text: str = "",
        offset_top: float = 0,
        offset_height: float = 0,
    ):
        super().__init__()
        self.tag = tag.lower()
        self.id = id
        self.class_list: list[str] = classes.split()
        self.attributes: dict[str, str] = dict(attrs or {})
        self.style: dict[str, str] = {}
        self.text_content = text
        self.inner_html = ""
        self.offset_top = offset_top
        self.offset_height = offset_height
        self.parent: Element | None = None
        self.children: list[Element] = []
        self.owner: Document | None = None

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        classes = "".join(f".{c}" for c in self.class_list)
        return f"<{self.tag}{ident}{classes}>"

    # Classes

    @property
    def class_name(self) -> str:
        return " ".join(self.class_list)

    @class_name.setter
    def class_name(self, value: str) -> None:
        self.class_list = value.split()

    def has_class(self, name: str) -> bool:
        return name in self.class_list

    def add_class(self, name: str) -> None:
        if name not in self.class_list:
            self.class_list.append(name)

    def remove_class(self, name: str) -> None:
        if name in self.class_list:
            self.class_list.remove(name)

    def toggle_class(self, name: str) -> bool:
        """Flip a class and return whether it is now present."""
        if self.has_class(name):
            self.remove_class(name)
            return False
        self.add_class(name)
        return True

    # Attributes

    def get_attribute(self, name: str) -> str | None:
        if name == "id":
            return self.id
        if name == "class":
            return self.class_name
        return self.attributes.get(name)

    def set_attribute(self, name: str, value) -> None:
        if isinstance(value, bool):
            value = "true" if value else "false"
        if name == "id":
            self.id = str(value)
        elif name == "class":
            self.class_name = str(value)
        else:
            self.attributes[name] = str(value)

    # Tree

    def append_child(self, child: "Element") -> "Element":
        child.parent = self
        self.children.append(child)
        return child

    def set_content(self, html: str) -> None:
        """Replace everything inside this element with an HTML fragment."""
        for child in self.children:
            child.parent = None
        self.children = []
        self.text_content = ""
        self.inner_html = html

    @property
    def document(self) -> "Document | None":
        node = self
        while node.parent is not None:
            node = node.parent
        return node.owner

    def contains(self, other: "Element | None") -> bool:
        node = other
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    def iter_descendants(self) -> Iterator["Element"]:
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    # Selectors

    def _matches_compound(self, compound) -> bool:
        for kind, name, op, val in compound:
            if kind == "tag" and self.tag != name:
                return False
            if kind == "id" and self.id != name:
                return False
            if kind == "cls" and name not in self.class_list:
                return False
            if kind == "attr":
                actual = self.get_attribute(name)
                if actual is None:
                    return False
                if op == "=" and actual != val:
                    return False
                if op == "^=" and not actual.startswith(val):
                    return False
        return True

    def _matches_chain(self, chain) -> bool:
        if not self._matches_compound(chain[-1]):
            return False
        remaining = chain[:-1]
        node = self.parent
        while remaining and node is not None:
            if node._matches_compound(remaining[-1]):
                remaining = remaining[:-1]
            node = node.parent
        return not remaining

    def matches(self, selector: str) -> bool:
        return any(self._matches_chain(chain) for chain in _parse_selector(selector))

    def query_selector_all(self, selector: str) -> list["Element"]:
        chains = _parse_selector(selector)
        return [el for el in self.iter_descendants() if any(el._matches_chain(c) for c in chains)]

    def query_selector(self, selector: str) -> "Element | None":
        found = self.query_selector_all(selector)
        return found[0] if found else None

    # Events

    def dispatch_event(self, event: Event) -> Event:
        """Fire on this element, then bubble through ancestors and the owning document."""
        if event.target is None:
            event.target = self
        node: Element | None = self
        while node is not None and not event.propagation_stopped:
            event.current_target = node
            node._fire(event)
            node = node.parent
        doc = self.document
        if doc is not None and not event.propagation_stopped:
            event.current_target = doc
            doc._fire(event)
        return event

    def click(self) -> Event:
        return self.dispatch_event(Event("click"))

    def press_key(self, key: str) -> Event:
        return self.dispatch_event(Event("keypress", key=key))


class Document(EventTarget):
    """Owner of the element tree rooted at <body>."""

    def __init__(self):
        super().__init__()
        self.body = Element("body")
        self.body.owner = self

    def get_element_by_id(self, id: str) -> Element | None:
        for el in self.body.iter_descendants():
            if el.id == id:
                return el
        return None

    def query_selector_all(self, selector: str) -> list[Element]:
        return self.body.query_selector_all(selector)

    def query_selector(self, selector: str) -> Element | None:
        return self.body.query_selector(selector)


class Window(EventTarget):
    """Viewport state plus the scroll, alert and global-object surfaces of the browser window."""

    def __init__(self, document: Document, inner_height: float = 800):
        super().__init__()
        self.document = document
        self.inner_height = inner_height
        self.scroll_y: float = 0
        self.alerts: list[str] = []
        self.scroll_requests: list[tuple[float, str]] = []
        self.globals: dict[str, object] = {}

    def bounding_top(self, element: Element) -> float:
        """Top of the element relative to the viewport."""
        return element.offset_top - self.scroll_y

    def scroll_to(self, top: float, behavior: str = "auto") -> None:
        self.scroll_requests.append((top, behavior))
        self.set_scroll(top)

    def set_scroll(self, y: float) -> None:
        self.scroll_y = max(0, y)
        self._fire(Event("scroll"))

    def alert(self, message: str) -> None:
        logger.info("alert: %s", message)
        self.alerts.append(message)
