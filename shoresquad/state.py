# ABOUTME: Explicit application state and the small state machines behind the interactive regions.
# ABOUTME: Menu and weather-panel transitions are pure functions over enum states.

from enum import Enum

from pydantic import BaseModel


class MenuState(str, Enum):
    COLLAPSED = "collapsed"
    EXPANDED = "expanded"


class PanelState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


_MENU_TRANSITIONS = {
    (MenuState.COLLAPSED, "toggle"): MenuState.EXPANDED,
    (MenuState.EXPANDED, "toggle"): MenuState.COLLAPSED,
    (MenuState.COLLAPSED, "collapse"): MenuState.COLLAPSED,
    (MenuState.EXPANDED, "collapse"): MenuState.COLLAPSED,
}

# Overlapping refreshes resolve in any order, so only a never-started panel rejects success.
_PANEL_TRANSITIONS = {
    "start": {PanelState.IDLE, PanelState.LOADING, PanelState.LOADED, PanelState.ERROR},
    "succeed": {PanelState.LOADING, PanelState.LOADED, PanelState.ERROR},
    "fail": {PanelState.IDLE, PanelState.LOADING, PanelState.LOADED, PanelState.ERROR},
}

_PANEL_TARGETS = {
    "start": PanelState.LOADING,
    "succeed": PanelState.LOADED,
    "fail": PanelState.ERROR,
}


def menu_transition(state: MenuState, action: str) -> MenuState:
    """Return the menu state after a 'toggle' or 'collapse' action."""
    try:
        return _MENU_TRANSITIONS[(state, action)]
    except KeyError:
        raise ValueError(f"Unknown menu action: {action}") from None


def panel_transition(state: PanelState, action: str) -> PanelState:
    """Return the weather panel state after 'start', 'succeed' or 'fail'."""
    allowed = _PANEL_TRANSITIONS.get(action)
    if allowed is None:
        raise ValueError(f"Unknown panel action: {action}")
    if state not in allowed:
        raise ValueError(f"Cannot {action} from {state.value}")
    return _PANEL_TARGETS[action]


class AppState(BaseModel):
    """Per-page state. Each component writes only its own fields."""

    menu: MenuState = MenuState.COLLAPSED
    weather: PanelState = PanelState.IDLE
    active_section: str = ""
    header_scrolled: bool = False
    active_filter: str = "all"
    preferences: dict | None = None
