# ABOUTME: Pure rendering for the weather widget: icons, time formatting, cards and HTML fragments.
# ABOUTME: Turns a validated ForecastItem into a WeatherView and markup without touching the DOM.

from datetime import datetime
from html import escape

from shoresquad.models import ForecastCard, ForecastItem, GeneralForecast, Period, PeriodTime, Range, WeatherView
from shoresquad.scheduling import format_date

DEFAULT_ICON = "🌤️"

# Checked in order, first hit wins. "partly cloudy" contains "cloudy" and so never reaches its own row.
ICON_KEYWORDS: list[tuple[tuple[str, ...], str]] = [
    (("thunder", "storm"), "⛈️"),
    (("heavy rain", "shower"), "🌧️"),
    (("rain", "drizzle"), "🌦️"),
    (("cloudy", "overcast"), "☁️"),
    (("partly cloudy", "fair"), "⛅"),
    (("sunny", "clear"), "☀️"),
    (("hazy", "haze"), "🌫️"),
    (("windy",), "💨"),
]

REGIONS = ["west", "east", "central", "south", "north"]
MAX_PERIOD_CARDS = 3
SOURCE_NAME = "NEA Singapore"


def get_weather_icon(condition: str | None) -> str:
    """Map a forecast condition text to an emoji icon by case-insensitive keyword match."""
    if not condition:
        return DEFAULT_ICON
    text = condition.lower()
    for keywords, icon in ICON_KEYWORDS:
        if any(k in text for k in keywords):
            return icon
    return DEFAULT_ICON


def _clock(value: str) -> str:
    dt = datetime.fromisoformat(value)
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{dt.hour % 12 or 12}:{dt.minute:02d} {suffix}"


def format_period_time(time: PeriodTime | None) -> str:
    """Render a period as '6:00 AM - 12:00 PM' in the timestamps' own UTC offset.

    Missing or unparsable timestamps give 'N/A'.
    """
    if time is None or not time.start or not time.end:
        return "N/A"
    try:
        return f"{_clock(time.start)} - {_clock(time.end)}"
    except (TypeError, ValueError):
        return "N/A"


def format_updated(item: ForecastItem) -> str:
    """Human-readable 'last updated' stamp from timestamp, falling back to update_timestamp."""
    raw = item.timestamp or item.update_timestamp
    if not raw:
        return "N/A"
    try:
        return format_date(datetime.fromisoformat(raw))
    except (TypeError, ValueError):
        return "N/A"


def _num(value: float | None) -> str:
    return "N/A" if value is None else f"{value:g}"


def _span(r: Range, unit: str, sep: str = " - ") -> str:
    return f"{_num(r.low)}{unit}{sep}{_num(r.high)}{unit}"


def general_card(general: GeneralForecast) -> ForecastCard:
    wind = general.wind
    return ForecastCard(
        icon=get_weather_icon(general.forecast),
        title="General Forecast",
        subtitle="Singapore",
        details=[
            ("Condition", general.forecast or "N/A"),
            ("Temperature", _span(general.temperature, "°C")),
            ("Humidity", _span(general.relative_humidity, "%")),
            ("Wind", f"{wind.direction or 'N/A'} {_num(wind.speed.low)}-{_num(wind.speed.high)} km/h"),
        ],
    )


def period_card(period: Period) -> ForecastCard:
    regions = period.regions
    return ForecastCard(
        icon=get_weather_icon(regions.get("west") or "Partly Cloudy"),
        title=format_period_time(period.time),
        subtitle="Regional Forecast",
        details=[(name.capitalize(), regions.get(name) or "N/A") for name in REGIONS],
    )


def build_weather_view(item: ForecastItem) -> WeatherView:
    """One general card (when a condition is present) then up to three period cards in payload order."""
    cards = []
    if item.general.forecast:
        cards.append(general_card(item.general))
    cards.extend(period_card(p) for p in item.periods[:MAX_PERIOD_CARDS])
    return WeatherView(cards=cards, updated=format_updated(item))


def _card_html(card: ForecastCard) -> str:
    rows = "".join(
        '<div class="forecast-detail">'
        f'<span class="forecast-detail-label">{escape(label)}:</span>'
        f'<span class="forecast-detail-value">{escape(value)}</span>'
        "</div>"
        for label, value in card.details
    )
    return (
        '<div class="forecast-card">'
        '<div class="forecast-header">'
        f'<div class="forecast-icon">{card.icon}</div>'
        f'<div><h3 class="forecast-title">{escape(card.title)}</h3>'
        f'<p class="forecast-subtitle">{escape(card.subtitle)}</p></div>'
        "</div>"
        f"{rows}"
        "</div>"
    )


def render_weather_html(view: WeatherView) -> str:
    cards = "".join(_card_html(c) for c in view.cards)
    return (
        f'<div class="weather-forecast-grid">{cards}</div>'
        f'<div class="weather-timestamp">📅 Last updated: {escape(view.updated)} | Source: {SOURCE_NAME}</div>'
    )


def render_loading_html() -> str:
    return f'<div class="loading">🌤️ Fetching live weather from {SOURCE_NAME}...</div>'


def render_error_html(message: str) -> str:
    """Error panel body. The widget appends the retry control after this markup."""
    return (
        '<div class="weather-error">'
        '<div class="weather-error-icon">❌</div>'
        "<h3>Weather Data Unavailable</h3>"
        f"<p>{escape(message)}</p>"
        "</div>"
    )


def render_text(view: WeatherView) -> str:
    """Plain-text rendering of the same cards, for the debug console."""
    lines = []
    for card in view.cards:
        lines.append(f"{card.icon}  {card.title} ({card.subtitle})")
        lines.extend(f"    {label}: {value}" for label, value in card.details)
    lines.append(f"Last updated: {view.updated} | Source: {SOURCE_NAME}")
    return "\n".join(lines)
