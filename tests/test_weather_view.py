# ABOUTME: Tests for weather rendering: icon selection, time formatting, card building and HTML output.
# ABOUTME: All functions under test are pure, so no DOM or HTTP mocking is needed.

import pytest
from conftest import SAMPLE_PAYLOAD

from shoresquad.models import ForecastItem, PeriodTime, WeatherView
from shoresquad.weather_service import parse_forecast
from shoresquad.weather_view import (
    DEFAULT_ICON,
    build_weather_view,
    format_period_time,
    format_updated,
    get_weather_icon,
    render_error_html,
    render_text,
    render_weather_html,
)


class TestGetWeatherIcon:
    @pytest.mark.parametrize(
        "condition, icon",
        [
            ("Thundery Showers", "⛈️"),
            ("STORM WARNING", "⛈️"),
            ("Heavy Rain", "🌧️"),
            ("Passing Showers", "🌧️"),
            ("Light Rain", "🌦️"),
            ("Drizzle", "🌦️"),
            ("Overcast", "☁️"),
            ("Fair (Day)", "⛅"),
            ("Sunny", "☀️"),
            ("clear skies", "☀️"),
            ("Hazy", "🌫️"),
            ("Windy", "💨"),
        ],
    )
    def test_keyword_maps_to_icon(self, condition, icon):
        """Each keyword group maps to its icon regardless of case.

        Implementation: Parametrized over one condition per keyword group.
        Passing implies: Substring matching is case-insensitive.
        """
        assert get_weather_icon(condition) == icon

    def test_first_match_wins(self):
        """A condition matching several groups gets the earliest group's icon.

        Implementation: "Partly Cloudy" contains "cloudy", which is checked before "partly cloudy".
        Passing implies: Keyword priority order is honoured.
        """
        assert get_weather_icon("Partly Cloudy (Day)") == "☁️"
        assert get_weather_icon("Windy with thunder") == "⛈️"

    @pytest.mark.parametrize("condition", ["", None, "Mist", "Snow"])
    def test_default_icon(self, condition):
        """Unrecognised, empty or missing conditions get the default icon.

        Implementation: Parametrized over inputs that match no keyword.
        Passing implies: The icon lookup never raises.
        """
        assert get_weather_icon(condition) == DEFAULT_ICON


class TestFormatPeriodTime:
    def test_twelve_hour_clock(self):
        """Periods render as 'h:mm AM - h:mm PM'.

        Implementation: Formats a morning-to-noon period.
        Passing implies: Noon is 12:00 PM and hours are not zero-padded.
        """
        time = PeriodTime(start="2024-01-15T06:00:00+08:00", end="2024-01-15T12:00:00+08:00")
        assert format_period_time(time) == "6:00 AM - 12:00 PM"

    def test_midnight_is_twelve_am(self):
        """Midnight renders as 12:00 AM.

        Implementation: Formats an evening-to-midnight period.
        Passing implies: Hour 0 maps to 12 in the AM half.
        """
        time = PeriodTime(start="2024-01-15T18:30:00+08:00", end="2024-01-16T00:00:00+08:00")
        assert format_period_time(time) == "6:30 PM - 12:00 AM"

    @pytest.mark.parametrize(
        "time",
        [None, PeriodTime(), PeriodTime(start="2024-01-15T06:00:00+08:00"), PeriodTime(start="soon", end="later")],
    )
    def test_bad_input_degrades_to_placeholder(self, time):
        """Missing or unparsable timestamps give 'N/A' instead of raising.

        Implementation: Parametrized over absent and garbage timestamps.
        Passing implies: One bad period does not abort the whole render.
        """
        assert format_period_time(time) == "N/A"


class TestFormatUpdated:
    def test_uses_timestamp(self):
        """The stamp comes from timestamp when present.

        Implementation: Formats an item with both timestamps.
        Passing implies: timestamp takes precedence over update_timestamp.
        """
        item = ForecastItem(timestamp="2024-01-15T05:30:00+08:00", update_timestamp="2024-01-15T05:36:28+08:00")
        assert format_updated(item) == "Jan 15, 2024, 05:30 AM"

    def test_falls_back_to_update_timestamp(self):
        item = ForecastItem(update_timestamp="2024-01-15T17:05:00+08:00")
        assert format_updated(item) == "Jan 15, 2024, 05:05 PM"

    def test_unparsable_is_placeholder(self):
        assert format_updated(ForecastItem(timestamp="yesterday")) == "N/A"
        assert format_updated(ForecastItem()) == "N/A"


class TestBuildWeatherView:
    def test_general_plus_three_periods(self):
        """A payload with four periods renders one general card and three period cards.

        Implementation: Builds the view from the sample payload.
        Passing implies: Period cards are capped at three and keep payload order.
        """
        view = build_weather_view(parse_forecast(SAMPLE_PAYLOAD))

        assert len(view.cards) == 4
        assert view.cards[0].title == "General Forecast"
        assert [c.title for c in view.cards[1:]] == ["6:00 AM - 12:00 PM", "12:00 PM - 6:00 PM", "6:00 PM - 6:00 AM"]
        assert all(c.subtitle == "Regional Forecast" for c in view.cards[1:])

    @pytest.mark.parametrize("n_periods, expected", [(0, 1), (1, 2), (3, 4), (5, 4)])
    def test_card_count(self, n_periods, expected):
        """Card count is 1 + min(N, 3).

        Implementation: Builds views over payloads with N generated periods.
        Passing implies: The render path never produces partial or excess cards.
        """
        periods = [{"time": {"start": "2024-01-15T06:00:00+08:00", "end": "2024-01-15T12:00:00+08:00"},
                    "regions": {"west": f"Cloudy {i}"}} for i in range(n_periods)]
        item = ForecastItem.model_validate({"general": {"forecast": "Fair"}, "periods": periods})
        view = build_weather_view(item)

        assert len(view.cards) == expected
        assert [c.details[0][1] for c in view.cards[1:]] == [f"Cloudy {i}" for i in range(min(n_periods, 3))]

    def test_general_card_details(self):
        """The general card lists condition, temperature, humidity and wind.

        Implementation: Reads the general card built from the sample payload.
        Passing implies: Ranges render with units and integers without decimals.
        """
        card = build_weather_view(parse_forecast(SAMPLE_PAYLOAD)).cards[0]

        assert card.icon == "⛈️"
        assert dict(card.details) == {
            "Condition": "Thundery Showers",
            "Temperature": "24°C - 32°C",
            "Humidity": "65% - 95%",
            "Wind": "NNE 10-20 km/h",
        }

    def test_missing_general_parts_show_na(self):
        """Missing temperature, humidity or wind values render as N/A.

        Implementation: Builds a view with only a condition in the general block.
        Passing implies: Partial data does not raise.
        """
        card = build_weather_view(ForecastItem.model_validate({"general": {"forecast": "Hazy"}})).cards[0]
        details = dict(card.details)

        assert details["Temperature"] == "N/A°C - N/A°C"
        assert details["Wind"] == "N/A N/A-N/A km/h"

    def test_no_condition_skips_general_card(self):
        """Without a general condition only period cards are rendered.

        Implementation: Builds a view whose general block is empty.
        Passing implies: The general card depends on the condition text.
        """
        item = ForecastItem.model_validate({"periods": [{"regions": {"west": "Fair"}}]})
        view = build_weather_view(item)

        assert len(view.cards) == 1
        assert view.cards[0].title == "N/A"

    def test_period_card_regions(self):
        """Period cards list the five regions with N/A for missing ones and take the icon from the west.

        Implementation: Builds a view from a single period that only names the east region.
        Passing implies: Region rows are always present in a fixed order.
        """
        item = ForecastItem.model_validate({"periods": [{"regions": {"east": "Showers"}}]})
        card = build_weather_view(item).cards[0]

        assert [label for label, _ in card.details] == ["West", "East", "Central", "South", "North"]
        assert dict(card.details)["East"] == "Showers"
        assert dict(card.details)["West"] == "N/A"
        # West missing falls back to "Partly Cloudy", which hits the cloudy keyword
        assert card.icon == "☁️"


class TestRenderHtml:
    def test_weather_html_contains_cards_and_stamp(self):
        """The forecast fragment holds one forecast-card per card plus the timestamp line.

        Implementation: Renders the sample view and counts card markers.
        Passing implies: HTML output matches the view model.
        """
        html = render_weather_html(build_weather_view(parse_forecast(SAMPLE_PAYLOAD)))

        assert html.count('class="forecast-card"') == 4
        assert "Last updated: Jan 15, 2024, 05:30 AM | Source: NEA Singapore" in html

    def test_values_are_escaped(self):
        """Condition text is HTML-escaped.

        Implementation: Renders a condition containing markup.
        Passing implies: Upstream text cannot inject markup into the page.
        """
        item = ForecastItem.model_validate({"general": {"forecast": "<b>Rain</b>"}})
        html = render_weather_html(build_weather_view(item))

        assert "<b>Rain</b>" not in html
        assert "&lt;b&gt;Rain&lt;/b&gt;" in html

    def test_error_html_includes_message(self):
        html = render_error_html("Failed to load weather data: boom")
        assert "Weather Data Unavailable" in html
        assert "Failed to load weather data: boom" in html

    def test_text_rendering(self):
        text = render_text(WeatherView(updated="Jan 15, 2024, 05:30 AM"))
        assert text == "Last updated: Jan 15, 2024, 05:30 AM | Source: NEA Singapore"
