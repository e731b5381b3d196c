# ABOUTME: Debug console for the ShoreSquad page client.
# ABOUTME: Fetches and prints the forecast, checks the API, boots the page headless and manages saved preferences.

import argparse
import asyncio
import json
import logging

import httpx

from shoresquad.app import init_page
from shoresquad.config import Settings, load_settings
from shoresquad.deps import PageDeps, create_http_client
from shoresquad.dom import Window
from shoresquad.page import build_landing_page
from shoresquad.preferences import FileStorage, load_preferences, save_preferences
from shoresquad.scheduling import AsyncioScheduler
from shoresquad.weather_service import get_forecast
from shoresquad.weather_view import build_weather_view, render_error_html, render_text, render_weather_html

COMMANDS = {
    "weather": "Fetch the forecast and print the rendered cards",
    "test-api": "Call the forecast endpoint directly and report status",
    "test-error": "Print the weather error panel for a synthetic failure",
    "page": "Boot the landing page headless and print its state",
    "prefs": "Show or save stored user preferences",
    "info": "Show this help",
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="shoresquad",
        description="ShoreSquad debug console",
    )
    sub = parser.add_subparsers(dest="command")

    weather_p = sub.add_parser("weather", help=COMMANDS["weather"])
    weather_p.add_argument("--html", action="store_true", help="Print the HTML fragment instead of text")

    sub.add_parser("test-api", help=COMMANDS["test-api"])
    sub.add_parser("test-error", help=COMMANDS["test-error"])
    sub.add_parser("page", help=COMMANDS["page"])

    prefs_p = sub.add_parser("prefs", help=COMMANDS["prefs"])
    prefs_sub = prefs_p.add_subparsers(dest="prefs_command")
    prefs_sub.add_parser("show", help="Print stored preferences")
    save_p = prefs_sub.add_parser("save", help="Overwrite stored preferences with a JSON object")
    save_p.add_argument("json", help='JSON object, e.g. \'{"location": "East Coast"}\'')

    sub.add_parser("info", help=COMMANDS["info"])

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "weather":
        return asyncio.run(_cmd_weather(settings, args.html))
    elif args.command == "test-api":
        return asyncio.run(_cmd_test_api(settings))
    elif args.command == "test-error":
        return _cmd_test_error()
    elif args.command == "page":
        return asyncio.run(_cmd_page(settings))
    elif args.command == "prefs":
        return _cmd_prefs(settings, args)
    else:
        return _cmd_info()


async def _cmd_weather(settings: Settings, as_html: bool) -> int:
    client = create_http_client(settings)
    try:
        item = await get_forecast(client, settings.forecast_url)
    except (httpx.HTTPError, ValueError) as e:
        print(f"Weather data unavailable: {e}")
        return 1
    finally:
        await client.aclose()

    view = build_weather_view(item)
    print(render_weather_html(view) if as_html else render_text(view))
    return 0


async def _cmd_test_api(settings: Settings) -> int:
    client = create_http_client(settings)
    try:
        resp = await client.get(settings.forecast_url)
        print(f"Status: {resp.status_code}")
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        print(f"API error: {e}")
        return 1
    finally:
        await client.aclose()

    items = data.get("items") if isinstance(data, dict) else None
    print("API response OK")
    print(f"Items: {len(items or [])}")
    return 0


def _cmd_test_error() -> int:
    try:
        raise RuntimeError("This is a test error")
    except RuntimeError as e:
        print(render_error_html(f"Test error: {e}"))
    return 0


async def _cmd_page(settings: Settings) -> int:
    document = build_landing_page()
    client = create_http_client(settings)
    deps = PageDeps(
        document=document,
        window=Window(document),
        storage=FileStorage(settings.prefs_path),
        scheduler=AsyncioScheduler(),
        http_client=client,
        settings=settings,
    )
    try:
        page = init_page(deps)
        if page.weather is not None and page.weather.last_task is not None:
            await page.weather.last_task
    finally:
        await client.aclose()

    print(page.state.model_dump_json(indent=2))
    if page.failures:
        print(f"Failed initializers: {', '.join(page.failures)}")
        return 1
    return 0


def _cmd_prefs(settings: Settings, args) -> int:
    storage = FileStorage(settings.prefs_path)
    if args.prefs_command == "show":
        try:
            prefs = load_preferences(storage, settings.preferences_key)
        except ValueError as e:
            print(f"Error: cannot read stored preferences: {e}")
            return 1
        print("No preferences saved" if prefs is None else json.dumps(prefs, indent=2))
        return 0
    elif args.prefs_command == "save":
        try:
            prefs = json.loads(args.json)
        except json.JSONDecodeError as e:
            print(f"Error: {e}")
            return 1
        if not isinstance(prefs, dict):
            print("Error: preferences must be a JSON object")
            return 1
        try:
            save_preferences(storage, prefs, settings.preferences_key)
        except ValueError as e:
            print(f"Error: cannot write preferences: {e}")
            return 1
        print("Preferences saved")
        return 0
    else:
        print("Use: prefs show | prefs save JSON")
        return 1


def _cmd_info() -> int:
    print("ShoreSquad Debug Console")
    print("========================")
    for name, help_text in COMMANDS.items():
        print(f"  {name:<12} {help_text}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
