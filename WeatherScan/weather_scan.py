"""Command-line weather scan for a single city."""
import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.text import Text

from openweather_provider import DEFAULT_TIMEOUT, OpenWeatherProvider, fetch_weather
from report_display import display_weather

API_KEY_ENV = "API_KEY"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("weather-scan", description="Show current weather for a city")
    # Optional here so a missing city exits 1 like a missing key, not argparse's 2
    parser.add_argument("city", nargs="?", help="City name, e.g. London")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.WARNING
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def load_api_key() -> Optional[str]:
    load_dotenv()
    return os.getenv(API_KEY_ENV)


def print_config_error(console: Console, message: str) -> None:
    console.print(Text.assemble(("[ERROR] ", "bold red"), message))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    console = Console(highlight=False, soft_wrap=True)
    err_console = Console(stderr=True, highlight=False, soft_wrap=True)

    api_key = load_api_key()
    if api_key is None:
        print_config_error(err_console, "API key not found in environment variables.")
        return 1
    if args.city is None:
        print_config_error(err_console, "Please provide a city name as a command-line argument.")
        return 1

    logging.info("Configuration loaded: city=%s timeout=%ss", args.city, DEFAULT_TIMEOUT)
    provider = OpenWeatherProvider(api_key=api_key, timeout=DEFAULT_TIMEOUT)
    weather = fetch_weather(provider, args.city, console=console, err_console=err_console)
    display_weather(weather, console=console)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
