"""Console rendering of weather reports - pure line builders plus a printer."""
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from weather_data import WeatherReport

BANNER = "=" * 47
DIVIDER = "-" * 47
TITLE = "    W E A T H E R   S C A N   v1.0"

BANNER_STYLE = "bold white"
TITLE_STYLE = "bold cyan"
PROMPT_STYLE = "bright_black"
LABEL_STYLE = "white"


def format_number(value: float) -> str:
    """Format a number with up to six significant digits, like a C++ stream."""
    return f"{value:g}"


def _field(label: str, value: str, value_style: str) -> Text:
    # Labels are padded with dots to line up the values
    return Text.assemble(
        (">> ", PROMPT_STYLE),
        (f"{label:.<16}: ", LABEL_STYLE),
        (value, value_style),
    )


def format_error_line() -> Text:
    return Text.assemble(
        ("[ERROR] ", "bold red"),
        ("Failed to get weather data.", LABEL_STYLE),
    )


def format_report_lines(report: WeatherReport) -> List[Text]:
    """
    Build the styled lines for a report.

    Args:
        report: Report to render

    Returns:
        A single error line for an invalid report, otherwise the full
        multi-line report with one color per value
    """
    if not report.valid:
        return [format_error_line()]

    return [
        Text(""),
        Text(BANNER, style=BANNER_STYLE),
        Text(TITLE, style=TITLE_STYLE),
        Text(BANNER, style=BANNER_STYLE),
        Text.assemble(
            (">> ", PROMPT_STYLE),
            ("Location", "bold yellow"),
            ("........: ", LABEL_STYLE),
            (report.city, LABEL_STYLE),
        ),
        Text(DIVIDER, style=PROMPT_STYLE),
        _field(
            "Weather",
            f"{report.condition_main} ({report.condition_description})",
            "bold cyan",
        ),
        _field("Temperature", f"{format_number(report.temp)}  C", "bold red"),
        _field("Feels Like", f"{format_number(report.feels_like)}  C", "bold magenta"),
        _field("Humidity", f"{report.humidity} %", "bold blue"),
        _field("Pressure", f"{report.pressure} hPa", "bold yellow"),
        _field("Wind Speed", f"{format_number(report.wind_speed)} m/s", "bold green"),
        Text(DIVIDER, style=PROMPT_STYLE),
        Text.assemble(
            ("[OK] ", "bold green"),
            ("Scan completed successfully.", LABEL_STYLE),
        ),
        Text(BANNER, style=BANNER_STYLE),
        Text(""),
    ]


def display_weather(report: WeatherReport, console: Optional[Console] = None) -> None:
    """Print a report, or a one-line error banner if it is invalid."""
    console = console or Console(highlight=False, soft_wrap=True)
    for line in format_report_lines(report):
        console.print(line)
