"""OpenWeather Current Weather API provider implementation."""
import logging
from typing import Optional

import requests
from rich.console import Console
from rich.text import Text

from weather_data import WeatherReport
from weather_parser import parse_weather
from weather_provider import CityNotFoundError, WeatherProviderBase, WeatherProviderError

DEFAULT_TIMEOUT = 30


class OpenWeatherProvider(WeatherProviderBase):
    """
    Weather provider using OpenWeather Current Weather API.

    Uses the free Current Weather API: https://openweathermap.org/current
    Cities are looked up by name; temperatures arrive in Kelvin and are
    converted by the parser.
    """

    BASE_URL = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(self, api_key: str, timeout: int = DEFAULT_TIMEOUT):
        """
        Initialize OpenWeather provider.

        Args:
            api_key: OpenWeather API key
            timeout: HTTP request timeout in seconds
        """
        self.api_key = api_key
        self.timeout = timeout

    def get_current(self, city: str) -> WeatherReport:
        """
        Fetch current weather for a city from OpenWeather Current Weather API.

        Exactly one request is made; there is no retry.

        Args:
            city: City name, sent as the ``q`` query parameter

        Returns:
            WeatherReport: Parsed report (invalid if the body was malformed)

        Raises:
            CityNotFoundError: If the API answers 404
            WeatherProviderError: On network errors or any other non-200 status
        """
        params = {
            "q": city,
            "appid": self.api_key,
        }

        try:
            logging.info(f"Making OpenWeather API request: {self.BASE_URL}")
            logging.debug(f"Request parameters: q={city}, timeout={self.timeout}")

            with requests.Session() as session:
                response = session.get(
                    self.BASE_URL,
                    params=params,
                    timeout=self.timeout,
                    allow_redirects=True,
                )
                status_code = response.status_code
                body = response.text
        except requests.exceptions.RequestException as e:
            logging.info(f"Network error during API request: {e}")
            raise WeatherProviderError(f"Network error: {str(e)}")

        logging.info(f"API response status: {status_code}")

        if status_code == 404:
            logging.info(f"City not found: {city}")
            raise CityNotFoundError(f"City not found: {city}", status_code=status_code, body=body)
        if status_code != 200:
            logging.info(f"API request failed with status {status_code}, body: {body[:500]}")
            raise WeatherProviderError(
                f"HTTP {status_code}: {body[:200]}", status_code=status_code, body=body
            )

        logging.debug(f"API response (truncated): {body[:500]}...")
        return parse_weather(body)


def fetch_weather(
    provider: WeatherProviderBase,
    city: str,
    console: Optional[Console] = None,
    err_console: Optional[Console] = None,
) -> WeatherReport:
    """
    Run the fetch stage for one city, reporting progress and failures.

    Provider errors are printed and turned into an invalid report so the
    caller always gets something to display.
    """
    console = console or Console(highlight=False, soft_wrap=True)
    err_console = err_console or Console(stderr=True, highlight=False, soft_wrap=True)

    console.print(Text(f"Fetching weather data for {city}..."))
    try:
        return provider.get_current(city)
    except CityNotFoundError:
        console.print(Text("City not found! Please check the spelling."))
    except WeatherProviderError as err:
        if err.status_code is None:
            err_console.print(Text(f"Request failed: {err}"))
        else:
            console.print(Text(f"API Error. HTTP Code: {err.status_code}"))
            console.print(Text(f"Response: {err.body}"))
    return WeatherReport.invalid(city)
