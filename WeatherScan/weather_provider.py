"""Weather provider abstraction - allows swapping different weather APIs."""
from abc import ABC, abstractmethod
from typing import Optional

from weather_data import WeatherReport


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_current(self, city: str) -> WeatherReport:
        """
        Fetch current weather for a city.

        Args:
            city: City name as typed by the user

        Returns:
            WeatherReport: Current weather information (invalid if the
            response could not be parsed)

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class CityNotFoundError(WeatherProviderError):
    """The provider does not know the requested city."""
    pass
