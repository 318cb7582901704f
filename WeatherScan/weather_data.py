"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass

KELVIN_OFFSET = 273.15


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert a Kelvin temperature to Celsius."""
    return kelvin - KELVIN_OFFSET


@dataclass(frozen=True)
class WeatherReport:
    """Current conditions for one city, built once by the parser."""
    city: str
    temp: float  # Celsius
    feels_like: float  # Celsius
    humidity: int  # percentage
    pressure: int  # hPa
    condition_main: str  # e.g., "Clouds", "Rain", "Clear"
    condition_description: str  # e.g., "broken clouds", "light rain"
    wind_speed: float  # m/s
    valid: bool = True

    @classmethod
    def invalid(cls, city: str = "") -> "WeatherReport":
        """Build a report whose data fields must not be displayed."""
        return cls(
            city=city,
            temp=0.0,
            feels_like=0.0,
            humidity=0,
            pressure=0,
            condition_main="",
            condition_description="",
            wind_speed=0.0,
            valid=False,
        )
