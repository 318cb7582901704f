"""Parse OpenWeather Current Weather API payloads into WeatherReport."""
import json
import logging
import math
from typing import Any, Union

from weather_data import WeatherReport, kelvin_to_celsius


def _number(block: dict, key: str, default: float) -> float:
    value = block.get(key, default)
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"'{key}' is not a number: {value!r}")
    # json.loads accepts NaN, Infinity and overflowing literals like 1e400
    if not math.isfinite(value):
        raise ValueError(f"'{key}' is not a finite number: {value!r}")
    return value


def _text(block: dict, key: str, default: str) -> str:
    value = block.get(key, default)
    if not isinstance(value, str):
        raise TypeError(f"'{key}' is not a string: {value!r}")
    return value


def _object(data: Any, key: str) -> dict:
    block = data.get(key)
    if not isinstance(block, dict):
        raise KeyError(f"Response missing '{key}' block")
    return block


def parse_weather(body: Union[str, bytes]) -> WeatherReport:
    """
    Parse a raw JSON response body into a WeatherReport.

    Keys missing inside the 'main', 'weather' and 'wind' blocks take
    defaults; a missing block, malformed JSON or a field of the wrong type
    yields an invalid report. Never raises.

    Args:
        body: Raw response body

    Returns:
        WeatherReport: Valid on success, invalid on any parse failure
    """
    try:
        data = json.loads(body)
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
        logging.debug(f"API response data keys: {list(data.keys())}")

        main_data = _object(data, "main")
        wind_data = _object(data, "wind")

        weather_array = data.get("weather")
        if not isinstance(weather_array, list) or not weather_array:
            raise KeyError("Response missing 'weather' array")
        weather = weather_array[0]
        if not isinstance(weather, dict):
            raise TypeError("'weather' entry is not an object")

        report = WeatherReport(
            city=_text(data, "name", "Unknown City"),
            temp=kelvin_to_celsius(float(_number(main_data, "temp", 0.0))),
            feels_like=kelvin_to_celsius(float(_number(main_data, "feels_like", 0.0))),
            humidity=int(_number(main_data, "humidity", 0)),
            pressure=int(_number(main_data, "pressure", 0)),
            condition_main=_text(weather, "main", "Unknown"),
            condition_description=_text(weather, "description", "No description"),
            wind_speed=float(_number(wind_data, "speed", 0.0)),
        )
    except (KeyError, IndexError, TypeError, ValueError, OverflowError, RecursionError) as e:
        # deeply nested bodies exhaust the decoder with RecursionError
        logging.info(f"Failed to parse API response: {e}")
        return WeatherReport.invalid()

    logging.info(f"Successfully parsed weather data: {report.temp:.2f}°C, {report.condition_main}")
    return report
