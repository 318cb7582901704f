"""Tests for OpenWeather provider."""
import io
import json
from unittest.mock import Mock, patch

import pytest
import requests
from rich.console import Console
from openweather_provider import OpenWeatherProvider, fetch_weather
from weather_provider import CityNotFoundError, WeatherProviderError
from weather_data import WeatherReport


@pytest.fixture
def sample_openweather_response():
    """Sample OpenWeather API response."""
    return {
        "weather": [
            {
                "id": 500,
                "main": "Rain",
                "description": "light rain",
                "icon": "10d"
            }
        ],
        "main": {
            "temp": 283.15,
            "feels_like": 281.65,
            "pressure": 1008,
            "humidity": 82
        },
        "wind": {"speed": 6.2, "deg": 240},
        "name": "Paris",
        "cod": 200
    }


@pytest.fixture
def provider():
    """Create OpenWeather provider instance."""
    return OpenWeatherProvider(api_key="test_key")


def make_response(status_code, body):
    mock_response = Mock()
    mock_response.status_code = status_code
    mock_response.text = body
    return mock_response


def make_console():
    return Console(file=io.StringIO(), color_system=None, highlight=False, soft_wrap=True)


def test_openweather_provider_success(provider, sample_openweather_response):
    """Test successful API call and parsing."""
    with patch('openweather_provider.requests.Session') as mock_session_cls:
        session = mock_session_cls.return_value.__enter__.return_value
        session.get.return_value = make_response(200, json.dumps(sample_openweather_response))

        weather = provider.get_current("Paris")

        assert isinstance(weather, WeatherReport)
        assert weather.valid is True
        assert weather.city == "Paris"
        assert weather.temp == pytest.approx(10.0)
        assert weather.feels_like == pytest.approx(8.5)
        assert weather.humidity == 82
        assert weather.pressure == 1008
        assert weather.condition_main == "Rain"
        assert weather.condition_description == "light rain"
        assert weather.wind_speed == 6.2


def test_openweather_provider_request_parameters(provider, sample_openweather_response):
    """One GET with city, key, 30s timeout and redirects followed."""
    with patch('openweather_provider.requests.Session') as mock_session_cls:
        session = mock_session_cls.return_value.__enter__.return_value
        session.get.return_value = make_response(200, json.dumps(sample_openweather_response))

        provider.get_current("New York")

        session.get.assert_called_once_with(
            OpenWeatherProvider.BASE_URL,
            params={"q": "New York", "appid": "test_key"},
            timeout=30,
            allow_redirects=True,
        )
        # Session is released once the request is done
        mock_session_cls.return_value.__exit__.assert_called_once()


def test_openweather_provider_malformed_body(provider):
    """A 200 with a broken body gives an invalid report, not an error."""
    with patch('openweather_provider.requests.Session') as mock_session_cls:
        session = mock_session_cls.return_value.__enter__.return_value
        session.get.return_value = make_response(200, '{"main": {"temp": ')

        weather = provider.get_current("Paris")

        assert weather.valid is False


def test_openweather_provider_not_found(provider):
    """404 raises CityNotFoundError without parsing the body."""
    with patch('openweather_provider.requests.Session') as mock_session_cls, \
            patch('openweather_provider.parse_weather') as mock_parse:
        session = mock_session_cls.return_value.__enter__.return_value
        session.get.return_value = make_response(404, '{"cod":"404","message":"city not found"}')

        with pytest.raises(CityNotFoundError) as exc_info:
            provider.get_current("Atlantis")

        assert exc_info.value.status_code == 404
        mock_parse.assert_not_called()


def test_openweather_provider_http_error(provider):
    """Test handling of other HTTP errors."""
    body = '{"cod":401, "message": "Invalid API key"}'
    with patch('openweather_provider.requests.Session') as mock_session_cls:
        session = mock_session_cls.return_value.__enter__.return_value
        session.get.return_value = make_response(401, body)

        with pytest.raises(WeatherProviderError) as exc_info:
            provider.get_current("Paris")

        assert not isinstance(exc_info.value, CityNotFoundError)
        assert exc_info.value.status_code == 401
        assert exc_info.value.body == body
        assert "401" in str(exc_info.value)


def test_openweather_provider_network_error(provider):
    """Test handling of network errors."""
    with patch('openweather_provider.requests.Session') as mock_session_cls:
        session = mock_session_cls.return_value.__enter__.return_value
        session.get.side_effect = requests.exceptions.ConnectTimeout("Connection timeout")

        with pytest.raises(WeatherProviderError) as exc_info:
            provider.get_current("Paris")

        assert exc_info.value.status_code is None
        assert "Network error" in str(exc_info.value)
        assert session.get.call_count == 1


def test_fetch_weather_success(sample_openweather_response):
    expected = WeatherReport(
        city="Paris", temp=10.0, feels_like=8.5, humidity=82, pressure=1008,
        condition_main="Rain", condition_description="light rain", wind_speed=6.2,
    )
    provider = Mock()
    provider.get_current.return_value = expected
    console = make_console()

    weather = fetch_weather(provider, "Paris", console=console, err_console=make_console())

    assert weather is expected
    assert "Fetching weather data for Paris..." in console.file.getvalue()


def test_fetch_weather_city_not_found():
    provider = Mock()
    provider.get_current.side_effect = CityNotFoundError("City not found: Atlantis", status_code=404)
    console = make_console()

    weather = fetch_weather(provider, "Atlantis", console=console, err_console=make_console())

    assert weather.valid is False
    assert "City not found! Please check the spelling." in console.file.getvalue()


def test_fetch_weather_api_error():
    provider = Mock()
    provider.get_current.side_effect = WeatherProviderError(
        "HTTP 500: oops", status_code=500, body="oops"
    )
    console = make_console()

    weather = fetch_weather(provider, "Paris", console=console, err_console=make_console())

    output = console.file.getvalue()
    assert weather.valid is False
    assert "API Error. HTTP Code: 500" in output
    assert "Response: oops" in output


def test_fetch_weather_network_error():
    provider = Mock()
    provider.get_current.side_effect = WeatherProviderError("Network error: timed out")
    console = make_console()
    err_console = make_console()

    weather = fetch_weather(provider, "Paris", console=console, err_console=err_console)

    assert weather.valid is False
    assert "Request failed: Network error: timed out" in err_console.file.getvalue()
    assert "Request failed" not in console.file.getvalue()
