"""OpenWeatherMap current-weather and bulk city list client."""

import logging
from typing import Any

import httpx

from weathermap.config.schema import (
    DEFAULT_USER_AGENT,
    OWM_BASE_URL,
    OWM_CITY_LIST_URL,
    ClientConfig,
)
from weathermap.ingest.city_list import build_city_table, decode_city_list
from weathermap.ingest.errors import (
    HttpStatusError,
    MissingFieldError,
    ParseError,
    TransportError,
)
from weathermap.models.forecast import ForecastInfo, UnitMeasurement, WeatherCondition

logger = logging.getLogger(__name__)

WEATHER_PATH = "/data/2.5/weather"


class OpenWeatherMapClient:
    """Synchronous client for the OpenWeatherMap current-weather API.

    The client keeps no state between calls. Pass an ``httpx.Client`` to share
    a connection pool or to substitute a mock transport; otherwise each call
    goes through the module-level ``httpx.get``.
    """

    def __init__(
        self,
        base_url: str = OWM_BASE_URL,
        city_list_url: str = OWM_CITY_LIST_URL,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        http_client: httpx.Client | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.city_list_url = city_list_url
        self.timeout = timeout
        self.user_agent = user_agent
        self.http_client = http_client

    @classmethod
    def from_config(
        cls, config: ClientConfig, http_client: httpx.Client | None = None
    ) -> "OpenWeatherMapClient":
        return cls(
            base_url=config.base_url,
            city_list_url=config.city_list_url,
            timeout=config.timeout,
            user_agent=config.user_agent,
            http_client=http_client,
        )

    def get_weather_by_id(
        self,
        city_id: int,
        api_key: str,
        unit: UnitMeasurement = UnitMeasurement.METRIC,
        timeout: float | None = None,
    ) -> ForecastInfo:
        """Fetch current weather for a city id. The result echoes city_id."""
        unit = UnitMeasurement(unit)
        data = self._fetch_weather({"id": city_id}, api_key, unit, timeout)
        return _extract_forecast(data, unit, city_id=city_id)

    def get_weather_by_name(
        self,
        city_name: str,
        api_key: str,
        unit: UnitMeasurement = UnitMeasurement.METRIC,
        timeout: float | None = None,
    ) -> ForecastInfo:
        """Fetch current weather for a city name. The result echoes city_name."""
        unit = UnitMeasurement(unit)
        data = self._fetch_weather({"q": city_name}, api_key, unit, timeout)
        return _extract_forecast(data, unit, city_name=city_name)

    def list_all_cities(
        self, timeout: float | None = None, strict: bool = False
    ) -> dict[int, str]:
        """Download the bulk city list and return a city id -> name mapping.

        The whole compressed document is held in memory and decompressed in
        one pass. See build_city_table for duplicate and malformed entry
        handling.
        """
        logger.debug("City list URL: %s", self.city_list_url)
        resp = self._get(self.city_list_url, None, timeout)

        # httpx has already inflated the body if the server used
        # Content-Encoding rather than serving the .gz file as-is
        if "gzip" in resp.headers.get("content-encoding", ""):
            return decode_city_list(resp.content, strict=strict)
        return build_city_table(resp.content, strict=strict)

    def _fetch_weather(
        self,
        query: dict[str, Any],
        api_key: str,
        unit: UnitMeasurement,
        timeout: float | None,
    ) -> dict:
        params = {**query, "appid": api_key, "units": unit.value}
        url = f"{self.base_url}{WEATHER_PATH}"
        logger.debug(
            "Weather request %s with %s (units=%s)",
            url, _redact(params), unit.value,
        )

        resp = self._get(url, params, timeout)
        try:
            data = resp.json()
        except ValueError as e:
            logger.error("OpenWeatherMap returned invalid JSON for %s: %s", query, e)
            raise ParseError(f"Weather response is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ParseError(
                f"Weather response must be a JSON object, got {type(data).__name__}"
            )
        return data

    def _get(
        self, url: str, params: dict[str, Any] | None, timeout: float | None
    ) -> httpx.Response:
        headers = {"User-Agent": self.user_agent}
        sender = self.http_client if self.http_client is not None else httpx
        try:
            resp = sender.get(
                url,
                params=params,
                headers=headers,
                timeout=self.timeout if timeout is None else timeout,
            )
        except httpx.RequestError as e:
            logger.error("OpenWeatherMap request to %s failed: %s", url, e)
            raise TransportError(f"Request to {url} failed: {e}") from e

        if not resp.is_success:
            logger.error("OpenWeatherMap %s returned %d", url, resp.status_code)
            raise HttpStatusError(resp.status_code, resp.text, url)
        return resp


def _redact(params: dict[str, Any]) -> dict[str, Any]:
    return {k: ("***" if k == "appid" else v) for k, v in params.items()}


def _extract_forecast(
    data: dict,
    unit: UnitMeasurement,
    city_id: int | None = None,
    city_name: str | None = None,
) -> ForecastInfo:
    """Map a /weather response body onto ForecastInfo.

    Whichever of city_id / city_name the caller supplied is echoed; the other
    is read from the response.
    """
    if city_id is None:
        city_id = _require_int(data, "id")
    if city_name is None:
        city_name = _require_str(data, "name")

    return ForecastInfo(
        city_id=city_id,
        city_name=city_name,
        weather=WeatherCondition.from_code(_condition_code(data)),
        temperature=_require_number(data, "main.temp"),
        feels_like=_require_number(data, "main.feels_like"),
        pressure=_require_number(data, "main.pressure"),
        humidity=_require_number(data, "main.humidity"),
        wind_speed=_require_number(data, "wind.speed"),
        wind_direction=_require_number(data, "wind.deg"),
        unit=unit,
    )


def _condition_code(data: dict) -> int:
    weather = _require(data, "weather")
    if not isinstance(weather, list):
        raise ParseError(f"Field 'weather' must be an array, got {type(weather).__name__}")
    if not weather:
        raise MissingFieldError("weather[0].id")
    first = weather[0]
    if not isinstance(first, dict):
        raise ParseError("Field 'weather[0]' must be an object")
    if first.get("id") is None:
        raise MissingFieldError("weather[0].id")
    code = first["id"]
    if not isinstance(code, int) or isinstance(code, bool):
        raise ParseError(f"Field 'weather[0].id' must be an integer, got {code!r}")
    return code


def _require(data: dict, path: str) -> Any:
    obj: Any = data
    walked: list[str] = []
    for part in path.split("."):
        if not isinstance(obj, dict):
            raise ParseError(f"Field '{'.'.join(walked)}' must be an object")
        if obj.get(part) is None:
            raise MissingFieldError(path)
        obj = obj[part]
        walked.append(part)
    return obj


def _require_number(data: dict, path: str) -> float:
    value = _require(data, path)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(f"Field '{path}' must be numeric, got {value!r}")
    return float(value)


def _require_int(data: dict, path: str) -> int:
    value = _require(data, path)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParseError(f"Field '{path}' must be an integer, got {value!r}")
    return value


def _require_str(data: dict, path: str) -> str:
    value = _require(data, path)
    if not isinstance(value, str):
        raise ParseError(f"Field '{path}' must be a string, got {value!r}")
    return value
