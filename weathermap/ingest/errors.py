"""Exceptions raised by the OpenWeatherMap client."""


class WeatherMapError(Exception):
    """Base class for all client errors."""


class TransportError(WeatherMapError):
    """Connection, DNS or timeout failure before a response arrived."""


class HttpStatusError(WeatherMapError):
    def __init__(self, status_code: int, body: str, url: str = ""):
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(f"HTTP {status_code} from {url or 'OpenWeatherMap'}: {body[:200]}")


class ParseError(WeatherMapError):
    """Response body is not well-formed JSON or has the wrong shape."""


class MissingFieldError(WeatherMapError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Response is missing required field: {field}")


class DecompressionError(WeatherMapError):
    """Bulk city list payload is not valid gzip data."""


class MalformedEntryError(WeatherMapError):
    def __init__(self, index: int, entry: object):
        self.index = index
        self.entry = entry
        super().__init__(f"City list entry {index} lacks a usable id or name: {entry!r}")
