"""Current-weather data models for OpenWeatherMap responses."""

from dataclasses import dataclass
from enum import IntEnum, StrEnum


class UnitMeasurement(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class WeatherCondition(IntEnum):
    """OpenWeatherMap condition codes.

    Codes are grouped by hundreds: 2xx thunderstorm, 3xx drizzle, 5xx rain,
    6xx snow, 7xx atmosphere, 800 clear, 80x clouds.
    """

    UNKNOWN = -1

    THUNDERSTORM_WITH_LIGHT_RAIN = 200
    THUNDERSTORM_WITH_RAIN = 201
    THUNDERSTORM_WITH_HEAVY_RAIN = 202
    LIGHT_THUNDERSTORM = 210
    THUNDERSTORM = 211
    HEAVY_THUNDERSTORM = 212
    RAGGED_THUNDERSTORM = 221
    THUNDERSTORM_WITH_LIGHT_DRIZZLE = 230
    THUNDERSTORM_WITH_DRIZZLE = 231
    THUNDERSTORM_WITH_HEAVY_DRIZZLE = 232

    LIGHT_INTENSITY_DRIZZLE = 300
    DRIZZLE = 301
    HEAVY_INTENSITY_DRIZZLE = 302
    LIGHT_INTENSITY_DRIZZLE_RAIN = 310
    DRIZZLE_RAIN = 311
    HEAVY_INTENSITY_DRIZZLE_RAIN = 312
    SHOWER_RAIN_AND_DRIZZLE = 313
    HEAVY_SHOWER_RAIN_AND_DRIZZLE = 314
    SHOWER_DRIZZLE = 321

    LIGHT_RAIN = 500
    MODERATE_RAIN = 501
    HEAVY_INTENSITY_RAIN = 502
    VERY_HEAVY_RAIN = 503
    EXTREME_RAIN = 504
    FREEZING_RAIN = 511
    LIGHT_INTENSITY_SHOWER_RAIN = 520
    SHOWER_RAIN = 521
    HEAVY_INTENSITY_SHOWER_RAIN = 522
    RAGGED_SHOWER_RAIN = 531

    LIGHT_SNOW = 600
    SNOW = 601
    HEAVY_SNOW = 602
    SLEET = 611
    LIGHT_SHOWER_SLEET = 612
    SHOWER_SLEET = 613
    LIGHT_RAIN_AND_SNOW = 615
    RAIN_AND_SNOW = 616
    LIGHT_SHOWER_SNOW = 620
    SHOWER_SNOW = 621
    HEAVY_SHOWER_SNOW = 622

    MIST = 701
    SMOKE = 711
    HAZE = 721
    SAND_DUST_WHIRLS = 731
    FOG = 741
    SAND = 751
    DUST = 761
    VOLCANIC_ASH = 762
    SQUALLS = 771
    TORNADO = 781

    CLEAR_SKY = 800
    FEW_CLOUDS = 801
    SCATTERED_CLOUDS = 802
    BROKEN_CLOUDS = 803
    OVERCAST_CLOUDS = 804

    @classmethod
    def from_code(cls, code: int) -> "WeatherCondition":
        """Map an API condition code to a member, or UNKNOWN if unrecognized."""
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN

    @property
    def group(self) -> str:
        if self is WeatherCondition.UNKNOWN:
            return "Unknown"
        if self == WeatherCondition.CLEAR_SKY:
            return "Clear"
        return _GROUPS[self.value // 100]


_GROUPS: dict[int, str] = {
    2: "Thunderstorm",
    3: "Drizzle",
    5: "Rain",
    6: "Snow",
    7: "Atmosphere",
    8: "Clouds",
}


@dataclass(frozen=True)
class ForecastInfo:
    city_id: int | None
    city_name: str | None
    weather: WeatherCondition
    temperature: float
    feels_like: float
    pressure: float
    humidity: float
    wind_speed: float
    wind_direction: float
    unit: UnitMeasurement = UnitMeasurement.METRIC
