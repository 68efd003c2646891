"""Pydantic v2 configuration schema for the OpenWeatherMap client."""

from pydantic import BaseModel, Field

OWM_BASE_URL = "http://api.openweathermap.org"
OWM_CITY_LIST_URL = "http://bulk.openweathermap.org/sample/city.list.json.gz"
DEFAULT_USER_AGENT = "weathermap/0.1.0"


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OWM_BASE_URL
    city_list_url: str = OWM_CITY_LIST_URL
    timeout: float = Field(default=30.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT
