import datetime as dt

from pydantic import Field

from ._base import ApiModel


class EditionWeather(ApiModel):
    id: str | None = Field(default=None)
    edition_id: str | None = Field(default=None)
    date: dt.date | None = Field(default=None, description="Race day.")
    temperature: float | None = Field(default=None, description="Mean temperature in °C.")
    temperature_min: float | None = Field(default=None)
    temperature_max: float | None = Field(default=None)
    condition: str | None = Field(default=None, description="Condition code.")
    condition_text: str | None = Field(default=None)
    precipitation: float | None = Field(default=None, ge=0, description="mm.")
    wind: float | None = Field(default=None, ge=0, description="km/h.")
    humidity: float | None = Field(default=None, ge=0, le=100)
    pressure: float | None = Field(default=None)
    cloud_cover: float | None = Field(default=None, ge=0, le=100)
    fetched_at: dt.datetime | None = Field(default=None)


class WeatherReport(ApiModel):
    weather: EditionWeather | None = Field(default=None)
    weather_fetched: bool = Field(default=False)
