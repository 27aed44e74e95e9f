import logging

from trailhub.errors import NotFoundError
from trailhub.models import EditionWeather, WeatherReport

from .client import ApiClient, Endpoint, unwrap


class WeatherService:
    def __init__(self, client: ApiClient):
        self.logger = logging.getLogger(__name__)
        self.client = client

    async def get_by_edition(self, edition_id: str) -> WeatherReport:
        try:
            body = await self.client.get(
                Endpoint.EDITION_WEATHER.build(edition_id=edition_id)
            )
        except NotFoundError:
            self.logger.info(f"No weather data for edition {edition_id}")
            return WeatherReport(weather=None, weather_fetched=False)

        return WeatherReport.model_validate(unwrap(body))

    async def fetch(self, edition_id: str, force: bool = False) -> EditionWeather:
        self.logger.info(f"Requesting weather fetch for edition {edition_id} (force={force})")
        body = await self.client.post(
            Endpoint.EDITION_WEATHER_FETCH.build(edition_id=edition_id),
            params={"force": "true" if force else None},
        )
        return EditionWeather.model_validate(unwrap(body))
