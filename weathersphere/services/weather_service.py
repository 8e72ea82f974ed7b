"""Weather service using the OpenWeatherMap current weather API."""

import logging

import httpx
from pydantic import ValidationError

from ..exceptions import EmptyInput, LookupFailed
from ..models.config import WeatherConfig
from ..models.weather import CurrentConditions, OpenWeatherResponse

logger = logging.getLogger(__name__)


class WeatherService:
    """Service to fetch current conditions for a city.

    Each call issues exactly one request. There are no retries; any failure
    is reported as LookupFailed.
    """

    def __init__(
        self,
        config: WeatherConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or WeatherConfig()
        self._transport = transport

    def _build_params(self, city: str) -> dict[str, str]:
        return {
            "q": city,
            "appid": self.config.api_key,
            "units": self.config.units,
        }

    async def fetch_current(self, city: str) -> CurrentConditions:
        """Fetch current conditions for a city name.

        Raises:
            EmptyInput: If the city name is blank; no request is made.
            LookupFailed: On any transport error or non-success response.
        """
        query = city.strip()
        if not query:
            raise EmptyInput("City name is empty")

        if not self.config.api_key:
            logger.warning("No API key configured; the provider will reject the request")

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout_seconds, transport=self._transport
            ) as client:
                response = await client.get(self.config.base_url, params=self._build_params(query))
                response.raise_for_status()
                data = response.json()

            conditions = self._parse_response(data)

        except httpx.HTTPStatusError as e:
            logger.warning(f"Weather lookup for {query!r} failed: HTTP {e.response.status_code}")
            raise LookupFailed(city=query) from e

        except httpx.TimeoutException as e:
            logger.warning(f"Timeout fetching weather for {query!r}")
            raise LookupFailed(city=query) from e

        except httpx.HTTPError as e:
            logger.error(f"Transport error fetching weather for {query!r}: {e}")
            raise LookupFailed(city=query) from e

        except httpx.InvalidURL as e:
            logger.warning(f"Could not build request URL for {len(query)}-character query: {e}")
            raise LookupFailed(city=query) from e

        except (ValueError, ValidationError) as e:
            logger.error(f"Error parsing weather response for {query!r}: {e}")
            raise LookupFailed(city=query) from e

        logger.info(f"Fetched weather for {conditions.display_location}")
        return conditions

    def _parse_response(self, data: object) -> CurrentConditions:
        """Parse the provider response."""
        return OpenWeatherResponse.model_validate(data).to_conditions()
