import logging
from typing import Optional

import httpx

from storefront.core.config import settings
from storefront.core.enums import LookupOutcome
from storefront.core.metrics import distance_lookups

logger = logging.getLogger(__name__)


def _first_element(data: dict) -> Optional[dict]:
    rows = data.get("rows")
    if not isinstance(rows, list) or not rows or not isinstance(rows[0], dict):
        return None
    elements = rows[0].get("elements")
    if not isinstance(elements, list) or not elements or not isinstance(elements[0], dict):
        return None
    return elements[0]


class DistanceMatrixClient:
    """Road distances from a fixed origin via the Google Distance Matrix API."""

    def __init__(
        self,
        api_key: str,
        origin: Optional[str] = None,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.origin = origin or settings.ORIGIN_ADDRESS
        self.url = url or settings.DISTANCE_MATRIX_URL
        self._client = httpx.AsyncClient(
            timeout=timeout or settings.DISTANCE_MATRIX_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self) -> "DistanceMatrixClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def road_distance_km(self, destination: str) -> Optional[int]:
        """Distance in km, or None when the service has no answer for this city."""
        params = {
            "origins": self.origin,
            "destinations": f"{destination}, Kenya",
            "units": "metric",
            "key": self.api_key,
        }

        try:
            response = await self._client.get(self.url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException:
            logger.warning(f"Distance lookup timed out for \"{destination}\"")
            distance_lookups.labels(outcome=LookupOutcome.TRANSPORT_ERROR.value).inc()
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Distance lookup failed for \"{destination}\": {e}")
            distance_lookups.labels(outcome=LookupOutcome.TRANSPORT_ERROR.value).inc()
            return None

        if not isinstance(data, dict):
            logger.warning(f"Malformed response for \"{destination}\": {data!r}")
            distance_lookups.labels(outcome=LookupOutcome.API_ERROR.value).inc()
            return None

        if data.get("status") != "OK":
            logger.warning(f"API error for \"{destination}\": {data.get('status')}")
            distance_lookups.labels(outcome=LookupOutcome.API_ERROR.value).inc()
            return None

        element = _first_element(data)
        if element is None:
            logger.warning(f"Malformed response for \"{destination}\": {data!r}")
            distance_lookups.labels(outcome=LookupOutcome.API_ERROR.value).inc()
            return None

        if element.get("status") != "OK":
            logger.warning(f"No route for \"{destination}\": {element.get('status')}")
            distance_lookups.labels(outcome=LookupOutcome.NO_ROUTE.value).inc()
            return None

        try:
            metres = float(element["distance"]["value"])
        except (KeyError, TypeError, ValueError):
            logger.warning(f"Malformed distance for \"{destination}\": {element}")
            distance_lookups.labels(outcome=LookupOutcome.API_ERROR.value).inc()
            return None

        distance_lookups.labels(outcome=LookupOutcome.OK.value).inc()
        return int(metres / 1000 + 0.5)
