"""Distance-based delivery fee lookup.

fee = max(MIN_FEE, BASE_FEE + round(distance_km * RATE_PER_KM))

The rates come from settings; the distances from the static table in
storefront.data.cities. Nothing here touches I/O or mutates state.
"""
import math
from typing import List, Optional, Sequence, Tuple

from storefront.core.config import settings
from storefront.data.cities import KENYAN_CITIES
from storefront.schemas.shipping import CityDistance, CityOption, ShippingQuote, ShippingRates

DEFAULT_RATES = ShippingRates.from_settings(settings)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def find_city(city_name: str, cities: Sequence[CityDistance] = KENYAN_CITIES) -> Optional[CityDistance]:
    wanted = (city_name or "").strip().lower()
    for city in cities:
        if city.name.lower() == wanted:
            return city
    return None


def compute_fee(distance_km: int, rates: Optional[ShippingRates] = None) -> int:
    rates = rates or DEFAULT_RATES
    return max(rates.min_fee, rates.base_fee + _round_half_up(distance_km * rates.rate_per_km))


def quote_city(
    city_name: str,
    cities: Sequence[CityDistance] = KENYAN_CITIES,
    rates: Optional[ShippingRates] = None,
) -> Tuple[ShippingQuote, bool]:
    """Quote plus whether the name was found in the table."""
    rates = rates or DEFAULT_RATES
    city = find_city(city_name, cities)
    distance_km = city.distance_km if city else rates.default_distance_km
    return ShippingQuote(fee=compute_fee(distance_km, rates), distance_km=distance_km), city is not None


def resolve(
    city_name: str,
    cities: Sequence[CityDistance] = KENYAN_CITIES,
    rates: Optional[ShippingRates] = None,
) -> ShippingQuote:
    """Quote delivery to a city; unknown names fall back to the default distance."""
    return quote_city(city_name, cities, rates)[0]


def shipping_fee(
    city_name: str,
    cities: Sequence[CityDistance] = KENYAN_CITIES,
    rates: Optional[ShippingRates] = None,
) -> int:
    return resolve(city_name, cities, rates).fee


def search_cities(
    query: Optional[str] = None,
    cities: Sequence[CityDistance] = KENYAN_CITIES,
    rates: Optional[ShippingRates] = None,
) -> List[CityOption]:
    needle = (query or "").strip().lower()
    return [
        CityOption(name=city.name, distance_km=city.distance_km, fee=compute_fee(city.distance_km, rates))
        for city in cities
        if needle in city.name.lower()
    ]
