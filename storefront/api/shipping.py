"""Delivery fee endpoints backing the checkout city picker"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from storefront.core.enums import QuoteSource
from storefront.core.metrics import shipping_quotes
from storefront.core.rate_limit import rate_limit
from storefront.schemas.shipping import CityOption, ShippingQuoteOut, ShippingRates
from storefront.services.shipping import DEFAULT_RATES, quote_city, search_cities

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/shipping", tags=["shipping"], dependencies=[Depends(rate_limit)])


@router.get("/quote", response_model=ShippingQuoteOut)
async def get_quote(city: str = Query("")):
    quote, known = quote_city(city)

    source = QuoteSource.TABLE if known else QuoteSource.DEFAULT
    shipping_quotes.labels(source=source.value).inc()
    if not known and city.strip():
        logger.info(f"Unknown city {city.strip()!r}, quoted default distance {quote.distance_km} km")

    return ShippingQuoteOut(
        city=city.strip(),
        fee=quote.fee,
        distance_km=quote.distance_km,
        known_city=known,
    )


@router.get("/cities", response_model=List[CityOption])
async def list_cities(q: Optional[str] = Query(None, max_length=100)):
    return search_cities(q)


@router.get("/rates", response_model=ShippingRates)
async def get_rates():
    return DEFAULT_RATES
