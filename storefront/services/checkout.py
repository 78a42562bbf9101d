from typing import Iterable, Optional, Sequence

from storefront.data.cities import KENYAN_CITIES
from storefront.schemas.checkout import CartItem, CheckoutSummary
from storefront.schemas.shipping import CityDistance, ShippingRates
from storefront.services.shipping import quote_city


def cart_subtotal(items: Iterable[CartItem]) -> int:
    return sum(item.price * item.quantity for item in items)


def build_summary(
    items: Iterable[CartItem],
    city: str,
    cities: Sequence[CityDistance] = KENYAN_CITIES,
    rates: Optional[ShippingRates] = None,
) -> CheckoutSummary:
    """Order total before payment. No shipping is charged until a city is chosen."""
    subtotal = cart_subtotal(items)
    city = (city or "").strip()
    if not city:
        return CheckoutSummary(subtotal=subtotal, city="", shipping=None, total=subtotal)

    quote, known = quote_city(city, cities, rates)
    return CheckoutSummary(
        subtotal=subtotal,
        city=city,
        shipping=quote,
        known_city=known,
        total=subtotal + quote.fee,
    )
