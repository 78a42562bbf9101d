import pytest
from httpx import AsyncClient, ASGITransport

from storefront.main import app
from storefront.core import redis as redis_module
from storefront.core.config import settings
from storefront.data.cities import KENYAN_CITIES
from storefront.schemas.checkout import CartItem
from storefront.schemas.shipping import CityDistance, ShippingRates


@pytest.fixture
async def test_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def rates():
    """Rates used throughout the worked examples: 150 + 2/km, floor 200, default 500 km"""
    return ShippingRates(base_fee=150, rate_per_km=2, min_fee=200, default_distance_km=500)


@pytest.fixture
def known_city_names():
    return [city.name for city in KENYAN_CITIES]


@pytest.fixture
def small_table():
    return (
        CityDistance(name="Nairobi", distance_km=12),
        CityDistance(name="Nakuru", distance_km=171),
        CityDistance(name="Murang'a", distance_km=89),
        CityDistance(name="Kisumu", distance_km=365),
    )


@pytest.fixture
def valid_cart_items():
    return [
        CartItem(product_id="p-1", name="Gold Hoop Earrings", price=2500, quantity=2),
        CartItem(product_id="p-2", name="Pearl Necklace (Long)", price=4800, quantity=1, variant="Long"),
    ]


@pytest.fixture
def valid_checkout_data():
    return {
        "items": [
            {"product_id": "p-1", "name": "Gold Hoop Earrings", "price": 2500, "quantity": 2},
            {"product_id": "p-2", "name": "Pearl Necklace", "price": 4800, "quantity": 1, "variant": "Long"},
        ],
        "city": "Nakuru",
    }


class FakeRedis:
    """In-memory stand-in for the handful of redis calls the rate limiter makes"""

    def __init__(self):
        self.store = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        self.store[key] = str(value).encode()

    async def incr(self, key):
        self.store[key] = str(int(self.store[key]) + 1).encode()
        return int(self.store[key])

    async def close(self):
        pass


@pytest.fixture
def fake_redis(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr(redis_module, "redis", fake)
    return fake


@pytest.fixture
def app_settings():
    """Return application settings"""
    return settings


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "api: marks tests that go through the HTTP app"
    )
    config.addinivalue_line(
        "markers", "shipping: marks tests related to shipping fees"
    )
    config.addinivalue_line(
        "markers", "checkout: marks tests related to checkout totals"
    )
    config.addinivalue_line(
        "markers", "refresh: marks tests related to the distance refresh tool"
    )
    config.addinivalue_line(
        "markers", "rate_limit: marks tests related to rate limiting"
    )
