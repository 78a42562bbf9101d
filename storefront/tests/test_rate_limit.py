"""
Rate limiting on the public shipping endpoints.
Backed by redis when configured, skipped entirely when it is not.
"""

import pytest
from fastapi import HTTPException

from storefront.core import redis as redis_module
from storefront.core.rate_limit import check_rate_limit


class TestRateLimiting:

    def test_rate_limit_config(self, app_settings):
        assert app_settings.RATE_LIMIT > 0
        assert app_settings.RATE_LIMIT_WINDOW > 0

    @pytest.mark.asyncio
    async def test_no_redis_no_limit(self, monkeypatch, app_settings):
        monkeypatch.setattr(redis_module, "redis", None)
        for _ in range(app_settings.RATE_LIMIT + 5):
            await check_rate_limit("10.0.0.1")

    @pytest.mark.asyncio
    async def test_limit_enforced(self, fake_redis, monkeypatch, app_settings):
        monkeypatch.setattr(app_settings, "RATE_LIMIT", 3)
        for _ in range(3):
            await check_rate_limit("10.0.0.2")

        with pytest.raises(HTTPException) as exc:
            await check_rate_limit("10.0.0.2")
        assert exc.value.status_code == 429

    @pytest.mark.asyncio
    async def test_limit_per_client(self, fake_redis, monkeypatch, app_settings):
        monkeypatch.setattr(app_settings, "RATE_LIMIT", 1)
        await check_rate_limit("10.0.0.3")
        await check_rate_limit("10.0.0.4")
        assert set(fake_redis.store) == {"rl:10.0.0.3", "rl:10.0.0.4"}

    @pytest.mark.asyncio
    async def test_endpoint_returns_429(self, test_client, fake_redis, monkeypatch, app_settings):
        monkeypatch.setattr(app_settings, "RATE_LIMIT", 1)
        first = await test_client.get("/shipping/quote", params={"city": "Nairobi"})
        assert first.status_code == 200

        second = await test_client.get("/shipping/quote", params={"city": "Nairobi"})
        assert second.status_code == 429

    @pytest.mark.asyncio
    async def test_redis_errors_do_not_block_quotes(self, monkeypatch):
        class BrokenRedis:
            async def get(self, key):
                raise ConnectionError("redis down")

        monkeypatch.setattr(redis_module, "redis", BrokenRedis())
        await check_rate_limit("10.0.0.5")
