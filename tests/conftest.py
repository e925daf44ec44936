"""Shared fixtures"""

import httpx
import pytest

from services.location import GeocodingService, MemoryGeocodeCache

from .stubs import WHITE_HOUSE, BrokenRedis, FakeRedis, StubNominatim


@pytest.fixture
def nominatim():
    return StubNominatim({"1600 Pennsylvania Ave NW, Washington, DC": [WHITE_HOUSE]})


@pytest.fixture
def make_service(nominatim):
    """Build a GeocodingService wired to the stub, with delays off unless asked for"""

    def _make(handler=None, cache=None, request_delay=0.0, min_interval=0.0):
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler or nominatim))
        return GeocodingService(
            cache=cache if cache is not None else MemoryGeocodeCache(),
            client=client,
            request_delay=request_delay,
            min_interval=min_interval,
        )

    return _make


@pytest.fixture
def fake_redis(monkeypatch):
    redis = FakeRedis()

    async def _get_redis():
        return redis

    monkeypatch.setattr("services.cache.get_redis", _get_redis)
    return redis


@pytest.fixture
def broken_redis(monkeypatch):
    async def _get_redis():
        return BrokenRedis()

    monkeypatch.setattr("services.cache.get_redis", _get_redis)
