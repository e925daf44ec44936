"""Geocoding service using the OpenStreetMap Nominatim API"""

import asyncio
import logging

import httpx

from core.config import settings

from .cache import GeocodeCache, MemoryGeocodeCache, RedisGeocodeCache, normalize_address
from .models import GeocodeResult
from .rate_limit import RequestRateLimiter

logger = logging.getLogger(__name__)


class GeocodingService:
    """
    Address -> coordinates lookups against Nominatim.

    Successful lookups are cached; failures are not, so a later call retries.
    Concurrent lookups of the same uncached address share one request.
    """

    def __init__(
        self,
        cache: GeocodeCache | None = None,
        client: httpx.AsyncClient | None = None,
        base_url: str = settings.NOMINATIM_URL,
        user_agent: str = settings.GEOCODER_USER_AGENT,
        timeout: float = settings.GEOCODER_TIMEOUT,
        request_delay: float = settings.GEOCODER_REQUEST_DELAY,
        min_interval: float = settings.GEOCODER_MIN_INTERVAL,
    ):
        """
        Initialize geocoding service

        Args:
            cache: Result cache (in-memory, unbounded by default)
            client: HTTP client to send requests with (created if not given)
            base_url: Nominatim search endpoint
            user_agent: User-Agent header, required by the Nominatim usage policy
            timeout: Request timeout in seconds
            request_delay: Pause after each successful fetch, in seconds
            min_interval: Minimum spacing between requests across all callers, in seconds
        """
        self.cache = cache if cache is not None else MemoryGeocodeCache()
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.request_delay = request_delay
        self.rate_limiter = RequestRateLimiter(min_interval)
        self.request_count = 0

        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)
        self._pending: dict[str, asyncio.Task] = {}

    async def close(self):
        """Close the HTTP client if this service created it."""
        if self._owns_client:
            await self.client.aclose()

    async def geocode(self, address: str) -> GeocodeResult | None:
        """
        Convert address to coordinates (forward geocoding)

        Args:
            address: Free-text address

        Returns:
            GeocodeResult, or None if the address is empty, unknown, or the lookup failed
        """
        if not address or not address.strip():
            logger.error("Empty address provided")
            return None

        key = normalize_address(address)

        cached = await self.cache.get(key)
        if cached is not None:
            logger.info(f"Geocode cache hit for: {address}")
            return cached

        task = self._pending.get(key)
        if task is None:
            task = asyncio.create_task(self._lookup(key, address))
            self._pending[key] = task
            task.add_done_callback(lambda _: self._pending.pop(key, None))
        else:
            logger.debug(f"Joining in-flight geocode request for: {address}")

        # Shielded so one caller's cancellation doesn't cancel the shared request
        return await asyncio.shield(task)

    async def _lookup(self, key: str, address: str) -> GeocodeResult | None:
        result = await self._fetch(address)
        if result is None:
            return None

        await self.cache.set(key, result)

        # Nominatim usage policy: max 1 request per second
        if self.request_delay > 0:
            await asyncio.sleep(self.request_delay)

        return result

    async def _fetch(self, address: str) -> GeocodeResult | None:
        params = {"q": address, "format": "json", "limit": 1}
        headers = {"User-Agent": self.user_agent}

        await self.rate_limiter.acquire()
        self.request_count += 1
        logger.info(f"Requesting coordinates for: {address}")

        try:
            response = await self.client.get(
                self.base_url, params=params, headers=headers, timeout=self.timeout
            )

            if not response.is_success:
                logger.error(
                    f"Geocoding request failed for {address}: "
                    f"{response.status_code} {response.reason_phrase}"
                )
                return None

            data = response.json()
            if not data:
                logger.warning(f"No results found for address: {address}")
                return None

            first = data[0]
            result = GeocodeResult(latitude=float(first["lat"]), longitude=float(first["lon"]))

        except httpx.HTTPError as e:
            logger.error(f"Error geocoding address {address}: {e}")
            return None
        except (ValueError, KeyError, TypeError, IndexError) as e:
            logger.error(f"Malformed geocoding response for {address}: {e}")
            return None
        except Exception as e:
            logger.exception(f"Unexpected error geocoding address {address}: {e}")
            return None

        logger.info(f"Geocoded {address} -> {result.latitude}, {result.longitude}")
        return result


def build_cache() -> GeocodeCache:
    """Create the geocode cache selected by GEOCODE_CACHE_BACKEND"""
    if settings.GEOCODE_CACHE_BACKEND == "redis":
        return RedisGeocodeCache(ttl=settings.GEOCODE_CACHE_TTL)
    return MemoryGeocodeCache(
        max_entries=settings.GEOCODE_CACHE_MAX_ENTRIES,
        ttl=settings.GEOCODE_CACHE_TTL,
    )


_geocoding_service: GeocodingService | None = None


def get_geocoding_service() -> GeocodingService:
    """Get the process-wide geocoding service (lazy initialization)"""
    global _geocoding_service
    if _geocoding_service is None:
        _geocoding_service = GeocodingService(cache=build_cache())
    return _geocoding_service


async def close_geocoding_service():
    global _geocoding_service
    if _geocoding_service:
        await _geocoding_service.close()
        _geocoding_service = None


async def geocode_address(address: str) -> GeocodeResult | None:
    """Geocode with the default service. Returns None when the address can't be resolved."""
    return await get_geocoding_service().geocode(address)
