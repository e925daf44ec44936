import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()

class Settings:
    # Nominatim geocoding provider
    NOMINATIM_URL: str = os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org/search")
    # Required by the Nominatim usage policy
    GEOCODER_USER_AGENT: str = os.getenv("GEOCODER_USER_AGENT", "HomeBase-App/1.0")
    GEOCODER_TIMEOUT: float = float(os.getenv("GEOCODER_TIMEOUT", "10"))

    # Nominatim allows at most 1 request per second
    GEOCODER_REQUEST_DELAY: float = float(os.getenv("GEOCODER_REQUEST_DELAY", "1.0"))
    GEOCODER_MIN_INTERVAL: float = float(os.getenv("GEOCODER_MIN_INTERVAL", "1.0"))

    # Geocode cache: "memory" or "redis"
    GEOCODE_CACHE_BACKEND: str = os.getenv("GEOCODE_CACHE_BACKEND", "memory")
    GEOCODE_CACHE_MAX_ENTRIES: int = int(os.getenv("GEOCODE_CACHE_MAX_ENTRIES", "0"))  # 0 = unbounded
    GEOCODE_CACHE_TTL: int = int(os.getenv("GEOCODE_CACHE_TTL", "0"))  # seconds, 0 = never expires

    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")

    ALLOWED_ORIGINS: str = os.getenv("ALLOWED_ORIGINS", "")

    # Per-client limit on the public geocode endpoint
    GEOCODE_RATE_LIMIT: str = os.getenv("GEOCODE_RATE_LIMIT", "30/minute")

settings = Settings()
