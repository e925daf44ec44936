"""
Startup script for deployment
Handles:
- Configuration summary
- Uvicorn server launch
"""

import os
import sys

from core.config import settings


def show_configuration():
    """Print the geocoder settings that matter in production"""
    print(f"✓ Geocoder endpoint: {settings.NOMINATIM_URL}")
    print(f"✓ User-Agent: {settings.GEOCODER_USER_AGENT}")
    print(f"✓ Geocode cache: {settings.GEOCODE_CACHE_BACKEND}")

    if settings.GEOCODER_MIN_INTERVAL < 1.0 and "nominatim.openstreetmap.org" in settings.NOMINATIM_URL:
        print("⚠️  WARNING: GEOCODER_MIN_INTERVAL is below 1 second")
        print("⚠️  The public Nominatim server allows at most 1 request per second!")


def main():
    """Main startup sequence"""
    print("=" * 60)
    print("🚀 HomeBase Location API - Startup")
    print("=" * 60)

    print("\n[1/2] Checking configuration...")
    show_configuration()

    print("\n[2/2] Starting uvicorn server...")
    print("=" * 60)

    port = int(os.getenv("PORT", "8000"))

    import uvicorn

    try:
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=port,
            log_level="info",
            access_log=True
        )
    except KeyboardInterrupt:
        print("\n⏹️  Shutting down...")
        sys.exit(0)


if __name__ == "__main__":
    main()
