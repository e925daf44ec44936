from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.dependencies import limiter
from api.routes import location
from core.config import settings
from services.location.service import close_geocoding_service
from services.redis import close_redis

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Set specific log levels
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)  # Reduce noise from access logs
logging.getLogger("httpx").setLevel(logging.WARNING)  # Every geocoder request is already logged


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_geocoding_service()
    if settings.GEOCODE_CACHE_BACKEND == "redis":
        await close_redis()


app = FastAPI(
    title="HomeBase Location API",
    description="Geocoding, distances and distance units for HomeBase",
    version="1.0.0",
    lifespan=lifespan
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

allowed_origins = settings.ALLOWED_ORIGINS.split(",") if settings.ALLOWED_ORIGINS else ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(location.router)


@app.get("/")
async def root():
    return {"message": "HomeBase Location API", "status": "running"}


@app.get("/health")
async def health():
    return {"status": "healthy"}
