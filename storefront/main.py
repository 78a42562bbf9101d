from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from storefront.api import checkout, shipping
from storefront.core.config import settings
from storefront.core.logging_config import configure_logging
from storefront.core.redis import init_redis, close_redis, get_redis
from storefront.core.metrics import request_count, request_duration, redis_connected, reference_cities, get_metrics_text
from storefront.data.cities import KENYAN_CITIES
import time
import logging

logger = logging.getLogger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        except Exception:
            status = 500
            raise
        finally:
            duration = time.time() - start_time
            request_count.labels(
                method=request.method,
                endpoint=request.url.path,
                status=status
            ).inc()
            request_duration.labels(
                method=request.method,
                endpoint=request.url.path
            ).observe(duration)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Application starting...")
    logger.info(f"Shipping table loaded: {len(KENYAN_CITIES)} cities")
    
    try:
        if await init_redis() is not None:
            redis_connected.set(1)
    except Exception as e:
        logger.error(f"Redis connection failed: {e}")
        redis_connected.set(0)
    
    yield
    
    logger.info("Application shutting down...")
    await close_redis()
    redis_connected.set(0)
    logger.info("✓ Shutdown complete")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    lifespan=lifespan
)

app.add_middleware(MetricsMiddleware)

app.include_router(shipping.router)
app.include_router(checkout.router)

reference_cities.set(len(KENYAN_CITIES))


@app.get("/metrics", tags=["monitoring"])
async def metrics():
    return Response(
        content=get_metrics_text(),
        media_type="text/plain; version=0.0.4; charset=utf-8"
    )


@app.get("/health", tags=["monitoring"])
async def health_check():
    redis = get_redis()
    
    return {
        "status": "healthy",
        "service": settings.API_TITLE,
        "version": settings.API_VERSION,
        "cities": len(KENYAN_CITIES),
        "dependencies": {
            "redis": "connected" if redis is not None else "disconnected",
        }
    }


@app.get("/", tags=["root"])
async def root():
    return {
        "message": settings.API_TITLE,
        "version": settings.API_VERSION,
        "docs": "/docs",
        "health": "/health",
        "metrics": "/metrics"
    }
