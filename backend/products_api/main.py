"""
Products API - Backend
REST endpoint for managing product records
"""
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

import logging
import time

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from products_api.api import products
from products_api.api.deps import get_product_store
from products_api.core.config import settings
from products_api.core.logging_config import configure_logging
from products_api.domain.validation import ProductValidationError
from products_api.repositories.base import ProductStore

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": message}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(ProductValidationError)
async def product_validation_exception_handler(request: Request, exc: ProductValidationError):
    """Render rejected product payloads as 400 {"errors": [...]}"""
    logger.info(f"Rejected product payload on {request.method} {request.url.path}: {exc.errors}")
    return JSONResponse(status_code=400, content={"errors": exc.errors})


# Include API routers
app.include_router(products.router, prefix="/products", tags=["Products"])


@app.get("/")
async def root():
    """Root endpoint - API status banner"""
    return {
        "message": settings.API_TITLE,
        "status": "online",
        "version": settings.API_VERSION,
    }


@app.get("/health")
def health(store: ProductStore = Depends(get_product_store)):
    """Health check endpoint for monitoring - probes the product store"""
    start_time = time.time()

    store_status = "unknown"
    store_error = None

    try:
        store.ping()
        store_status = "connected"
    except Exception as e:
        logger.warning(f"Product store health check failed: {e}", exc_info=True)
        store_status = "disconnected"
        store_error = "unreachable"

    latency_ms = round((time.time() - start_time) * 1000, 2)

    return {
        "status": "healthy" if store_status == "connected" else "degraded",
        "service": "products-api",
        "version": settings.API_VERSION,
        "store": {
            "backend": settings.PRODUCT_STORE,
            "status": store_status,
            "latency_ms": latency_ms,
            "error": store_error,
        },
    }
