"""CWA forecast gateway: FastAPI app translating location codes to forecasts."""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gateway.config.loader import load_config
from gateway.config.schema import GatewayConfig
from gateway.errors import GatewayError
from gateway.ingest.cwa_client import CwaClient
from gateway.ingest.location_resolver import supported_codes
from gateway.models.common import utc_now_iso
from gateway.pipeline.forecast_pipeline import ForecastPipeline

logger = logging.getLogger(__name__)


def create_app(config: GatewayConfig, client: CwaClient | None = None) -> FastAPI:
    app = FastAPI(
        title="CWA Forecast Gateway", version="0.1.0", redirect_slashes=False
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    pipeline = ForecastPipeline(config, client)
    app.state.config = config
    app.state.pipeline = pipeline

    # ── Routes ──────────────────────────────────────────────────

    @app.get("/")
    def root():
        return {
            "message": "Welcome to the CWA weather forecast API",
            "endpoints": {
                "dynamic_weather": "/api/weather/:location",
                "health": "/api/health",
            },
            "supported_locations": supported_codes(pipeline.locations),
        }

    @app.get("/api/health")
    @app.get("/api/health/", include_in_schema=False)
    def health():
        return {"status": "OK", "timestamp": utc_now_iso()}

    @app.get("/api/weather/{location}")
    @app.get("/api/weather/{location}/", include_in_schema=False)
    async def get_weather(location: str):
        result = await pipeline.run(location)
        return {"success": True, "data": result.to_dict()}

    # ── Error handlers ──────────────────────────────────────────

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Wrong method on a known path is still an unmatched route
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"error": "Route not found"})
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500, content={"error": "Server error", "message": str(exc)}
        )

    return app


def _app_from_env() -> FastAPI:
    config = load_config(os.environ.get("GATEWAY_CONFIG") or None)
    return create_app(config)


app = _app_from_env()
