"""
FastAPI entry point.

This module is the Composition Root: it wires the yfinance and FinMind adapters
into BuildDashboardUseCase and exposes it over HTTP.

Run locally:
    uvicorn stockboard.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

load_dotenv()

from stockboard.application.use_cases.build_dashboard import BuildDashboardUseCase
from stockboard.domain.errors import InvalidInputError, UpstreamUnavailableError
from stockboard.infrastructure.config.settings import Settings, get_settings
from stockboard.infrastructure.entrypoints.schemas import DashboardResponse, ErrorResponse
from stockboard.infrastructure.institutional.finmind_adapter import (
    FinMindInstitutionalFlowProvider,
)
from stockboard.infrastructure.observability.logging import get_logger, setup_logging
from stockboard.infrastructure.stock_data.yfinance_adapter import YFinanceMarketDataProvider

# Quotes are time-sensitive; no intermediary may cache them.
NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}

logger = get_logger(__name__)


def build_use_case(settings: Settings) -> BuildDashboardUseCase:
    return BuildDashboardUseCase(
        market_data=YFinanceMarketDataProvider(timeout=settings.upstream_timeout_seconds),
        flow_provider=FinMindInstitutionalFlowProvider(
            api_url=settings.finmind_api_url,
            token=settings.finmind_token,
            timeout=settings.upstream_timeout_seconds,
        ),
        market_suffix=settings.market_suffix,
        timeout_seconds=settings.upstream_timeout_seconds,
        intraday_interval=settings.intraday_interval,
        intraday_lookback=timedelta(hours=settings.intraday_lookback_hours),
        news_fetch_count=settings.news_fetch_count,
        institutional_lookback_days=settings.institutional_lookback_days,
        max_workers=settings.upstream_max_workers,
    )


def create_app(
    use_case: Optional[BuildDashboardUseCase] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    use_case = use_case or build_use_case(settings)

    app = FastAPI(title="Stockboard API")

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        body = ErrorResponse(error=exc.message, kind=exc.kind.value)
        return JSONResponse(
            status_code=400,
            content=body.model_dump(exclude_none=True),
            headers=NO_CACHE_HEADERS,
        )

    @app.exception_handler(UpstreamUnavailableError)
    async def upstream_unavailable_handler(request: Request, exc: UpstreamUnavailableError):
        details = (
            exc.message
            if settings.expose_upstream_errors
            else "Upstream quote provider unavailable"
        )
        body = ErrorResponse(error="Failed to fetch data", kind=exc.kind.value, details=details)
        return JSONResponse(status_code=500, content=body.model_dump(), headers=NO_CACHE_HEADERS)

    @app.get("/api")
    async def dashboard(symbol: Optional[str] = None):
        """Aggregate quote, intraday chart, news, institutional flow and commentary."""
        document = await use_case.execute(symbol)
        headers = dict(NO_CACHE_HEADERS)
        if document.degraded_sources:
            headers["X-Degraded-Sources"] = ",".join(document.degraded_sources)
        return JSONResponse(
            content=DashboardResponse.from_document(document).model_dump(by_alias=True),
            headers=headers,
        )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    logger.info("app.created", market_suffix=settings.market_suffix)
    return app


app = create_app()
