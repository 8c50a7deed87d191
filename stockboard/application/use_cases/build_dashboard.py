"""
Use-case: aggregate quote, intraday chart, news and institutional flow for one symbol.
Depends only on Domain ports and entities; no infrastructure imports.

The four lookups run concurrently. The quote is the primary source: its
failure fails the request. News, chart and institutional flow are secondary:
each failure is logged and replaced by an empty placeholder so that a partial
document is still returned.
"""

import asyncio
import functools
import time
from concurrent.futures import Executor, ThreadPoolExecutor
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

import structlog

from stockboard.application.services.commentary import build_commentary
from stockboard.application.services.reshaping import (
    filter_intraday,
    select_news,
    summarize_institutional_flow,
)
from stockboard.application.services.symbols import to_quote_symbol, to_stock_id
from stockboard.domain.entities.dashboard import DashboardDocument
from stockboard.domain.entities.institutional_flow import InstitutionalFlow
from stockboard.domain.errors import ErrorKind, InvalidInputError, UpstreamUnavailableError
from stockboard.domain.ports.institutional_flow_port import IInstitutionalFlowProvider
from stockboard.domain.ports.market_data_port import IMarketDataProvider


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class BuildDashboardUseCase:
    def __init__(
        self,
        market_data: IMarketDataProvider,
        flow_provider: IInstitutionalFlowProvider,
        market_suffix: str = ".TW",
        timeout_seconds: float = 8.0,
        intraday_interval: str = "5m",
        intraday_lookback: timedelta = timedelta(hours=24),
        news_fetch_count: int = 10,
        institutional_lookback_days: int = 10,
        clock: Optional[Callable[[], datetime]] = None,
        executor: Optional[Executor] = None,
        max_workers: int = 16,
    ) -> None:
        """
        Args:
            market_data:     IMarketDataProvider for quote, news and intraday series.
            flow_provider:   IInstitutionalFlowProvider for institutional buy/sell rows.
            timeout_seconds: Bound applied to every individual lookup. No retries.
            institutional_lookback_days: Trailing window searched for the latest
                             trading date, since today may have no data yet.
            clock:           Returns the current time; injectable for tests.
            executor:        Pool that runs the blocking provider calls. A timed-out
                             call keeps its worker until the provider returns, so
                             lookups get their own pool rather than the loop default.
            max_workers:     Size of the pool created when *executor* is not given.
        """
        self._market_data = market_data
        self._flow_provider = flow_provider
        self._market_suffix = market_suffix
        self._timeout = timeout_seconds
        self._intraday_interval = intraday_interval
        self._intraday_lookback = intraday_lookback
        self._news_fetch_count = news_fetch_count
        self._institutional_lookback_days = institutional_lookback_days
        self._clock = clock or _utcnow
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="upstream"
        )

    async def execute(self, symbol: Optional[str]) -> DashboardDocument:
        """Build the dashboard document for *symbol*.

        Raises:
            InvalidInputError:        if *symbol* is missing or blank (no lookups are made).
            UpstreamUnavailableError: if the quote lookup fails or times out.
        """
        log = structlog.get_logger(__name__).bind(raw_symbol=symbol)
        log.info("dashboard.request")
        try:
            quote_symbol = to_quote_symbol(symbol, self._market_suffix)
        except InvalidInputError as exc:
            log.warning("dashboard.rejected", kind=exc.kind.value, error=exc.message)
            raise
        stock_id = to_stock_id(quote_symbol)
        log = log.bind(symbol=quote_symbol, stock_id=stock_id)

        started = time.perf_counter()
        now = self._clock()
        start_date = (now.date() - timedelta(days=self._institutional_lookback_days)).isoformat()

        quote, news, chart, trades = await asyncio.gather(
            self._bounded("quote", self._market_data.get_quote, quote_symbol),
            self._bounded(
                "news", self._market_data.get_news, quote_symbol, self._news_fetch_count
            ),
            self._bounded(
                "chart",
                self._market_data.get_intraday,
                quote_symbol,
                now - self._intraday_lookback,
                self._intraday_interval,
            ),
            self._bounded("chips", self._flow_provider.get_trades, stock_id, start_date),
            return_exceptions=True,
        )

        if isinstance(quote, BaseException):
            log.error(
                "dashboard.primary_failed",
                kind=ErrorKind.UPSTREAM_PRIMARY_FAILURE.value,
                error_type=type(quote).__name__,
                error=_describe(quote),
            )
            raise UpstreamUnavailableError(_describe(quote), source="quote") from quote

        degraded: list[str] = []
        news = self._resolve("news", news, [], degraded, log)
        chart = self._resolve("chart", chart, [], degraded, log)
        trades = self._resolve("chips", trades, None, degraded, log)

        document = DashboardDocument(
            quote=quote,
            chart=filter_intraday(chart),
            news=select_news(news),
            flow=(
                summarize_institutional_flow(trades)
                if trades is not None
                else InstitutionalFlow.unavailable()
            ),
            commentary=build_commentary(quote),
            degraded_sources=tuple(degraded),
        )
        log.info(
            "dashboard.built",
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
            chart_points=len(document.chart),
            news_items=len(document.news),
            degraded=list(document.degraded_sources),
        )
        return document

    async def _bounded(self, source: str, fn: Callable[..., Any], *args: Any) -> Any:
        """Run a blocking provider call on the lookup pool, bounded by the timeout."""
        loop = asyncio.get_running_loop()
        try:
            return await asyncio.wait_for(
                loop.run_in_executor(self._executor, functools.partial(fn, *args)),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as exc:
            raise TimeoutError(f"{source} lookup timed out after {self._timeout:g}s") from exc

    @staticmethod
    def _resolve(source: str, result: Any, placeholder: Any, degraded: list[str], log) -> Any:
        if isinstance(result, Exception):
            log.warning(
                "dashboard.degraded",
                source=source,
                kind=ErrorKind.UPSTREAM_SECONDARY_DEGRADED.value,
                error_type=type(result).__name__,
                error=_describe(result),
            )
            degraded.append(source)
            return placeholder
        if isinstance(result, BaseException):
            raise result
        return result
