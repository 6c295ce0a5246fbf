"""
FastAPI server for the spread dashboard.

Every route checks the shared-secret `token` query parameter before
doing any work; API handlers cancel their upstream fan-out when the
polling client disconnects.
"""

import asyncio
import logging
from collections.abc import Coroutine
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, TypeVar

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from spreadwatch import __version__
from spreadwatch.config.constants import DEFAULT_SYMBOL, DISCONNECT_POLL_INTERVAL, EXCHANGES
from spreadwatch.config.settings import Settings, get_settings
from spreadwatch.core.formatting import format_price
from spreadwatch.dashboard.page import ACCESS_DENIED_HTML, render_dashboard
from spreadwatch.exchange.dex import DexScreenerClient
from spreadwatch.exchange.mexc import MexcClient
from spreadwatch.exchange.tickers import TickerClient
from spreadwatch.market.aggregator import PriceAggregator, normalize_symbol
from spreadwatch.market.deposit import DepositChecker
from spreadwatch.market.resolver import ResolveError, TokenResolver
from spreadwatch.telemetry.system import SystemSampler
from spreadwatch.utils.time import get_timestamp_ms


logger = logging.getLogger(__name__)

T = TypeVar("T")


class AccessDeniedError(Exception):
    """Request carried a missing or wrong token."""

    def __init__(self, html: bool = False) -> None:
        super().__init__("invalid token")
        self.html = html


class ClientDisconnectedError(Exception):
    """The client went away before the response was ready."""


@dataclass
class Services:
    """Upstream clients and orchestrators shared by all requests."""

    tickers: TickerClient
    mexc: MexcClient
    dex: DexScreenerClient
    aggregator: PriceAggregator
    resolver: TokenResolver

    @classmethod
    def build(cls, settings: Settings) -> "Services":
        tickers = TickerClient()
        mexc = MexcClient(
            api_key=settings.mexc_api_key.get_secret_value(),
            api_secret=settings.mexc_api_secret.get_secret_value(),
        )
        dex = DexScreenerClient()
        sampler = SystemSampler(
            ip=settings.pod_ip,
            cpu_cores=settings.cpu_cores,
            ram_limit_bytes=settings.ram_limit_bytes,
        )
        deposits = DepositChecker(mexc, fail_open=settings.deposit_fail_open)

        return cls(
            tickers=tickers,
            mexc=mexc,
            dex=dex,
            aggregator=PriceAggregator(tickers, mexc, deposits, sampler),
            resolver=TokenResolver(mexc, dex),
        )

    async def close(self) -> None:
        for client in (self.tickers, self.mexc, self.dex):
            await client.close()


@asynccontextmanager
async def lifespan(app: FastAPI):  # type: ignore[no-untyped-def]
    settings: Settings = app.state.settings
    app.state.services = Services.build(settings)
    logger.info(
        f"Dashboard ready: {len(EXCHANGES)} exchanges, "
        f"credentials {'set' if settings.has_credentials else 'missing'}"
    )
    yield
    await app.state.services.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(title="SpreadWatch", version=__version__, lifespan=lifespan)
    app.state.settings = settings or get_settings()

    app.add_exception_handler(AccessDeniedError, access_denied_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ClientDisconnectedError, client_disconnected_handler)  # type: ignore[arg-type]

    app.get("/", response_class=HTMLResponse, dependencies=[Depends(require_page_token)])(
        get_dashboard
    )
    app.get("/api/all", dependencies=[Depends(require_api_token)])(get_all)
    app.get("/api/resolve", dependencies=[Depends(require_api_token)])(get_resolve)
    app.get("/api/dex", dependencies=[Depends(require_api_token)])(get_dex)
    app.get("/api/status")(get_status)
    return app


# =============================================================================
# Dependencies
# =============================================================================


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[no-any-return]


def get_aggregator(request: Request) -> PriceAggregator:
    return request.app.state.services.aggregator  # type: ignore[no-any-return]


def get_resolver(request: Request) -> TokenResolver:
    return request.app.state.services.resolver  # type: ignore[no-any-return]


def get_dex_client(request: Request) -> DexScreenerClient:
    return request.app.state.services.dex  # type: ignore[no-any-return]


def _check_token(token: str | None, settings: Settings, html: bool) -> None:
    if token != settings.secret_token.get_secret_value():
        raise AccessDeniedError(html=html)


def require_page_token(
    token: str | None = Query(default=None),
    settings: Settings = Depends(get_app_settings),
) -> None:
    _check_token(token, settings, html=True)


def require_api_token(
    token: str | None = Query(default=None),
    settings: Settings = Depends(get_app_settings),
) -> None:
    _check_token(token, settings, html=False)


async def access_denied_handler(request: Request, exc: AccessDeniedError) -> Response:
    logger.warning(f"Rejected {request.url.path} from {request.client.host if request.client else '?'}")
    if exc.html:
        return HTMLResponse(content=ACCESS_DENIED_HTML, status_code=403)
    return JSONResponse(content={"ok": False}, status_code=403)


async def client_disconnected_handler(request: Request, exc: ClientDisconnectedError) -> Response:
    # Nobody is listening; the status only shows up in access logs
    return Response(status_code=499)


async def run_until_disconnected(request: Request, coro: Coroutine[Any, Any, T]) -> T:
    """
    Await `coro`, cancelling it if the client disconnects first.

    Raises:
        ClientDisconnectedError: If the client went away.
    """
    task = asyncio.ensure_future(coro)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=DISCONNECT_POLL_INTERVAL)
            if done:
                return task.result()
            if await request.is_disconnected():
                logger.debug(f"Client left {request.url.path}, cancelling upstream calls")
                raise ClientDisconnectedError()
    finally:
        if not task.done():
            task.cancel()


# =============================================================================
# Routes
# =============================================================================


async def get_dashboard(
    token: str = Query(default=""),
    symbol: str | None = Query(default=None),
    settings: Settings = Depends(get_app_settings),
) -> HTMLResponse:
    return HTMLResponse(
        content=render_dashboard(
            symbol=normalize_symbol(symbol) or DEFAULT_SYMBOL,
            token=token,
            poll_interval_ms=settings.poll_interval_ms,
        )
    )


async def get_all(
    request: Request,
    symbol: str | None = Query(default=None),
    aggregator: PriceAggregator = Depends(get_aggregator),
) -> dict[str, Any]:
    normalized = normalize_symbol(symbol)
    if not normalized:
        return {"ok": False}

    result = await run_until_disconnected(request, aggregator.aggregate(normalized))
    return result.to_dict()


async def get_resolve(
    request: Request,
    symbol: str | None = Query(default=None),
    resolver: TokenResolver = Depends(get_resolver),
) -> dict[str, Any]:
    normalized = normalize_symbol(symbol)
    if not normalized:
        return {"ok": False, "error": "symbol required"}

    try:
        result = await run_until_disconnected(request, resolver.resolve(normalized))
    except ResolveError as e:
        logger.info(f"Resolve {normalized}: {e}")
        return e.to_dict()

    return result.to_dict()


async def get_dex(
    request: Request,
    chain: str = Query(default=""),
    addr: str = Query(default=""),
    dex: DexScreenerClient = Depends(get_dex_client),
) -> dict[str, Any]:
    if not chain or not addr:
        return {"ok": False}

    pair = await run_until_disconnected(request, dex.get_pair(chain, addr))
    if pair is None or pair.price <= 0:
        return {"ok": False}

    return {
        "ok": True,
        "price": pair.price,
        "priceFormatted": format_price(pair.price),
        "url": pair.url,
    }


async def get_status(settings: Settings = Depends(get_app_settings)) -> dict[str, Any]:
    return {
        "status": "online",
        "exchanges": list(EXCHANGES),
        "pod": settings.pod_ip,
        "timestamp": get_timestamp_ms(),
    }
