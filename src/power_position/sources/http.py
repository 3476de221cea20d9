"""HTTP trade source — fetches trades from a REST endpoint."""

from __future__ import annotations

from datetime import date

import httpx

from power_position.errors import TradeSourceError
from power_position.models import PowerTrade
from power_position.sources.base import TradeSource


class HttpTradeSource(TradeSource):
    """Async client for a trade service exposing ``GET /trades?date=YYYY-MM-DD``.

    The endpoint returns a JSON list of trades, each shaped like
    ``{"trade_id": ..., "date": "2024-06-10", "periods": [{"period": 1, "volume": 12.5}, ...]}``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        timeout_s: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def _get_http(self) -> httpx.AsyncClient:
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(timeout=self.timeout_s, transport=self._transport)
        return self._http

    async def close(self) -> None:
        if self._http and not self._http.is_closed:
            await self._http.aclose()

    async def get_trades(self, day: date) -> list[PowerTrade]:
        http = await self._get_http()
        resp = await http.get(f"{self.base_url}/trades", params={"date": day.isoformat()})
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, list):
            raise TradeSourceError(f"Expected a list of trades, got {type(data).__name__}")
        return [PowerTrade.model_validate(item) for item in data]
