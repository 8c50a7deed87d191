"""
Infrastructure adapter: FinMind REST API → IInstitutionalFlowProvider.

Queries the TaiwanStockInstitutionalInvestorsBuySell dataset, which returns
one row per (date, investor class) with raw share counts bought and sold.
"""

from typing import Optional

import httpx

from stockboard.domain.entities.institutional_flow import InstitutionalTrade
from stockboard.domain.ports.institutional_flow_port import IInstitutionalFlowProvider


class FinMindInstitutionalFlowProvider(IInstitutionalFlowProvider):
    """Fetches institutional investor buy/sell rows from FinMind."""

    DATASET = "TaiwanStockInstitutionalInvestorsBuySell"

    def __init__(
        self,
        api_url: str = "https://api.finmindtrade.com/api/v4/data",
        token: Optional[str] = None,
        timeout: float = 8.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._api_url = api_url
        self._token = token
        self._timeout = timeout
        self._client = client

    def get_trades(self, stock_id: str, start_date: str) -> list[InstitutionalTrade]:
        """Fetch rows for *stock_id* from *start_date* (YYYY-MM-DD) onwards.

        Raises:
            ValueError: if FinMind reports a non-success status.
            httpx.HTTPError: on transport failures or non-2xx responses.
        """
        headers = {"Authorization": f"Bearer {self._token}"} if self._token else {}
        params = {"dataset": self.DATASET, "data_id": stock_id, "start_date": start_date}
        if self._client is not None:
            response = self._client.get(
                self._api_url, params=params, headers=headers, timeout=self._timeout
            )
        else:
            response = httpx.get(
                self._api_url, params=params, headers=headers, timeout=self._timeout
            )
        response.raise_for_status()

        payload = response.json()
        if payload.get("status") != 200:
            raise ValueError(
                f"FinMind query failed for {stock_id!r}: {payload.get('msg', 'unknown error')}"
            )

        return [
            InstitutionalTrade(
                date=row["date"],
                stock_id=str(row.get("stock_id", stock_id)),
                investor=row["name"],
                buy=int(row.get("buy") or 0),
                sell=int(row.get("sell") or 0),
            )
            for row in payload.get("data") or []
        ]
