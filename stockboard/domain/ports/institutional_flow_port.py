"""
Port (interface) for institutional-investor flow providers.
Infrastructure adapters (e.g. FinMindInstitutionalFlowProvider) must implement this interface.
"""

from abc import ABC, abstractmethod

from stockboard.domain.entities.institutional_flow import InstitutionalTrade


class IInstitutionalFlowProvider(ABC):
    @abstractmethod
    def get_trades(self, stock_id: str, start_date: str) -> list[InstitutionalTrade]:
        """Return raw per-investor buy/sell rows for *stock_id* since *start_date*.

        Args:
            stock_id:   Bare numeric identifier, no market suffix (e.g. '2330').
            start_date: ISO-8601 date (YYYY-MM-DD).
        """
        ...
