"""
Domain entities for institutional-investor buy/sell flows.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InstitutionalActor(str, Enum):
    FOREIGN = "外資"
    INVESTMENT_TRUST = "投信"
    DEALER = "自營商"


@dataclass(frozen=True)
class InstitutionalTrade:
    """A raw provider row: share counts bought and sold by one investor class on one date."""

    date: str
    stock_id: str
    investor: str
    buy: int
    sell: int


@dataclass(frozen=True)
class ActorFlow:
    actor: InstitutionalActor
    net_lots: Optional[int]


@dataclass(frozen=True)
class InstitutionalFlow:
    trade_date: Optional[str]
    actors: tuple[ActorFlow, ...]

    @classmethod
    def unavailable(cls) -> "InstitutionalFlow":
        """Flow with every actor present but no figures (null, not zero)."""
        return cls(
            trade_date=None,
            actors=tuple(ActorFlow(actor=actor, net_lots=None) for actor in InstitutionalActor),
        )
