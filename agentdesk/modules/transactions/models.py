"""Transaction domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from agentdesk.modules.agents.models import Agent


@dataclass(slots=True)
class Transaction:
    id: str
    amount: float
    date: datetime
    agent_id: Optional[str]


@dataclass(slots=True)
class TransactionInput:
    amount: float
    agent_id: str
    date: Optional[datetime] = None


@dataclass(slots=True)
class TransactionRow:
    """A transaction joined with the display name of its agent."""

    id: str
    amount: float
    date: datetime
    agent_id: Optional[str]
    agent_first_name: Optional[str]
    agent_last_name: Optional[str]
    agent_region: Optional[str]
    agent_name: str


@dataclass(slots=True)
class ListingSnapshot:
    """Every transaction and every agent, read in one session."""

    transactions: list[TransactionRow] = field(default_factory=list)
    agents: list[Agent] = field(default_factory=list)
