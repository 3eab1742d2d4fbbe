"""Agent domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

NO_AGENT_LABEL = "No agent assigned"


class Region(str, Enum):
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"


def _capitalize(part: str) -> str:
    return part[:1].upper() + part[1:]


def agent_display_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    """Render ``"First Last"`` with each part's first letter upper-cased."""
    parts = [_capitalize(part) for part in (first_name, last_name) if part]
    return " ".join(parts) or NO_AGENT_LABEL


@dataclass(slots=True)
class Agent:
    id: str
    first_name: str
    last_name: str
    region: Region
    rating: float
    fee: float

    @property
    def display_name(self) -> str:
        return agent_display_name(self.first_name, self.last_name)


@dataclass(slots=True)
class AgentCreateInput:
    first_name: str
    last_name: str
    region: Region
    rating: float
    fee: float


# Sentinel used to differentiate between "not provided" and explicit None.
UNSET = object()


@dataclass(slots=True)
class AgentUpdateInput:
    first_name: str | object = UNSET
    last_name: str | object = UNSET
    region: Region | object = UNSET
    rating: float | object = UNSET
    fee: float | object = UNSET

    def provided(self) -> dict[str, object]:
        return {
            name: getattr(self, name)
            for name in ("first_name", "last_name", "region", "rating", "fee")
            if getattr(self, name) is not UNSET
        }
