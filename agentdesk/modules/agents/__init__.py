"""Domain layer for agent management."""

from .exceptions import AgentError, AgentNotFoundError, AgentValidationError
from .models import (
    NO_AGENT_LABEL,
    UNSET,
    Agent,
    AgentCreateInput,
    AgentUpdateInput,
    Region,
    agent_display_name,
)
from .service import AgentService

__all__ = [
    "NO_AGENT_LABEL",
    "UNSET",
    "Agent",
    "AgentCreateInput",
    "AgentError",
    "AgentNotFoundError",
    "AgentService",
    "AgentUpdateInput",
    "AgentValidationError",
    "Region",
    "agent_display_name",
]
