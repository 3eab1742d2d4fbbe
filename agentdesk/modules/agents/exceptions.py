"""Agent domain specific exceptions."""


class AgentError(Exception):
    """Base class for agent related domain errors."""


class AgentNotFoundError(AgentError):
    """Raised when the requested agent could not be found."""

    def __init__(self, agent_id: str) -> None:
        super().__init__(f"Agent not found: {agent_id}")
        self.agent_id = agent_id


class AgentValidationError(AgentError):
    """Raised when an agent field falls outside its allowed range."""
