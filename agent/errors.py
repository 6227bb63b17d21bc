"""Exceptions raised by the agent lifecycle manager.

Every error is recoverable: the manager is left in a consistent state and the
message is suitable for printing straight to the CLI user.
"""
from __future__ import annotations


class AgentError(Exception):
    """Base class for lifecycle errors."""


class AlreadyExists(AgentError):
    def __init__(self) -> None:
        super().__init__("Agent already exists")


class NoAgent(AgentError):
    def __init__(self) -> None:
        super().__init__("No agent exists")


class DuplicateSkill(AgentError):
    def __init__(self, skill: str) -> None:
        self.skill = skill
        super().__init__(f"Skill '{skill}' already exists")


class AlreadyRunning(AgentError):
    def __init__(self) -> None:
        super().__init__("Agent is already running")


class AlreadyShutdown(AgentError):
    def __init__(self) -> None:
        super().__init__("Agent is shutdown")


class InvalidArgument(AgentError, ValueError):
    """Raised for an empty or blank agent name."""


class PersistenceError(AgentError):
    """Serialization or filesystem failure while saving an agent."""

    def __init__(self, agent_id: str, cause: str) -> None:
        self.agent_id = agent_id
        self.cause = cause
        super().__init__(f"Failed to persist agent {agent_id}: {cause}")
