"""Agent package providing the single-agent lifecycle manager."""

from .core import Agent, AgentSnapshot, AgentState
from .errors import (
    AgentError,
    AlreadyExists,
    AlreadyRunning,
    AlreadyShutdown,
    DuplicateSkill,
    InvalidArgument,
    NoAgent,
    PersistenceError,
)
from .manager import AgentManager

__all__ = [
    "Agent",
    "AgentError",
    "AgentManager",
    "AgentSnapshot",
    "AgentState",
    "AlreadyExists",
    "AlreadyRunning",
    "AlreadyShutdown",
    "DuplicateSkill",
    "InvalidArgument",
    "NoAgent",
    "PersistenceError",
]
