"""Agent data model.

An :class:`Agent` is a plain record: identifier, name, skills, configuration
and lifecycle state.  Transition rules live in :mod:`agent.manager`; this
module only knows how to copy and serialise the record.
"""
from __future__ import annotations

import copy
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class AgentState(str, Enum):
    """Lifecycle state of an agent.

    ``Suspended`` is part of the model but no manager operation enters it.
    """

    CREATED = "Created"
    CONFIGURED = "Configured"
    RUNNING = "Running"
    SUSPENDED = "Suspended"
    SHUTDOWN = "Shutdown"


def new_agent_id() -> str:
    """Return a fresh opaque agent identifier."""
    return f"agent-{uuid.uuid4().hex[:16]}"


@dataclass
class Agent:
    """A single managed agent.

    Parameters
    ----------
    id:
        Opaque identifier, also used as the persisted file name.
    name:
        Label given at creation; never changes afterwards.
    skills:
        Distinct skill labels in insertion order.
    config:
        String settings; a later write to the same key replaces the value.
    state:
        Current :class:`AgentState`.
    """

    id: str
    name: str
    skills: List[str] = field(default_factory=list)
    config: Dict[str, str] = field(default_factory=dict)
    state: AgentState = AgentState.CREATED

    def has_skill(self, skill: str) -> bool:
        return skill in self.skills

    def snapshot(self) -> "Agent":
        """Return a deep copy that shares no mutable state with ``self``."""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the agent to a dictionary in persisted field order."""
        return {
            "id": self.id,
            "name": self.name,
            "skills": list(self.skills),
            "config": dict(self.config),
            "state": self.state.value,
        }


# Snapshots handed to callers are ordinary Agent copies.
AgentSnapshot = Agent
