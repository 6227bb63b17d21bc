"""Lifecycle management for a single agent.

This module defines :class:`AgentManager`, which holds at most one live
:class:`~agent.core.Agent` and enforces its state machine::

    create -> Created
    configure -> Configured      (from any live state, including Running)
    run -> Running               (from Created, Configured or Suspended)
    shutdown -> Shutdown         (persisted, then dropped from memory)

Callers only ever receive snapshots; the manager keeps sole ownership of the
live record.  All operations are serialised by one lock so a manager can be
shared inside a long-running host.
"""
from __future__ import annotations

import threading
from pathlib import Path
from typing import Callable, Optional

from .core import Agent, AgentSnapshot, AgentState, new_agent_id
from .errors import (
    AlreadyExists,
    AlreadyRunning,
    AlreadyShutdown,
    DuplicateSkill,
    InvalidArgument,
    NoAgent,
)
from .logger import logger
from .store import AgentStore
from log.record import ActionRecorder

_RUNNABLE = {AgentState.CREATED, AgentState.CONFIGURED, AgentState.SUSPENDED}


class AgentManager:
    """Create, configure, run and shut down one agent.

    Parameters
    ----------
    state_dir:
        Directory receiving ``<id>.json`` on shutdown.  Defaults to the
        current working directory.
    id_factory:
        Callable producing fresh agent identifiers.  Tests inject a
        deterministic one to get predictable file names.
    recorder:
        Optional audit recorder receiving one event per successful operation.
    """

    def __init__(
        self,
        state_dir: Path | None = None,
        id_factory: Callable[[], str] = new_agent_id,
        recorder: ActionRecorder | None = None,
    ) -> None:
        self.store = AgentStore(state_dir if state_dir is not None else Path("."))
        self.id_factory = id_factory
        self.recorder = recorder
        self._agent: Optional[Agent] = None
        self._lock = threading.Lock()

    @property
    def has_agent(self) -> bool:
        return self._agent is not None

    def _require(self) -> Agent:
        if self._agent is None:
            logger.warning("Rejected operation: no agent exists")
            raise NoAgent()
        return self._agent

    def _record(self, event: str, agent: Agent, **data: str) -> None:
        """Append an audit event; a failing audit log never undoes the operation."""
        if not self.recorder:
            return
        try:
            self.recorder.log(event, agent.id, data)
        except (OSError, ValueError) as exc:
            logger.error("Recording %s for agent %s failed: %s", event, agent.id, exc)

    def create(self, name: str) -> AgentSnapshot:
        """Create the agent and return a snapshot of it."""
        with self._lock:
            if self._agent is not None:
                logger.warning("Rejected create %r: agent %s exists", name, self._agent.id)
                raise AlreadyExists()
            if not name or not name.strip():
                raise InvalidArgument("Agent name must not be empty")
            agent = Agent(id=self.id_factory(), name=name)
            self._agent = agent
            logger.info("Created agent %s (%s)", agent.name, agent.id)
            self._record("created", agent, name=agent.name)
            return agent.snapshot()

    def add_skill(self, skill: str) -> None:
        """Append ``skill`` unless the agent already has it."""
        with self._lock:
            agent = self._require()
            if agent.has_skill(skill):
                logger.warning("Rejected duplicate skill %r for agent %s", skill, agent.id)
                raise DuplicateSkill(skill)
            agent.skills.append(skill)
            logger.info("Added skill %r to agent %s", skill, agent.id)
            self._record("skill_added", agent, skill=skill)

    def configure(self, key: str, value: str) -> None:
        """Set ``key`` to ``value`` and move the agent to ``Configured``.

        The state change is unconditional, so configuring a running agent
        takes it out of ``Running``.
        """
        with self._lock:
            agent = self._require()
            agent.config[key] = value
            agent.state = AgentState.CONFIGURED
            logger.info("Configured agent %s: %s=%s", agent.id, key, value)
            self._record("configured", agent, key=key)

    def run(self) -> None:
        """Move the agent to ``Running``."""
        with self._lock:
            agent = self._require()
            if agent.state not in _RUNNABLE:
                logger.warning("Rejected run for agent %s in state %s", agent.id, agent.state.value)
                if agent.state == AgentState.RUNNING:
                    raise AlreadyRunning()
                raise AlreadyShutdown()
            agent.state = AgentState.RUNNING
            logger.info("Agent %s running with skills %s", agent.id, agent.skills)
            self._record("running", agent)

    def shutdown(self) -> Path:
        """Persist the agent in state ``Shutdown`` and drop it from memory.

        The live agent is only changed once the file has been written; if
        saving fails, :class:`~agent.errors.PersistenceError` propagates and
        the agent stays exactly as it was.
        """
        with self._lock:
            agent = self._require()
            final = agent.snapshot()
            final.state = AgentState.SHUTDOWN
            path = self.store.save(final)
            self._agent = None
            logger.info("Agent %s shut down", final.id)
            self._record("shutdown", final, path=str(path))
            return path

    def get_agent(self) -> AgentSnapshot | None:
        """Return a snapshot of the live agent, if any."""
        with self._lock:
            return self._agent.snapshot() if self._agent is not None else None
