"""Persist final agent snapshots as JSON files."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import PydanticSerializationError

from .core import Agent, AgentState
from .errors import PersistenceError
from .logger import logger


class AgentRecord(BaseModel):
    """Schema of a persisted agent file."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str
    skills: List[str]
    config: Dict[str, str]
    state: AgentState


class AgentStore:
    """Write agent records to ``<storage>/<id>.json``.

    Files are written once, on shutdown, and never read back by the manager.
    """

    def __init__(self, storage: Path) -> None:
        self.storage = storage

    def path_for(self, agent_id: str) -> Path:
        return self.storage / f"{agent_id}.json"

    def serialize(self, agent: Agent) -> bytes:
        """Return the canonical compact JSON document for ``agent`` as UTF-8."""
        try:
            record = AgentRecord.model_validate(agent.to_dict())
            return record.model_dump_json().encode("utf-8")
        except (ValidationError, PydanticSerializationError, ValueError) as exc:
            logger.error("Serialising agent %s failed: %s", agent.id, exc)
            raise PersistenceError(agent.id, str(exc)) from exc

    def save(self, agent: Agent) -> Path:
        """Write ``agent`` to disk, overwriting any previous file.

        Raises
        ------
        PersistenceError
            If the record cannot be serialised or the file cannot be written.
        """
        payload = self.serialize(agent)
        path = self.path_for(agent.id)
        try:
            with path.open("wb") as f:
                f.write(payload)
        except OSError as exc:
            logger.error("Writing %s failed: %s", path, exc)
            raise PersistenceError(agent.id, str(exc)) from exc
        logger.info("Saved agent %s to %s", agent.id, path)
        return path
