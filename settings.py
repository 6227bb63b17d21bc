"""Runtime settings loaded from the environment and an optional ``.env`` file."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    """Configuration for the agent CLI.

    Defaults reproduce the bare command behaviour: state files land in the
    working directory, only warnings are logged and no audit log is kept.
    """

    state_dir: Path = Path(".")
    log_level: str = "WARNING"
    audit_log: Optional[Path] = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


def load_settings(env_file: str | Path = ".env") -> Settings:
    """Read ``AGENT_*`` variables, loading ``env_file`` first if present.

    Variables already set in the process environment win over the file.
    """
    load_dotenv(dotenv_path=env_file, encoding="utf-8")
    audit_log = os.getenv("AGENT_AUDIT_LOG", "").strip()
    return Settings(
        state_dir=Path(os.getenv("AGENT_STATE_DIR", "").strip() or "."),
        log_level=os.getenv("AGENT_LOG_LEVEL", "").strip() or "WARNING",
        audit_log=Path(audit_log) if audit_log else None,
    )
