"""JSON lines recorder for agent lifecycle events."""
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict


class ActionRecorder:
    """Append one structured event per line to an audit log file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, event: str, agent_id: str, data: Dict[str, Any] | None = None) -> None:
        entry = {"ts": time.time(), "event": event, "agent_id": agent_id, **(data or {})}
        with self.path.open("a", encoding="utf-8") as f:
            json.dump(entry, f, ensure_ascii=False)
            f.write("\n")
