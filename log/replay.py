"""Replay recorded lifecycle events for debugging or auditing."""
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Dict, Iterator


def replay(path: Path, agent_id: str | None = None, delay: float = 0.0) -> Iterator[Dict]:
    """Yield audit entries from ``path``.

    Entries belonging to other agents are skipped when ``agent_id`` is given.
    Blank lines are ignored.
    """

    with path.open("r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            data = json.loads(line)
            if agent_id is not None and data.get("agent_id") != agent_id:
                continue
            yield data
            if delay:
                time.sleep(delay)
