import itertools

import pytest

from agent import AgentManager


def sequential_ids(prefix: str = "agent-test"):
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


@pytest.fixture
def manager(tmp_path):
    return AgentManager(state_dir=tmp_path, id_factory=sequential_ids())
