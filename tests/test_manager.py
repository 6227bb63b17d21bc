"""Tests for the agent lifecycle state machine."""

from __future__ import annotations

import json

import pytest

from agent import (
    AgentManager,
    AgentState,
    AlreadyExists,
    AlreadyRunning,
    AlreadyShutdown,
    DuplicateSkill,
    InvalidArgument,
    NoAgent,
)


def test_create_agent(manager) -> None:
    snapshot = manager.create("test-agent")
    assert snapshot.id == "agent-test-1"
    assert snapshot.name == "test-agent"
    assert snapshot.skills == []
    assert snapshot.config == {}
    assert snapshot.state == AgentState.CREATED
    assert manager.has_agent


def test_create_twice_keeps_existing_agent(manager) -> None:
    manager.create("first")
    manager.add_skill("memory")
    with pytest.raises(AlreadyExists, match="Agent already exists"):
        manager.create("second")
    agent = manager.get_agent()
    assert agent.id == "agent-test-1"
    assert agent.name == "first"
    assert agent.skills == ["memory"]


@pytest.mark.parametrize("name", ["", "   "])
def test_create_rejects_empty_name(manager, name) -> None:
    with pytest.raises(InvalidArgument):
        manager.create(name)
    assert manager.get_agent() is None


def test_default_ids_are_unique(tmp_path) -> None:
    first = AgentManager(state_dir=tmp_path).create("a")
    second = AgentManager(state_dir=tmp_path).create("b")
    assert first.id.startswith("agent-")
    assert first.id != second.id


def test_add_skill_rejects_duplicates(manager) -> None:
    manager.create("test-agent")
    manager.add_skill("memory")
    with pytest.raises(DuplicateSkill, match="Skill 'memory' already exists"):
        manager.add_skill("memory")
    assert manager.get_agent().skills == ["memory"]


def test_skills_keep_insertion_order_and_case(manager) -> None:
    manager.create("test-agent")
    for skill in ("search", "memory", "Memory"):
        manager.add_skill(skill)
    agent = manager.get_agent()
    assert agent.skills == ["search", "memory", "Memory"]
    assert agent.state == AgentState.CREATED


def test_add_skill_without_agent() -> None:
    with pytest.raises(NoAgent, match="No agent exists"):
        AgentManager().add_skill("x")


def test_configure_last_write_wins(manager) -> None:
    manager.create("test-agent")
    manager.configure("goal", "assist user")
    assert manager.get_agent().state == AgentState.CONFIGURED
    manager.configure("goal", "summarise")
    agent = manager.get_agent()
    assert agent.config == {"goal": "summarise"}
    assert agent.state == AgentState.CONFIGURED


def test_configure_resets_running_agent(manager) -> None:
    manager.create("test-agent")
    manager.run()
    manager.configure("mode", "fast")
    assert manager.get_agent().state == AgentState.CONFIGURED
    manager.run()
    assert manager.get_agent().state == AgentState.RUNNING


def test_configure_without_agent() -> None:
    with pytest.raises(NoAgent):
        AgentManager().configure("goal", "assist")


@pytest.mark.parametrize(
    "state", [AgentState.CREATED, AgentState.CONFIGURED, AgentState.SUSPENDED]
)
def test_run_from_runnable_states(manager, state) -> None:
    manager.create("test-agent")
    manager._agent.state = state
    manager.run()
    assert manager.get_agent().state == AgentState.RUNNING


def test_run_twice_fails(manager) -> None:
    manager.create("test-agent")
    manager.run()
    with pytest.raises(AlreadyRunning, match="Agent is already running"):
        manager.run()
    assert manager.get_agent().state == AgentState.RUNNING


def test_run_from_shutdown_state_fails(manager) -> None:
    manager.create("test-agent")
    manager._agent.state = AgentState.SHUTDOWN
    with pytest.raises(AlreadyShutdown, match="Agent is shutdown"):
        manager.run()


def test_run_without_agent() -> None:
    with pytest.raises(NoAgent):
        AgentManager().run()


def test_shutdown_clears_agent_and_persists(manager, tmp_path) -> None:
    manager.create("test-agent")
    manager.add_skill("memory")
    manager.configure("goal", "assist")
    path = manager.shutdown()
    assert path == tmp_path / "agent-test-1.json"
    assert manager.get_agent() is None
    assert not manager.has_agent
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {
        "id": "agent-test-1",
        "name": "test-agent",
        "skills": ["memory"],
        "config": {"goal": "assist"},
        "state": "Shutdown",
    }


def test_shutdown_twice_reports_no_agent(manager) -> None:
    manager.create("test-agent")
    manager.shutdown()
    with pytest.raises(NoAgent):
        manager.shutdown()


def test_create_after_shutdown_gets_new_id(manager, tmp_path) -> None:
    manager.create("first")
    manager.shutdown()
    second = manager.create("second")
    assert second.id == "agent-test-2"
    assert (tmp_path / "agent-test-1.json").exists()


def test_full_lifecycle_scenario(manager, tmp_path) -> None:
    manager.create("bot")
    manager.add_skill("memory")
    manager.configure("goal", "assist")
    manager.run()
    manager.shutdown()
    assert manager.get_agent() is None
    data = json.loads((tmp_path / "agent-test-1.json").read_text(encoding="utf-8"))
    assert data == {
        "id": "agent-test-1",
        "name": "bot",
        "skills": ["memory"],
        "config": {"goal": "assist"},
        "state": "Shutdown",
    }


def test_get_agent_returns_independent_copy(manager) -> None:
    manager.create("test-agent")
    snapshot = manager.get_agent()
    snapshot.skills.append("injected")
    snapshot.config["key"] = "value"
    snapshot.state = AgentState.SHUTDOWN
    agent = manager.get_agent()
    assert agent.skills == []
    assert agent.config == {}
    assert agent.state == AgentState.CREATED


def test_managers_are_independent(tmp_path) -> None:
    first = AgentManager(state_dir=tmp_path)
    second = AgentManager(state_dir=tmp_path)
    first.create("one")
    assert second.get_agent() is None
    second.create("two")
    assert first.get_agent().name == "one"


_LIVE_STATES = [
    AgentState.CREATED,
    AgentState.CONFIGURED,
    AgentState.RUNNING,
    AgentState.SUSPENDED,
]


@pytest.mark.parametrize("state", _LIVE_STATES)
def test_configure_from_every_live_state(manager, state) -> None:
    manager.create("test-agent")
    manager._agent.state = state
    manager.configure("mode", f"from-{state.value}")
    agent = manager.get_agent()
    assert agent.state == AgentState.CONFIGURED
    assert agent.config == {"mode": f"from-{state.value}"}


def test_configure_new_key_keeps_configured(manager) -> None:
    manager.create("test-agent")
    manager.configure("goal", "assist")
    manager.configure("mode", "fast")
    agent = manager.get_agent()
    assert agent.state == AgentState.CONFIGURED
    assert agent.config == {"goal": "assist", "mode": "fast"}


@pytest.mark.parametrize("state", _LIVE_STATES)
def test_shutdown_from_every_live_state(manager, tmp_path, state) -> None:
    manager.create("test-agent")
    manager.add_skill("memory")
    manager._agent.config["goal"] = "assist"
    manager._agent.state = state
    path = manager.shutdown()
    assert manager.get_agent() is None
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "id": "agent-test-1",
        "name": "test-agent",
        "skills": ["memory"],
        "config": {"goal": "assist"},
        "state": "Shutdown",
    }


def test_empty_skill_and_config_key_accepted(manager) -> None:
    manager.create("test-agent")
    manager.add_skill("")
    manager.configure("", "")
    with pytest.raises(DuplicateSkill):
        manager.add_skill("")
    agent = manager.get_agent()
    assert agent.skills == [""]
    assert agent.config == {"": ""}
