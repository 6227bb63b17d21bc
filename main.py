"""Command-line entry point for the single-agent lifecycle manager.

Each invocation runs exactly one command against a fresh
:class:`~agent.manager.AgentManager` and prints the result::

    python main.py create <name>
    python main.py skill add <skill>
    python main.py config <key> <value>
    python main.py run
    python main.py shutdown

Settings come from ``AGENT_*`` environment variables or a ``.env`` file in
the working directory (see :mod:`settings`).
"""

from __future__ import annotations

import argparse
from typing import List

from agent import AgentError, AgentManager
from agent.logger import configure_logging
from agent.parsers import USAGE, Command, UsageError, parse_command
from log.record import ActionRecorder
from settings import Settings, load_settings


def build_manager(settings: Settings) -> AgentManager:
    """Create a manager wired to the configured state directory and audit log."""
    recorder = ActionRecorder(settings.audit_log) if settings.audit_log else None
    return AgentManager(state_dir=settings.state_dir, recorder=recorder)


def execute(manager: AgentManager, command: Command) -> None:
    """Run ``command`` on ``manager`` and print its result.

    Errors from the manager propagate to the caller.
    """
    if command.action == "create":
        agent = manager.create(*command.args)
        print(f"Created agent: {agent.name} (ID: {agent.id})")
    elif command.action == "add_skill":
        (skill,) = command.args
        manager.add_skill(skill)
        print(f"Added skill '{skill}' to agent {manager.get_agent().name}")
    elif command.action == "configure":
        key, value = command.args
        manager.configure(key, value)
        print(f"Configured {key} = {value} for agent {manager.get_agent().name}")
    elif command.action == "run":
        manager.run()
        agent = manager.get_agent()
        print(f"Running agent {agent.name} (ID: {agent.id})")
        print(f"Active skills: {agent.skills}")
        print(f"Configuration: {agent.config}")
    elif command.action == "shutdown":
        manager.shutdown()
        print("Agent shutdown and state saved")
    else:
        raise ValueError(f"unsupported command: {command.action}")


def cli_mode(args: List[str], manager: AgentManager) -> int:
    """Parse ``args``, run the command and return the process exit code."""
    try:
        command = parse_command(args)
    except UsageError as exc:
        print(exc)
        return 0
    try:
        execute(manager, command)
    except AgentError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


# --- Entrypoint ---
def main(argv: List[str] | None = None) -> int:
    """Parse command-line arguments and run one agent command."""
    parser = argparse.ArgumentParser(
        description="Manage a single agent's lifecycle",
        epilog=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "command", nargs=argparse.REMAINDER, help="Command and its arguments"
    )
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)
    return cli_mode(args.command, build_manager(settings))


if __name__ == "__main__":
    raise SystemExit(main())
