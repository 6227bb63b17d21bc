"""Utility functions for command parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

USAGE = """Usage:
    agent create <name>          - Create a new agent
    agent skill add <skill>      - Add a skill to the agent
    agent config <key> <value>   - Configure agent settings
    agent run                    - Run the agent
    agent shutdown               - Shutdown and save agent state"""

COMMAND_USAGE = {
    "create": "Usage: agent create <name>",
    "skill": "Usage: agent skill add <skill>",
    "config": "Usage: agent config <key> <value>",
}


class UsageError(ValueError):
    """Raised when the arguments do not form a valid command.

    The message is the usage text to show the user.
    """


@dataclass(frozen=True)
class Command:
    """A parsed CLI command: the manager operation name and its arguments."""

    action: str
    args: Tuple[str, ...] = field(default_factory=tuple)


def parse_command(tokens: List[str]) -> Command:
    """Map CLI ``tokens`` (without the program name) to a :class:`Command`.

    Parameters
    ----------
    tokens: list[str]
        Arguments such as ``["config", "goal", "assist"]``.

    Returns
    -------
    Command
        ``action`` is one of ``create``, ``add_skill``, ``configure``, ``run``
        or ``shutdown``.

    Raises
    ------
    UsageError
        With the full usage text for missing or unknown commands, or with the
        command's own usage line when its arguments are wrong.
    """

    if not tokens:
        raise UsageError(USAGE)
    name, rest = tokens[0], tokens[1:]
    if name == "create":
        if len(rest) != 1:
            raise UsageError(COMMAND_USAGE["create"])
        return Command("create", (rest[0],))
    if name == "skill":
        # Extra tokens after the skill label are ignored.
        if len(rest) < 2 or rest[0] != "add":
            raise UsageError(COMMAND_USAGE["skill"])
        return Command("add_skill", (rest[1],))
    if name == "config":
        if len(rest) != 2:
            raise UsageError(COMMAND_USAGE["config"])
        return Command("configure", (rest[0], rest[1]))
    if name == "run":
        return Command("run")
    if name == "shutdown":
        return Command("shutdown")
    raise UsageError(USAGE)
