"""
directives.py

PURPOSE: Read scenario files and assemble the list of command lines to run.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
A scenario file is a list of key/value directives, one per line:

    # comments and blank lines are ignored
    room: cellar
    command: look
    command: north

Supported keys are "command" (repeatable) and "room". Anything else is an
error that names the file and line, so broken scenarios fail loudly instead
of silently skipping steps.
"""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_COMMAND = "look"


class ScenarioError(Exception):
    """Error in scenario input (bad directive, unknown room, ...)."""

    pass


@dataclass(frozen=True)
class Directive:
    """One key/value line from a scenario file."""

    key: str
    value: str
    path: Path
    line_number: int

    @property
    def location(self) -> str:
        return f"{self.path}:{self.line_number}"


@dataclass
class Scenario:
    """Command lines to run, in order, and the room to start in."""

    commands: list[str] = field(default_factory=list)
    room: str | None = None


def read_scenario_file(path: Path) -> list[Directive]:
    """
    Parse a scenario file into directives.

    Args:
        path: Scenario file path

    Returns:
        Directives in file order

    Raises:
        ScenarioError: If a line is not "key: value" or the value is empty
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScenarioError(f"Cannot read scenario file {path}: {e.strerror}") from e

    directives: list[Directive] = []

    for line_number, raw_line in enumerate(content.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        key, separator, value = line.partition(":")
        if not separator:
            raise ScenarioError(f"Invalid scenario directive at {path}:{line_number}")

        key = key.strip()
        value = value.strip()
        if not value:
            raise ScenarioError(f'Missing scenario value for "{key}" at {path}:{line_number}')

        directives.append(Directive(key=key, value=value, path=path, line_number=line_number))

    return directives


def build_scenario(
    directives: list[Directive],
    commands: list[str] | None = None,
    room: str | None = None,
) -> Scenario:
    """
    Combine file directives with command-line options.

    File commands run first, then the extra commands. An explicit room
    overrides a room directive. With no commands at all the scenario runs
    a single LOOK.

    Raises:
        ScenarioError: On an unknown directive key
    """
    scenario = Scenario()

    for directive in directives:
        match directive.key:
            case "command":
                scenario.commands.append(directive.value)
            case "room":
                scenario.room = directive.value
            case _:
                raise ScenarioError(
                    f'Unknown scenario directive "{directive.key}" at {directive.location}'
                )

    for line in commands or []:
        line = line.strip()
        if line:
            scenario.commands.append(line)

    if room is not None:
        scenario.room = room

    if not scenario.commands:
        scenario.commands.append(DEFAULT_COMMAND)

    return scenario
