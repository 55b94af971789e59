"""
registry.py

PURPOSE: Command registry seam between the scenario harness and command handlers.
DEPENDENCIES: artifact model, world model

ARCHITECTURE NOTES:
The harness only needs one capability from a game engine: look up a handler
by name. That capability is the CommandRegistry protocol; any object with a
matching find() works, so a real engine can be plugged in without the
parser or resolver knowing about it.

CommandTable is the in-memory registry used by the CLI and tests. Lookups
are exact on the lower-cased name; aliases are registry entries, not parser
synonyms.
"""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from actor_input.models.artifact import ParseArtifact
from actor_input.models.world import Room


@dataclass
class ScenarioActor:
    """The stand-in player a scenario drives: a location and captured output."""

    name: str = "ScenarioPlayer"
    room: Room | None = None
    output: list[str] = field(default_factory=list)

    def send(self, line: str) -> None:
        """Capture a line of output."""
        self.output.append(line)

    def drain_output(self) -> list[str]:
        """Return captured output, split into lines, and clear the buffer."""
        lines: list[str] = []
        for entry in self.output:
            lines.extend(entry.splitlines() or [""])
        self.output.clear()
        return lines


@runtime_checkable
class CommandHandler(Protocol):
    """A command the harness can execute."""

    name: str

    async def execute(self, artifact: ParseArtifact, actor: ScenarioActor, alias: str) -> None:
        """Run the command for one parsed input line."""
        ...


@dataclass(frozen=True)
class CommandMatch:
    """A registry hit: the handler plus the name it was found under."""

    command: CommandHandler
    alias: str


@runtime_checkable
class CommandRegistry(Protocol):
    """Looks up command handlers by name."""

    def find(self, name: str) -> CommandMatch | None: ...


class CommandTable:
    """In-memory CommandRegistry keyed by command name and aliases."""

    def __init__(self) -> None:
        self._entries: dict[str, CommandHandler] = {}

    def register(self, command: CommandHandler, aliases: tuple[str, ...] = ()) -> None:
        """
        Register a handler under its name and any aliases.

        Raises:
            ValueError: If a name or alias is already taken
        """
        keys: list[str] = []
        for key in (command.name, *aliases):
            key = key.lower()
            if key in self._entries or key in keys:
                raise ValueError(f"Command name '{key}' is already registered")
            keys.append(key)

        # Nothing is registered unless every key is free
        for key in keys:
            self._entries[key] = command

    def find(self, name: str) -> CommandMatch | None:
        """Find a handler by exact (case-insensitive) name or alias."""
        key = name.lower()
        command = self._entries.get(key)
        if command is None:
            return None
        return CommandMatch(command=command, alias=key)

    def names(self) -> list[str]:
        """All registered names and aliases, sorted."""
        return sorted(self._entries)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._entries
