"""
runner.py

PURPOSE: Execute scenario command lines, one at a time, against a command registry.
DEPENDENCIES: parser, movement resolver, engine registry, world model

ARCHITECTURE NOTES:
For every command line, strictly in order:
1. Parse the line into a ParseArtifact
2. Look up the lower-cased intent token in the command registry and
   await the handler to completion
3. Otherwise try the intent as a movement word and move the actor
4. Otherwise count the line as an unknown command

There is no concurrency: each handler finishes before the next line is
parsed. Everything the run produces is recorded as events:
    start, run, output, unknown, complete
Includes OpenTelemetry tracing for observability.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from actor_input.engine.actions import move_actor
from actor_input.engine.registry import CommandRegistry, ScenarioActor
from actor_input.models.world import Room, World
from actor_input.observability import get_tracer
from actor_input.parser.movement import MovementResolver
from actor_input.parser.parser import InputParser
from actor_input.scenario.directives import Scenario, ScenarioError

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

UNKNOWN_COMMAND_MESSAGE = "Unknown command."

ScenarioEvent = dict[str, Any]


@dataclass
class ScenarioResult:
    """Outcome of a scenario run."""

    commands: int = 0
    unknown: int = 0
    failed: int = 0
    events: list[ScenarioEvent] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """JSON payload: run totals under "meta" plus the event log."""
        return {
            "meta": {
                "commands": self.commands,
                "unknown": self.unknown,
                "failed": self.failed,
            },
            "events": self.events,
        }


class ScenarioRunner:
    """Runs scenarios against a world and a command registry."""

    def __init__(
        self,
        registry: CommandRegistry,
        world: World,
        parser: InputParser | None = None,
        resolver: MovementResolver | None = None,
    ):
        """
        Initialize the runner.

        Args:
            registry: Where command handlers are looked up
            world: Room graph the actor moves through
            parser: Input parser (default grammar if omitted)
            resolver: Movement resolver (default grammar if omitted)
        """
        self.registry = registry
        self.world = world
        self.parser = parser or InputParser()
        self.resolver = resolver or MovementResolver()

    async def run(
        self,
        scenario: Scenario,
        fail_on_unknown: bool = False,
        on_event: Callable[[ScenarioEvent], None] | None = None,
        actor: ScenarioActor | None = None,
    ) -> ScenarioResult:
        """
        Run every command line of a scenario in order.

        Args:
            scenario: Commands and starting room
            fail_on_unknown: Mark the run failed if any command was unknown
            on_event: Optional callback called with each event as it happens
            actor: Actor to drive (a fresh one if omitted)

        Returns:
            ScenarioResult with totals and the full event log

        Raises:
            ScenarioError: If the scenario's starting room does not exist
        """
        result = ScenarioResult(commands=len(scenario.commands))
        actor = actor or ScenarioActor()
        actor.room = self._starting_room(scenario)

        def emit(event: ScenarioEvent) -> None:
            result.events.append(event)
            if on_event:
                on_event(event)

        def flush() -> None:
            for line in actor.drain_output():
                emit({"type": "output", "text": line})

        with tracer.start_as_current_span("scenario.run") as run_span:
            run_span.set_attribute("scenario.commands", result.commands)
            run_span.set_attribute("scenario.room", actor.room.id)

            logger.info(f"Scenario starting in '{actor.room.id}' ({result.commands} commands)")
            emit({"type": "start", "commands": result.commands})

            for index, line in enumerate(scenario.commands, start=1):
                emit({"type": "run", "index": index, "raw": line})

                with tracer.start_as_current_span("scenario.command") as command_span:
                    command_span.set_attribute("scenario.index", index)
                    command_span.set_attribute("scenario.raw", line)

                    outcome = await self._execute(line, actor)
                    command_span.set_attribute("scenario.outcome", outcome)

                if outcome == "unknown":
                    result.unknown += 1
                    actor.send(UNKNOWN_COMMAND_MESSAGE)
                    emit({"type": "unknown", "index": index, "raw": line})

                flush()

            result.failed = 1 if fail_on_unknown and result.unknown > 0 else 0
            emit({"type": "complete"})

            run_span.set_attribute("scenario.unknown", result.unknown)
            run_span.set_attribute("scenario.failed", result.failed)

        logger.info(
            f"Scenario complete: commands={result.commands}, "
            f"unknown={result.unknown}, failed={result.failed}"
        )
        return result

    async def _execute(self, line: str, actor: ScenarioActor) -> str:
        """
        Execute one command line.

        Returns:
            "command", "move" or "unknown"
        """
        artifact = self.parser.parse(line)
        if artifact.intent_token is None:
            return "unknown"

        name = artifact.intent_token.lower()

        command_match = self.registry.find(name)
        if command_match is not None:
            logger.debug(f"Executing '{command_match.alias}' for: {line}")
            await command_match.command.execute(artifact, actor, command_match.alias)
            return "command"

        room_exits = actor.room.get_exits() if actor.room else None
        movement = self.resolver.resolve(name, room_exits)
        if movement is not None:
            logger.debug(f"'{name}' resolved to direction '{movement.direction}'")
            move_actor(actor, self.world, movement)
            return "move"

        logger.debug(f"Unknown command: {line}")
        return "unknown"

    def _starting_room(self, scenario: Scenario) -> Room:
        if scenario.room is None:
            return self.world.initial_room

        room = self.world.get_room(scenario.room)
        if room is None:
            raise ScenarioError(f"room not found: {scenario.room}")
        return room
