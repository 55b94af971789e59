"""
actions.py

PURPOSE: Built-in world commands and movement for the scenario harness.
DEPENDENCIES: registry, world model, movement resolver

ARCHITECTURE NOTES:
These are the few handlers needed to drive a room graph from scenario
files: LOOK, EXITS and movement through resolved exits. Each handler
writes to the actor's output buffer; the runner turns that into events.
"""

from actor_input.engine.registry import CommandTable, ScenarioActor
from actor_input.models.artifact import ParseArtifact
from actor_input.models.world import Exit, Room, World
from actor_input.parser.movement import DirectionResolution


def describe_exits(room: Room) -> str:
    """Describe available exits from a room."""
    directions = [room_exit.direction for room_exit in room.get_exits()]

    if not directions:
        return "There are no obvious exits."

    if len(directions) == 1:
        return f"There is an exit to the {directions[0]}."

    exit_str = ", ".join(directions[:-1]) + f" and {directions[-1]}"
    return f"There are exits to the {exit_str}."


def describe_room(room: Room) -> str:
    """Room name, description and exits as display lines."""
    lines = [room.name]
    if room.description:
        lines.append(room.description)
    lines.append(describe_exits(room))
    return "\n".join(lines)


class LookCommand:
    """LOOK - describe the current room."""

    name = "look"

    async def execute(self, artifact: ParseArtifact, actor: ScenarioActor, alias: str) -> None:  # noqa: ARG002
        if actor.room is None:
            actor.send("You are nowhere.")
            return
        actor.send(describe_room(actor.room))


class ExitsCommand:
    """EXITS - list the exits of the current room."""

    name = "exits"

    async def execute(self, artifact: ParseArtifact, actor: ScenarioActor, alias: str) -> None:  # noqa: ARG002
        if actor.room is None:
            actor.send("You are nowhere.")
            return
        actor.send(describe_exits(actor.room))


def move_actor(actor: ScenarioActor, world: World, resolution: DirectionResolution) -> bool:
    """
    Move an actor along a resolved direction.

    Args:
        actor: The actor to move
        world: World used to look up the destination room
        resolution: Output of the movement resolver

    Returns:
        True if the actor changed rooms
    """
    room_exit = resolution.room_exit
    if room_exit is None:
        actor.send(f"You can't go {resolution.direction} from here.")
        return False

    if not isinstance(room_exit, Exit):
        actor.send("You can't go that way.")
        return False

    if room_exit.locked:
        actor.send(room_exit.lock_message)
        return False

    target = world.get_room(room_exit.target)
    if target is None:
        actor.send("You can't go that way.")
        return False

    actor.room = target
    actor.send(describe_room(target))
    return True


def build_command_table() -> CommandTable:
    """Registry with the built-in world commands."""
    table = CommandTable()
    table.register(LookCommand(), aliases=("l",))
    table.register(ExitsCommand())
    return table
