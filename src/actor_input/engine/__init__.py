"""Command registry and built-in world commands."""

from actor_input.engine.actions import build_command_table, describe_room, move_actor
from actor_input.engine.registry import (
    CommandHandler,
    CommandMatch,
    CommandRegistry,
    CommandTable,
    ScenarioActor,
)

__all__ = [
    "CommandHandler",
    "CommandMatch",
    "CommandRegistry",
    "CommandTable",
    "ScenarioActor",
    "build_command_table",
    "describe_room",
    "move_actor",
]
