"""
movement.py

PURPOSE: Resolve a short movement word against a room's exits.
DEPENDENCIES: grammar model

ARCHITECTURE NOTES:
Players type "n", "nor", "ne", "northe" or a custom exit name like
"portal". The resolver maps the word to a canonical direction using a
fixed precedence (first match wins):

1. Primary directions, in grammar order: word is a prefix of the name
2. Diagonals, in grammar order: word is the abbreviation or a prefix of the name
3. Exact match against the direction of one of the room's exits

A matched compass/diagonal direction is a resolution even when the room has
no exit that way - room_exit is None and the caller reports a blocked move.
A word that matches nothing returns None and the caller treats it as a
non-movement command.

The resolver expects a lower-cased word; callers lower-case input first.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from actor_input.models.grammar import DEFAULT_GRAMMAR, Grammar

logger = logging.getLogger(__name__)


class HasDirection(Protocol):
    """Anything exposing a direction - the only thing the resolver reads from an exit."""

    @property
    def direction(self) -> str: ...


@dataclass(frozen=True)
class DirectionResolution:
    """A resolved movement word."""

    direction: str
    room_exit: HasDirection | None = None

    @property
    def blocked(self) -> bool:
        """True when the direction is valid but the room has no exit that way."""
        return self.room_exit is None


class MovementResolver:
    """Resolves movement words using one grammar's direction tables."""

    def __init__(self, grammar: Grammar = DEFAULT_GRAMMAR):
        self.grammar = grammar

    def resolve(
        self,
        word: str,
        room_exits: Sequence[HasDirection] | None,
    ) -> DirectionResolution | None:
        """
        Resolve a movement word against a room's exits.

        Args:
            word: Lower-cased movement word
            room_exits: The current room's exits, or None when there is no room

        Returns:
            DirectionResolution, or None if the word is not a movement word
        """
        if room_exits is None or not word:
            return None

        for direction in self.grammar.primary_directions:
            if direction.startswith(word):
                return self._resolved(direction, room_exits)

        for diagonal in self.grammar.diagonal_directions:
            if diagonal.abbreviation == word or diagonal.name.startswith(word):
                return self._resolved(diagonal.name, room_exits)

        for room_exit in room_exits:
            if room_exit.direction == word:
                return DirectionResolution(direction=room_exit.direction, room_exit=room_exit)

        logger.debug(f"'{word}' is not a movement word here")
        return None

    def _resolved(
        self,
        direction: str,
        room_exits: Sequence[HasDirection],
    ) -> DirectionResolution:
        room_exit = next((e for e in room_exits if e.direction == direction), None)
        return DirectionResolution(direction=direction, room_exit=room_exit)


_default_resolver = MovementResolver()


def resolve_movement(
    word: str,
    room_exits: Sequence[HasDirection] | None,
) -> DirectionResolution | None:
    """Resolve a movement word with the default grammar."""
    return _default_resolver.resolve(word, room_exits)
