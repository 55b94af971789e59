"""Domain models for actor input parsing."""

from actor_input.models.artifact import (
    SEMANTIC_ERROR_CODE,
    UNKNOWN_INTENT_CODE,
    Classification,
    ErrorEnvelope,
    ParseArtifact,
    describe_error,
)
from actor_input.models.grammar import (
    DEFAULT_GRAMMAR,
    DiagonalDirection,
    Grammar,
    GrammarLoadError,
    load_grammar,
)
from actor_input.models.world import Exit, Room, World, WorldLoadError, load_world

__all__ = [
    "Classification",
    "DEFAULT_GRAMMAR",
    "DiagonalDirection",
    "ErrorEnvelope",
    "Exit",
    "Grammar",
    "GrammarLoadError",
    "ParseArtifact",
    "Room",
    "SEMANTIC_ERROR_CODE",
    "UNKNOWN_INTENT_CODE",
    "World",
    "WorldLoadError",
    "describe_error",
    "load_grammar",
    "load_world",
]
