"""Parser module for actor input and movement words."""

from actor_input.parser.lexer import lex, normalize
from actor_input.parser.movement import (
    DirectionResolution,
    MovementResolver,
    resolve_movement,
)
from actor_input.parser.parser import InputParser, SpanSplit, parse_input, split_spans

__all__ = [
    "DirectionResolution",
    "InputParser",
    "MovementResolver",
    "SpanSplit",
    "lex",
    "normalize",
    "parse_input",
    "resolve_movement",
    "split_spans",
]
