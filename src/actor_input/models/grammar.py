"""
grammar.py

PURPOSE: Immutable grammar configuration for the parser and movement resolver.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
The grammar holds every table the pipeline needs:
- Relation words that split primary from secondary target spans
- Primary compass directions, in matching order
- Diagonal directions with their two-letter abbreviations, in matching order

A Grammar is passed to InputParser / MovementResolver when they are built,
so alternate grammars can be tested side by side. DEFAULT_GRAMMAR is what
the module-level parse_input() and resolve_movement() use.

Grammar files are JSON documents validated against this model.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class GrammarLoadError(Exception):
    """Error loading a grammar file."""

    pass


class DiagonalDirection(BaseModel):
    """A diagonal direction and its abbreviation (ne -> northeast)."""

    model_config = ConfigDict(frozen=True)

    abbreviation: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)

    @field_validator("abbreviation", "name")
    @classmethod
    def lowercase(cls, v: str) -> str:
        return v.lower()


# Relation words recognized by the default grammar
DEFAULT_RELATION_WORDS = frozenset(
    {
        "in",
        "into",
        "inside",
        "on",
        "onto",
        "upon",
        "with",
        "using",
        "to",
        "from",
        "at",
        "under",
        "beneath",
        "below",
    }
)

DEFAULT_PRIMARY_DIRECTIONS = ("north", "south", "east", "west", "up", "down")

DEFAULT_DIAGONAL_DIRECTIONS = (
    DiagonalDirection(abbreviation="ne", name="northeast"),
    DiagonalDirection(abbreviation="nw", name="northwest"),
    DiagonalDirection(abbreviation="se", name="southeast"),
    DiagonalDirection(abbreviation="sw", name="southwest"),
)


class Grammar(BaseModel):
    """
    Fixed grammar tables for one command language.

    Relation words are stored lower-cased and matched case-insensitively.
    Direction names are expected lower-case, like the words handed to the
    movement resolver.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="default", min_length=1)
    relation_words: frozenset[str] = Field(default=DEFAULT_RELATION_WORDS)
    primary_directions: tuple[str, ...] = Field(default=DEFAULT_PRIMARY_DIRECTIONS)
    diagonal_directions: tuple[DiagonalDirection, ...] = Field(
        default=DEFAULT_DIAGONAL_DIRECTIONS
    )

    @field_validator("relation_words", mode="before")
    @classmethod
    def normalize_relation_words(cls, v: object) -> frozenset[str]:
        """Lower-case relation words; multi-word entries are rejected."""
        if isinstance(v, str):
            raise ValueError("relation_words must be a list of words")
        words = frozenset(str(w).lower() for w in v)  # type: ignore[union-attr]
        for word in words:
            if not word or len(word.split()) != 1:
                raise ValueError(f"Relation word {word!r} must be a single token")
        return words

    @field_validator("primary_directions", mode="before")
    @classmethod
    def normalize_primary_directions(cls, v: object) -> tuple[str, ...]:
        if isinstance(v, str):
            raise ValueError("primary_directions must be a list of names")
        return tuple(str(d).lower() for d in v)  # type: ignore[union-attr]

    def is_relation_word(self, token: str) -> bool:
        """Check whether a token is one of this grammar's relation words."""
        return token.lower() in self.relation_words


DEFAULT_GRAMMAR = Grammar()


def load_grammar(path: Path) -> Grammar:
    """
    Load and validate a grammar from a JSON file.

    Args:
        path: Path to the grammar JSON file

    Returns:
        The validated Grammar

    Raises:
        GrammarLoadError: If the file is missing, not JSON, or invalid
    """
    if not path.exists():
        raise GrammarLoadError(f"Grammar not found at {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise GrammarLoadError(f"Invalid JSON in {path} at line {e.lineno}: {e.msg}") from e
    except UnicodeDecodeError as e:
        raise GrammarLoadError(f"Grammar file {path} is not valid UTF-8: {e.reason}") from e
    except OSError as e:
        raise GrammarLoadError(f"Cannot read grammar file {path}: {e.strerror}") from e

    try:
        return Grammar.model_validate(data)
    except ValidationError as e:
        raise GrammarLoadError(f"Invalid grammar in {path}: {e}") from e
