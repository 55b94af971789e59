"""
conftest.py

Shared pytest fixtures for actor_input tests.
"""

from pathlib import Path

import pytest

from actor_input.engine.actions import build_command_table
from actor_input.engine.registry import CommandTable
from actor_input.models.grammar import Grammar, load_grammar
from actor_input.models.world import World, load_world

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_world_path() -> Path:
    """Path to the sample world JSON file."""
    return FIXTURES_DIR / "sample_world.json"


@pytest.fixture
def sample_world(sample_world_path: Path) -> World:
    """Load and validate the sample world."""
    return load_world(sample_world_path)


@pytest.fixture
def sample_scenario_path() -> Path:
    """Path to the sample scenario file."""
    return FIXTURES_DIR / "sample.scenario"


@pytest.fixture
def alt_grammar_path() -> Path:
    """Path to a grammar with a reduced relation-word set."""
    return FIXTURES_DIR / "alt_grammar.json"


@pytest.fixture
def alt_grammar(alt_grammar_path: Path) -> Grammar:
    return load_grammar(alt_grammar_path)


@pytest.fixture
def command_table() -> CommandTable:
    """Registry with the built-in world commands."""
    return build_command_table()


@pytest.fixture
def minimal_world_dict() -> dict:
    """A minimal valid world for testing."""
    return {
        "title": "Minimal Test World",
        "rooms": [
            {
                "id": "start",
                "name": "Starting Room",
                "description": "A simple room.",
                "exits": {},
            }
        ],
    }
