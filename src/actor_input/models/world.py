"""
world.py

PURPOSE: Pydantic models for the small room graph used by the tooling.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
The movement resolver only needs "a room's current exits, each exposing a
direction". These models provide exactly that for the CLI and the scenario
harness: rooms with named exits, loaded from a JSON world file.

Exits can be written two ways in JSON:
    "exits": {"north": "hall"}
    "exits": {"north": {"target": "hall", "locked": true}}
Both are normalized to Exit objects that carry their own direction.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator


class WorldLoadError(Exception):
    """Error loading a world file."""

    pass


class Exit(BaseModel):
    """
    An exit from a room.

    Simple exits just point to a room id.
    Locked exits refuse passage with their lock message.
    """

    direction: str = Field(..., min_length=1, description="Direction name, e.g. 'north'")
    target: str = Field(..., description="ID of the destination room")
    locked: bool = Field(default=False)
    lock_message: str = Field(
        default="The way is locked.",
        description="Message shown when trying to use a locked exit",
    )


class Room(BaseModel):
    """A location with exits to other rooms."""

    id: str = Field(..., min_length=1, pattern=r"^[a-z][a-z0-9_:]*$")
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(default="")
    exits: dict[str, Exit] = Field(
        default_factory=dict,
        description="Map of direction -> Exit (or target room id in JSON)",
    )

    @field_validator("exits", mode="before")
    @classmethod
    def normalize_exits(cls, v: dict[str, Any]) -> dict[str, Any]:
        """Convert string exits to Exit objects and stamp each with its direction."""
        if not isinstance(v, dict):
            raise ValueError("exits must be an object mapping directions to exits")
        result: dict[str, Any] = {}
        for direction, target in v.items():
            key = direction.lower()
            if isinstance(target, str):
                result[key] = Exit(direction=key, target=target)
            elif isinstance(target, dict):
                result[key] = Exit(**{**target, "direction": key})
            else:
                result[key] = target
        return result

    def get_exits(self) -> list[Exit]:
        """Exits currently available from this room, in definition order."""
        return list(self.exits.values())


class World(BaseModel):
    """
    A complete room graph.

    This is the root model loaded from a world JSON file.
    """

    title: str = Field(default="Untitled World", min_length=1)
    rooms: list[Room] = Field(..., min_length=1)
    start_room: str | None = Field(
        default=None,
        description="Room ID actors start in (defaults to the first room)",
    )

    @model_validator(mode="after")
    def validate_references(self) -> "World":
        """Ensure room IDs are unique and every reference points at a room."""
        room_ids = [room.id for room in self.rooms]
        seen: set[str] = set()
        for room_id in room_ids:
            if room_id in seen:
                raise ValueError(f"Duplicate room id '{room_id}'")
            seen.add(room_id)

        if self.start_room is not None and self.start_room not in seen:
            raise ValueError(f"Start room '{self.start_room}' not found")

        for room in self.rooms:
            for direction, exit_info in room.exits.items():
                if exit_info.target not in seen:
                    raise ValueError(
                        f"Room '{room.id}' has exit '{direction}' to unknown room "
                        f"'{exit_info.target}'"
                    )
        return self

    def get_room(self, room_id: str) -> Room | None:
        """Get a room by ID."""
        for room in self.rooms:
            if room.id == room_id:
                return room
        return None

    @property
    def initial_room(self) -> Room:
        if self.start_room is not None:
            room = self.get_room(self.start_room)
            if room is not None:
                return room
        return self.rooms[0]


def load_world(path: Path) -> World:
    """
    Load and validate a world from a JSON file.

    Raises:
        WorldLoadError: If the file is missing, not JSON, or invalid
    """
    if not path.exists():
        raise WorldLoadError(f"World file not found at {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise WorldLoadError(f"Invalid JSON in {path} at line {e.lineno}: {e.msg}") from e
    except UnicodeDecodeError as e:
        raise WorldLoadError(f"World file {path} is not valid UTF-8: {e.reason}") from e
    except OSError as e:
        raise WorldLoadError(f"Cannot read world file {path}: {e.strerror}") from e

    try:
        return World.model_validate(data)
    except ValidationError as e:
        raise WorldLoadError(f"Invalid world in {path}: {e}") from e
