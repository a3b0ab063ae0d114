"""
Collaborator data carried by script events.

Note sprites, conversations and screens belong to the host; events only hold
references to them, so they are described here as protocols. Chart data that
the events themselves need to describe is kept as plain dataclasses.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional, Protocol


class NoteDirection(IntEnum):
    """Strumline lane."""
    LEFT = 0
    DOWN = 1
    UP = 2
    RIGHT = 3

    @property
    def name_lower(self) -> str:
        return self.name.lower()


class CountdownStep(Enum):
    """Phases of the pre-song countdown."""
    BEFORE = "BEFORE"
    THREE = "THREE"
    TWO = "TWO"
    ONE = "ONE"
    GO = "GO"
    AFTER = "AFTER"


@dataclass
class SongNoteData:
    """A single note as parsed from the chart."""
    time: float
    data: int
    length: float = 0.0
    kind: Optional[str] = None

    @property
    def direction(self) -> NoteDirection:
        return NoteDirection(self.data % 4)


@dataclass
class SongEventData:
    """A chart-embedded event (camera focus, play animation, ...)."""
    time: float
    event_kind: str
    value: Any = None


class NoteSprite(Protocol):
    """Host-side note object. Only the chart data is relied upon."""
    note_data: SongNoteData


class Conversation(Protocol):
    """Host-side dialogue state."""
    conversation_id: str


class ScreenState(Protocol):
    """Host-side screen (state or substate) being transitioned to."""

    def create(self) -> None: ...
