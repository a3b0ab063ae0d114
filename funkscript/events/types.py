"""
Event type tags.

Every script event carries one of these tags so that a handler registered for
"all events" can branch on ``event.type`` without inspecting the class.
"""
from __future__ import annotations

from enum import Enum
from typing import FrozenSet


class ScriptEventType(str, Enum):
    """Discriminator embedded in every event at construction."""

    # Object lifecycle
    CREATE = "CREATE"
    DESTROY = "DESTROY"
    ADDED = "ADDED"
    UPDATE = "UPDATE"
    DRAW = "DRAW"

    # Song timing
    STEP_HIT = "STEP_HIT"
    BEAT_HIT = "BEAT_HIT"
    SONG_EVENT = "SONG_EVENT"

    # Notes
    NOTE_INCOMING = "NOTE_INCOMING"
    NOTE_HIT = "NOTE_HIT"
    NOTE_MISS = "NOTE_MISS"
    NOTE_GHOST_MISS = "NOTE_GHOST_MISS"

    # Song flow
    SONG_START = "SONG_START"
    SONG_END = "SONG_END"
    SONG_RETRY = "SONG_RETRY"
    GAME_OVER = "GAME_OVER"
    PAUSE = "PAUSE"
    RESUME = "RESUME"
    SONG_LOADED = "SONG_LOADED"

    # Countdown
    COUNTDOWN_START = "COUNTDOWN_START"
    COUNTDOWN_STEP = "COUNTDOWN_STEP"
    COUNTDOWN_END = "COUNTDOWN_END"

    # Dialogue
    DIALOGUE_START = "DIALOGUE_START"
    DIALOGUE_LINE = "DIALOGUE_LINE"
    DIALOGUE_COMPLETE_LINE = "DIALOGUE_COMPLETE_LINE"
    DIALOGUE_END = "DIALOGUE_END"
    DIALOGUE_SKIP = "DIALOGUE_SKIP"

    # Input
    KEY_DOWN = "KEY_DOWN"
    KEY_UP = "KEY_UP"

    # Screens
    STATE_CHANGE_BEGIN = "STATE_CHANGE_BEGIN"
    STATE_CHANGE_END = "STATE_CHANGE_END"
    SUBSTATE_OPEN_BEGIN = "SUBSTATE_OPEN_BEGIN"
    SUBSTATE_OPEN_END = "SUBSTATE_OPEN_END"
    SUBSTATE_CLOSE_BEGIN = "SUBSTATE_CLOSE_BEGIN"
    SUBSTATE_CLOSE_END = "SUBSTATE_CLOSE_END"

    # Window focus
    FOCUS_LOST = "FOCUS_LOST"
    FOCUS_GAINED = "FOCUS_GAINED"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "ScriptEventType":
        """Look up a tag by name, ignoring case and surrounding whitespace."""
        key = str(name or "").strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown script event type: {name!r}") from None


# Tag families accepted by the variants that take their tag from the caller.
NOTE_TYPES: FrozenSet[ScriptEventType] = frozenset({
    ScriptEventType.NOTE_INCOMING,
    ScriptEventType.NOTE_HIT,
    ScriptEventType.NOTE_MISS,
})

SONG_TIME_TYPES: FrozenSet[ScriptEventType] = frozenset({
    ScriptEventType.STEP_HIT,
    ScriptEventType.BEAT_HIT,
})

COUNTDOWN_TYPES: FrozenSet[ScriptEventType] = frozenset({
    ScriptEventType.COUNTDOWN_START,
    ScriptEventType.COUNTDOWN_STEP,
    ScriptEventType.COUNTDOWN_END,
})

DIALOGUE_TYPES: FrozenSet[ScriptEventType] = frozenset({
    ScriptEventType.DIALOGUE_START,
    ScriptEventType.DIALOGUE_LINE,
    ScriptEventType.DIALOGUE_COMPLETE_LINE,
    ScriptEventType.DIALOGUE_END,
    ScriptEventType.DIALOGUE_SKIP,
})

KEYBOARD_TYPES: FrozenSet[ScriptEventType] = frozenset({
    ScriptEventType.KEY_DOWN,
    ScriptEventType.KEY_UP,
})

STATE_CHANGE_TYPES: FrozenSet[ScriptEventType] = frozenset({
    ScriptEventType.STATE_CHANGE_BEGIN,
    ScriptEventType.STATE_CHANGE_END,
})

SUBSTATE_TYPES: FrozenSet[ScriptEventType] = frozenset({
    ScriptEventType.SUBSTATE_OPEN_BEGIN,
    ScriptEventType.SUBSTATE_OPEN_END,
    ScriptEventType.SUBSTATE_CLOSE_BEGIN,
    ScriptEventType.SUBSTATE_CLOSE_END,
})

FOCUS_TYPES: FrozenSet[ScriptEventType] = frozenset({
    ScriptEventType.FOCUS_LOST,
    ScriptEventType.FOCUS_GAINED,
})
