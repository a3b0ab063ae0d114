"""
Script event variants.

One dataclass per kind of occurrence the host exposes to scripts. Each
variant fixes its type tag (or restricts it to a family) and its
cancelability before any handler sees it; handlers only get to flip the
flags and edit the fields declared as knobs.

All variants use ``eq=False``: events are compared by identity.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, FrozenSet, List, Optional, Tuple

import pygame

from .base import ScriptEvent, knob, reference, snapshot
from .data import CountdownStep, NoteDirection, SongEventData, SongNoteData
from .types import (
    COUNTDOWN_TYPES,
    DIALOGUE_TYPES,
    FOCUS_TYPES,
    KEYBOARD_TYPES,
    NOTE_TYPES,
    SONG_TIME_TYPES,
    STATE_CHANGE_TYPES,
    SUBSTATE_TYPES,
    ScriptEventType,
)

if TYPE_CHECKING:
    from .data import Conversation, NoteSprite, ScreenState


# ============================================================================
# Note Events
# ============================================================================

@dataclass(eq=False)
class NoteEvent(ScriptEvent):
    """
    A specific note was hit, missed, or is about to come on screen.

    If canceled, the host does not apply the combo change implied by
    ``combo_count``. ``play_sound`` only gates the miss-scratch sound and is
    independent of cancellation.
    """
    note: NoteSprite = reference()
    combo_count: int = snapshot(default=0, convert=int)
    play_sound: bool = knob(default=True, convert=bool)

    summary_fields: ClassVar[Tuple[str, ...]] = ("note", "combo_count")
    allowed_types: ClassVar[FrozenSet[ScriptEventType]] = NOTE_TYPES


@dataclass(eq=False)
class HitNoteEvent(NoteEvent):
    """
    A note was hit and judged.

    Handlers may rewrite the judgement and its rewards before the host
    applies them.
    """
    type: ScriptEventType = snapshot(default=ScriptEventType.NOTE_HIT, init=False, convert=ScriptEventType)
    judgement: Optional[str] = knob(default=None)
    score: int = knob(default=0, convert=int)
    is_combo_break: bool = knob(default=False, convert=bool)
    health_change: float = knob(default=0.0, convert=float)
    hit_diff: float = snapshot(default=0.0, convert=float)
    does_notesplash: bool = knob(default=False, convert=bool)

    summary_fields: ClassVar[Tuple[str, ...]] = (
        "note", "combo_count", "judgement", "score", "is_combo_break", "health_change", "hit_diff",
    )


@dataclass(eq=False)
class GhostMissEvent(ScriptEvent):
    """
    A key was pressed on a lane with no note to hit.

    ``health_change`` and ``score_change`` are penalties, applied only if the
    event is not canceled. Zeroing them suppresses the penalty while keeping
    the sound and animation, which are toggled separately.
    """
    type: ScriptEventType = snapshot(default=ScriptEventType.NOTE_GHOST_MISS, init=False, convert=ScriptEventType)
    cancelable: bool = snapshot(default=True, init=False)
    direction: NoteDirection = snapshot(convert=NoteDirection)
    has_possible_notes: bool = snapshot(convert=bool)
    health_change: float = knob(default=0.0, convert=float)
    score_change: int = knob(default=0, convert=int)
    play_sound: bool = knob(default=True, convert=bool)
    play_anim: bool = knob(default=True, convert=bool)

    summary_fields: ClassVar[Tuple[str, ...]] = (
        "direction", "has_possible_notes", "health_change", "score_change",
    )

    def penalties(self) -> Tuple[float, int]:
        """(health_change, score_change) the host should apply after dispatch."""
        if self.event_canceled:
            return 0.0, 0
        return self.health_change, self.score_change


# ============================================================================
# Song Timing Events
# ============================================================================

@dataclass(eq=False)
class SongEventOccurrence(ScriptEvent):
    """The song reached an event embedded in the chart."""
    type: ScriptEventType = snapshot(default=ScriptEventType.SONG_EVENT, init=False, convert=ScriptEventType)
    cancelable: bool = snapshot(default=True, init=False)
    event_data: SongEventData = reference()

    summary_fields: ClassVar[Tuple[str, ...]] = ("event_data",)


@dataclass(eq=False)
class UpdateEvent(ScriptEvent):
    """Per-frame tick."""
    type: ScriptEventType = snapshot(default=ScriptEventType.UPDATE, init=False, convert=ScriptEventType)
    cancelable: bool = snapshot(default=False, init=False)
    elapsed: float = snapshot(convert=float)

    summary_fields: ClassVar[Tuple[str, ...]] = ("elapsed",)


@dataclass(eq=False)
class SongTimeEvent(ScriptEvent):
    """Periodic beat or step tick."""
    cancelable: bool = snapshot(default=True, init=False)
    beat: int = snapshot(default=0, convert=int)
    step: int = snapshot(default=0, convert=int)

    summary_fields: ClassVar[Tuple[str, ...]] = ("beat", "step")
    allowed_types: ClassVar[FrozenSet[ScriptEventType]] = SONG_TIME_TYPES


@dataclass(eq=False)
class CountdownEvent(ScriptEvent):
    """The pre-song countdown started, advanced, or ended."""
    step: CountdownStep = snapshot(convert=CountdownStep)
    cancelable: bool = snapshot(default=True, convert=bool, kw_only=True)

    summary_fields: ClassVar[Tuple[str, ...]] = ("step",)
    allowed_types: ClassVar[FrozenSet[ScriptEventType]] = COUNTDOWN_TYPES


@dataclass(eq=False)
class SongLoadEvent(ScriptEvent):
    """
    Chart data was parsed and is about to be used.

    ``notes`` may be replaced wholesale, for example to remix a chart. Any
    iterable is accepted and stored as a list in iteration order; duplicates
    are kept.
    """
    type: ScriptEventType = snapshot(default=ScriptEventType.SONG_LOADED, init=False, convert=ScriptEventType)
    cancelable: bool = snapshot(default=False, init=False)
    song_id: str = snapshot(convert=str)
    difficulty: str = snapshot(convert=str)
    notes: List[SongNoteData] = knob(convert=list)

    summary_fields: ClassVar[Tuple[str, ...]] = ("song_id", "difficulty", "note_count")

    @property
    def note_count(self) -> int:
        return len(self.notes)


@dataclass(eq=False)
class PauseEvent(ScriptEvent):
    """
    The player asked to pause.

    Canceling suppresses the pause entirely; ``gitaroo`` is only read when the
    pause goes ahead.
    """
    type: ScriptEventType = snapshot(default=ScriptEventType.PAUSE, init=False, convert=ScriptEventType)
    cancelable: bool = snapshot(default=True, init=False)
    gitaroo: bool = knob(default=False, convert=bool)

    summary_fields: ClassVar[Tuple[str, ...]] = ("gitaroo",)


# ============================================================================
# Dialogue Events
# ============================================================================

@dataclass(eq=False)
class DialogueEvent(ScriptEvent):
    """A conversation started, advanced, was skipped, or ended."""
    conversation: Conversation = reference()
    cancelable: bool = snapshot(default=True, convert=bool, kw_only=True)

    summary_fields: ClassVar[Tuple[str, ...]] = ("conversation",)
    allowed_types: ClassVar[FrozenSet[ScriptEventType]] = DIALOGUE_TYPES


# ============================================================================
# Input Events
# ============================================================================

@dataclass(eq=False)
class KeyboardInputEvent(ScriptEvent):
    """Raw keyboard input passed through to scripts."""
    cancelable: bool = snapshot(default=False, init=False)
    event: pygame.event.Event = reference()

    summary_fields: ClassVar[Tuple[str, ...]] = ("key_code",)
    allowed_types: ClassVar[FrozenSet[ScriptEventType]] = KEYBOARD_TYPES

    @property
    def key_code(self) -> Optional[int]:
        return getattr(self.event, "key", None)

    @property
    def key_name(self) -> str:
        code = self.key_code
        if code is None:
            return ""
        return pygame.key.name(code)


# ============================================================================
# Screen Events
# ============================================================================

@dataclass(eq=False)
class StateChangeEvent(ScriptEvent):
    """
    The host is switching to another screen.

    Canceling aborts the pending transition. Transitions are not cancelable
    unless the call site opts in.
    """
    target_state: ScreenState = reference()
    cancelable: bool = snapshot(default=False, convert=bool, kw_only=True)

    summary_fields: ClassVar[Tuple[str, ...]] = ("target_state",)
    allowed_types: ClassVar[FrozenSet[ScriptEventType]] = STATE_CHANGE_TYPES


@dataclass(eq=False)
class SubStateChangeEvent(StateChangeEvent):
    """A substate (overlay screen) is opening or closing."""
    allowed_types: ClassVar[FrozenSet[ScriptEventType]] = SUBSTATE_TYPES


@dataclass(eq=False)
class FocusEvent(ScriptEvent):
    """The game window lost or regained focus."""
    cancelable: bool = snapshot(default=False, init=False)

    allowed_types: ClassVar[FrozenSet[ScriptEventType]] = FOCUS_TYPES

