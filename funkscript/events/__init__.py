"""
funkscript script events

Event object model shared between the game host and script handlers.

Contains:
- types: ScriptEventType tags and tag families
- data: chart data and host reference protocols carried by events
- base: ScriptEvent with its cancel/stop_propagation protocol
- variants: one event class per kind of occurrence
- config_io: diagnostics configuration
- tracing: EventTracer for logging dispatch outcomes
"""

from .types import ScriptEventType

from .data import (
    NoteDirection,
    CountdownStep,
    SongNoteData,
    SongEventData,
    NoteSprite,
    Conversation,
    ScreenState,
)

from .base import (
    ScriptEvent,
    snapshot,
    reference,
    knob,
)

from .variants import (
    NoteEvent,
    HitNoteEvent,
    GhostMissEvent,
    SongEventOccurrence,
    UpdateEvent,
    SongTimeEvent,
    CountdownEvent,
    SongLoadEvent,
    PauseEvent,
    DialogueEvent,
    KeyboardInputEvent,
    StateChangeEvent,
    SubStateChangeEvent,
    FocusEvent,
)

from .config_io import (
    TraceSettings,
    load_config,
    save_config,
    trace_settings,
)

from .tracing import EventTracer

__all__ = [
    "ScriptEventType",
    "NoteDirection",
    "CountdownStep",
    "SongNoteData",
    "SongEventData",
    "NoteSprite",
    "Conversation",
    "ScreenState",
    "ScriptEvent",
    "snapshot",
    "reference",
    "knob",
    "NoteEvent",
    "HitNoteEvent",
    "GhostMissEvent",
    "SongEventOccurrence",
    "UpdateEvent",
    "SongTimeEvent",
    "CountdownEvent",
    "SongLoadEvent",
    "PauseEvent",
    "DialogueEvent",
    "KeyboardInputEvent",
    "StateChangeEvent",
    "SubStateChangeEvent",
    "FocusEvent",
    "TraceSettings",
    "load_config",
    "save_config",
    "trace_settings",
    "EventTracer",
]
