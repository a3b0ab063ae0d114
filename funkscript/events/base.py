"""
Base class for script events.

A script event is created once per occurrence by the host, handed to every
script handler in turn, and read back by the host when dispatch is over.
Handlers influence the host through two flags:

- ``cancel()`` vetoes the host's default behavior (only on cancelable events)
- ``stop_propagation()`` keeps the remaining handlers from seeing the event

Both flags only ever flip one way. Neither call raises: scripts are written
independently of each other and calling ``cancel()`` twice, or on an event
that cannot be canceled, must stay harmless.

Payload fields declare their mutability with the helpers below:

- ``snapshot()``: value describing the occurrence, fixed at construction
- ``reference()``: host-owned object; the reference is fixed but the object
  itself may be edited by handlers
- ``knob()``: control value handlers may freely overwrite
"""
from __future__ import annotations

from dataclasses import MISSING, dataclass, field, fields
from typing import Any, Callable, ClassVar, FrozenSet, Optional, Tuple

from .types import ScriptEventType

READONLY = "readonly"
CONVERT = "convert"


def snapshot(default: Any = MISSING, *, convert: Optional[Callable[[Any], Any]] = None, **kwargs: Any) -> Any:
    """Field fixed at construction."""
    return field(default=default, metadata={READONLY: True, CONVERT: convert}, **kwargs)


def reference(default: Any = MISSING, **kwargs: Any) -> Any:
    """Host-owned object shared by reference; cannot be replaced, can be edited."""
    return field(default=default, metadata={READONLY: True}, **kwargs)


def knob(default: Any = MISSING, *, convert: Optional[Callable[[Any], Any]] = None, **kwargs: Any) -> Any:
    """Field handlers may overwrite to change what the host does after dispatch."""
    return field(default=default, metadata={READONLY: False, CONVERT: convert}, **kwargs)


@dataclass(eq=False)
class ScriptEvent:
    """
    An occurrence passed through the script handler chain.

    Payload-less occurrences (CREATE, SONG_START, RESUME, ...) are raised as
    plain ``ScriptEvent`` instances; everything else uses a variant.

    Events compare by identity. Two events built from the same payload are
    still two occurrences and never share cancellation state.
    """
    type: ScriptEventType = snapshot(convert=ScriptEventType)
    cancelable: bool = snapshot(default=False, convert=bool, kw_only=True)
    _canceled: bool = field(default=False, init=False, repr=False)
    _propagate: bool = field(default=True, init=False, repr=False)

    # Payload fields included in str(event), in order.
    summary_fields: ClassVar[Tuple[str, ...]] = ()
    # Tags a caller may construct this class with; empty means any tag.
    allowed_types: ClassVar[FrozenSet[ScriptEventType]] = frozenset()

    def __post_init__(self) -> None:
        if self.allowed_types and self.type not in self.allowed_types:
            allowed = ", ".join(sorted(t.value for t in self.allowed_types))
            raise ValueError(
                f"{type(self).__name__} cannot carry {self.type.value}; expected one of: {allowed}"
            )
        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, name: str, value: Any) -> None:
        f = self.__dataclass_fields__.get(name)
        if f is not None:
            if f.metadata.get(READONLY) and self.__dict__.get("_sealed", False):
                raise AttributeError(f"{type(self).__name__}.{name} is read-only")
            convert = f.metadata.get(CONVERT)
            if convert is not None:
                value = convert(value)
        object.__setattr__(self, name, value)

    @property
    def event_canceled(self) -> bool:
        return self._canceled

    @property
    def should_propagate(self) -> bool:
        return self._propagate

    def cancel(self) -> None:
        """Veto the host's default behavior. No effect if the event is not cancelable."""
        if self.cancelable:
            self._canceled = True

    def stop_propagation(self) -> None:
        """Keep remaining handlers from receiving this event."""
        self._propagate = False

    def payload(self) -> dict:
        """Public payload fields by name, excluding the event header."""
        header = {"type", "cancelable"}
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.repr and f.name not in header and not f.name.startswith("_")
        }

    def __str__(self) -> str:
        parts = [
            f"type={self.type.value}",
            f"cancelable={self.cancelable}",
            f"canceled={self._canceled}",
        ]
        for name in self.summary_fields:
            parts.append(f"{name}={getattr(self, name)!r}")
        return f"{type(self).__name__}({', '.join(parts)})"
