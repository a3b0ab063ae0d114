from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, FrozenSet, Optional
import copy
import json
import logging

from .types import ScriptEventType

logger = logging.getLogger(__name__)


DEFAULTS = {
    "trace": {
        "enabled": True,
        "level": "DEBUG",
        "ignore_types": ["UPDATE", "DRAW"],
    },
}


@dataclass(frozen=True)
class TraceSettings:
    enabled: bool = True
    level: int = logging.DEBUG
    ignore_types: FrozenSet[ScriptEventType] = frozenset({ScriptEventType.UPDATE, ScriptEventType.DRAW})


def _config_path(get_save_dir: Optional[Callable[[], Path]] = None) -> Path:
    base: Path
    try:
        if callable(get_save_dir):
            base_obj = get_save_dir()
            base = base_obj if isinstance(base_obj, Path) else Path(str(base_obj))
        else:
            base = Path("save")
    except Exception:
        base = Path("save")
    return base / "events.json"


def _merged(data: dict) -> dict:
    trace = copy.deepcopy(DEFAULTS["trace"])
    trace.update({k: v for k, v in dict(data.get("trace") or {}).items() if k in trace})
    return {"trace": trace}


def load_config(get_save_dir: Optional[Callable[[], Path]] = None) -> dict:
    p = _config_path(get_save_dir)
    try:
        if p.exists():
            data = json.loads(p.read_text(encoding="utf-8"))
            # merge defaults (shallow)
            return _merged(data)
    except Exception as e:
        logger.warning(f"Ignoring unreadable event config {p}: {e}")
    return _merged({})


def save_config(cfg: dict, get_save_dir: Optional[Callable[[], Path]] = None) -> bool:
    p = _config_path(get_save_dir)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        # Keep only known keys
        data = _merged(cfg)
        p.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        return True
    except Exception as e:
        logger.warning(f"Failed to write event config {p}: {e}")
        return False


def trace_settings(cfg: Optional[dict] = None) -> TraceSettings:
    """Convert the ``trace`` section of a loaded config into TraceSettings."""
    trace = _merged(cfg or {})["trace"]

    level = logging.getLevelName(str(trace.get("level", "DEBUG")).upper())
    if not isinstance(level, int):
        logger.warning(f"Unknown trace level {trace.get('level')!r}, using DEBUG")
        level = logging.DEBUG

    ignore = set()
    for name in trace.get("ignore_types") or []:
        try:
            ignore.add(ScriptEventType.parse(name))
        except ValueError:
            logger.warning(f"Unknown event type in ignore_types: {name!r}")

    return TraceSettings(enabled=bool(trace.get("enabled", True)), level=level, ignore_types=frozenset(ignore))
