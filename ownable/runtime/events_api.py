from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ownable.config import OwnableConfig, load_config

from .error import VmError

# Basic bounds for a single record.
MAX_EVENT_NAME_BYTES = 64
MAX_KEY_LEN = 64
MAX_BYTES_LEN = 4096

# Keys must be identifier-like: letters/underscore, then letters/digits/underscore.
_KEY_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

@dataclass
class Event:
    """In-host representation of an emitted event."""

    name: bytes
    args: Dict[str, bytes]


@dataclass
class CanonicalEvent:
    """
    Canonical event representation for receipts:

        name: "0x" + hex-encoded event name bytes
        args: sequence of {"k", "t", "v"} dicts
              t="b" => bytes encoded as 0x-prefixed hex
    """

    name: str
    args: Sequence[Mapping[str, Any]]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "args": [dict(a) for a in self.args]}


class EventSink:
    """
    Ordered event log owned by one host.

    Records are validated on the way in and kept in emit order; the sink
    refuses new records once ``max_events`` is reached.
    """

    def __init__(self, *, config: Optional[OwnableConfig] = None) -> None:
        self._cfg = config or load_config()
        self._events: List[Event] = []

    # --- Validation helpers -------------------------------------------------

    def _check_name(self, name: Any) -> bytes:
        if not isinstance(name, (bytes, bytearray)):
            raise VmError("event name must be bytes", code="event_invalid", context={"where": "name_type"})
        b = bytes(name)
        if len(b) == 0:
            raise VmError("event name must be non-empty", code="event_invalid", context={"where": "name_empty"})
        if len(b) > MAX_EVENT_NAME_BYTES:
            raise VmError(
                "event name too long",
                code="event_invalid",
                context={"where": "name_length", "len": len(b)},
            )
        return b

    def _check_key(self, key: Any) -> str:
        if not isinstance(key, str):
            raise VmError("event key must be str", code="event_invalid", context={"where": "key_type"})
        if len(key) == 0 or len(key) > MAX_KEY_LEN:
            raise VmError(
                "event key length out of range",
                code="event_invalid",
                context={"where": "key_length", "len": len(key)},
            )
        if not _KEY_RE.match(key):
            raise VmError(
                "event key has invalid characters",
                code="event_invalid",
                context={"where": "key_grammar", "key": key},
            )
        return key

    def _check_value(self, value: Any) -> bytes:
        if not isinstance(value, (bytes, bytearray)):
            raise VmError(
                "event args must be bytes",
                code="event_invalid",
                context={"where": "value_type", "py_type": type(value).__name__},
            )
        b = bytes(value)
        if len(b) > MAX_BYTES_LEN:
            raise VmError(
                "event bytes arg too long",
                code="event_invalid",
                context={"where": "value_bytes_length", "len": len(b)},
            )
        return b

    # --- Core sink operations -----------------------------------------------

    def emit(self, name: bytes, args: Mapping[Any, Any]) -> None:
        bname = self._check_name(name)

        if not isinstance(args, Mapping):
            raise VmError("event args must be a mapping", code="event_invalid", context={"where": "args_type"})

        if len(self._events) >= self._cfg.max_events:
            raise VmError(
                "event log full",
                code="event_limit",
                context={"max_events": self._cfg.max_events},
            )

        checked: Dict[str, bytes] = {}
        for raw_k, raw_v in args.items():
            checked[self._check_key(raw_k)] = self._check_value(raw_v)

        self._events.append(Event(bname, checked))

    def get_events(self) -> List[Event]:
        return list(self._events)

    def truncate(self, n: int) -> None:
        """Drop every record after the first ``n`` (host rollback)."""
        del self._events[n:]

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def events_for_receipt(self) -> List[CanonicalEvent]:
        """Convert the recorded events into canonical receipt events."""
        return [canonicalize(ev) for ev in self._events]


def canonicalize(ev: Event) -> CanonicalEvent:
    enc_args = [{"k": k, "t": "b", "v": "0x" + v.hex()} for k, v in ev.args.items()]
    return CanonicalEvent(name="0x" + ev.name.hex(), args=tuple(enc_args))


__all__ = [
    "Event",
    "CanonicalEvent",
    "EventSink",
    "canonicalize",
    "MAX_EVENT_NAME_BYTES",
    "MAX_KEY_LEN",
    "MAX_BYTES_LEN",
]
