"""
ownable.runtime — host-facing building blocks for the access layer.

This package contains the pieces a host wires into ``Ownable``: the resolved
caller (``CallEnv``), the storage cell over a pluggable backend, and the
ordered event sink.

    from ownable.runtime import CallEnv, EventSink, MemoryBackend, OwnerSlot

Notes
-----
- Nothing here holds module-level mutable state; every sink/backend is an
  instance owned by its host.
- No wall-clock I/O or system randomness is exposed here.
"""

from __future__ import annotations

from . import context as context
from . import events_api as events
from . import storage_api as storage
from .context import CallEnv, ContextError, is_zero_address, to_bytes, to_hex, zero_address
from .error import VmError
from .events_api import CanonicalEvent, Event, EventSink
from .storage_api import MemoryBackend, OwnerSlot, StorageBackend

__all__ = [
    # Core classes
    "CallEnv",
    "ContextError",
    "VmError",
    "Event",
    "CanonicalEvent",
    "EventSink",
    "StorageBackend",
    "MemoryBackend",
    "OwnerSlot",
    # Helpers
    "is_zero_address",
    "to_bytes",
    "to_hex",
    "zero_address",
    # Namespaces (modules)
    "context",
    "events",
    "storage",
]
