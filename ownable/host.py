"""
ownable.host — a small reference host for the Ownable primitive.

The access layer assumes the embedding system:
  * resolves who the caller is,
  * runs every external call atomically and serially,
  * decides when the initializer runs.

``LocalHost`` does exactly that for local runs, tests and the CLI:
calls are serialized behind a re-entrant lock, the owner slot and the event
log are snapshotted before each call and restored if the call raises, and
``deploy`` runs the initializer at most once.

Usage
-----
    host = LocalHost()
    host.deploy(alice)
    host.call(alice, "transferOwnership", bob)
    assert host.call(carol, "owner") == bob
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

from ownable.access import Ownable, dispatch, is_view
from ownable.config import OwnableConfig, load_config
from ownable.errors import AlreadyInitialized
from ownable.runtime.context import BytesLike, CallEnv, to_hex
from ownable.runtime.events_api import CanonicalEvent, Event, EventSink
from ownable.runtime.storage_api import MemoryBackend, StorageBackend

log = logging.getLogger("ownable.host")


class LocalHost:
    def __init__(
        self,
        storage: Optional[StorageBackend] = None,
        *,
        config: Optional[OwnableConfig] = None,
    ) -> None:
        self._cfg = config or load_config()
        self._storage = storage if storage is not None else MemoryBackend()
        self._sink = EventSink(config=self._cfg)
        self._ownable = Ownable(self._storage, self._sink, config=self._cfg)
        self._lock = threading.RLock()
        self._deployed = False

    # ---- accessors ---- #

    @property
    def ownable(self) -> Ownable:
        return self._ownable

    @property
    def deployed(self) -> bool:
        return self._deployed

    @property
    def events(self) -> List[Event]:
        return self._sink.get_events()

    def receipt(self) -> List[CanonicalEvent]:
        return self._sink.events_for_receipt()

    # ---- lifecycle ---- #

    def deploy(self, owner: BytesLike) -> None:
        """Run the initializer exactly once for this host."""
        with self._lock:
            if self._deployed:
                raise AlreadyInitialized(
                    "ownable already initialized",
                    context={"owner": to_hex(self._ownable.owner())},
                )
            self._atomically(lambda: self._ownable.initializer(owner))
            self._deployed = True
            log.debug("deployed owner=%s", to_hex(self._ownable.owner()))

    def call(self, caller: BytesLike, fn: str, *args: Any) -> Any:
        """
        Route external call `fn(*args)` from `caller` through the ABI.

        Failures propagate unchanged after state has been restored.
        """
        env = CallEnv(caller=caller, config=self._cfg)
        with self._lock:
            log.debug("call %s from %s", fn, to_hex(env.caller))
            if is_view(fn):
                return dispatch(self._ownable, env, fn, args)
            return self._atomically(lambda: dispatch(self._ownable, env, fn, args))

    def snapshot(self) -> Dict[str, Any]:
        """Plain view of host state for diagnostics."""
        with self._lock:
            return {
                "deployed": self._deployed,
                "owner": to_hex(self._ownable.owner()),
                "events": [ev.to_dict() for ev in self.receipt()],
            }

    # ---- internals ---- #

    def _atomically(self, fn):
        slot = self._ownable.slot
        had_value = slot.is_set()
        saved = slot.read()
        mark = len(self._sink)
        try:
            return fn()
        except Exception:
            if had_value:
                slot.write(saved)
            else:
                slot.clear()
            self._sink.truncate(mark)
            raise


__all__ = ["LocalHost"]
