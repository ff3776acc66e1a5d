# -*- coding: utf-8 -*-
"""
ownable.access.ownable
======================

Minimal, deterministic **Ownable** primitive.

One owner identifier gates a set of privileged operations:
- read the current owner (`owner`)
- set the owner once during host setup (`initializer`)
- transfer ownership to a new account (`transfer_ownership`)
- renounce ownership, permanently (`renounce_ownership`)

It is intentionally small: the owner lives in an explicit ``OwnerSlot`` over
a host-supplied storage backend, events go to a host-supplied ``EventSink``,
and the caller arrives as an explicit ``CallEnv``. There is no time,
randomness, I/O or ambient global state.

Conventions
-----------
- Addresses are `bytes`; the null sentinel is the all-zero address of the
  configured width (see ``ownable.config``).
- The owner value is stored at ``Ownable.key``: ``OWNER_KEY = b"access:owner"``
  by default, or the key from OWNABLE_OWNER_KEY / the `key=` argument.
- Events:
    - "OwnershipTransferred" args: {"previousOwner": bytes, "newOwner": bytes}

Typical usage
-------------
    from ownable.access import Ownable
    from ownable.runtime import CallEnv, EventSink, MemoryBackend

    o = Ownable(MemoryBackend(), EventSink())
    o.initializer(deployer)

    def admin_only(env: CallEnv) -> None:
        o.require_owner(env)
        # ... privileged logic ...

Safety notes
------------
- `initializer` is trusted and unguarded; the host calls it once, before any
  guarded operation is reachable. It does not validate its argument.
- `transfer_ownership` rejects a zero `new_owner`. Use `renounce_ownership`
  to leave the component without an owner.
- Renouncement is terminal: the guard can never be satisfied again.
"""
from __future__ import annotations

from typing import Optional

from ownable.config import OwnableConfig, load_config
from ownable.errors import InvalidNewOwner, ZeroAddressNewOwner
from ownable.runtime.context import BytesLike, CallEnv, is_zero_address, to_bytes, to_hex
from ownable.runtime.events_api import EventSink
from ownable.runtime.storage_api import OwnerSlot, StorageBackend

from . import _ownership

# Default slot key only. The key actually used is `Ownable.key`, which follows
# OWNABLE_OWNER_KEY or the `key=` argument when either is given.
OWNER_KEY: bytes = b"access:owner"

__all__ = ["OWNER_KEY", "Ownable"]


class Ownable:
    """Single-owner access control over one storage cell."""

    def __init__(
        self,
        storage: StorageBackend,
        events: EventSink,
        *,
        key: Optional[bytes] = None,
        config: Optional[OwnableConfig] = None,
    ) -> None:
        self._cfg = config or load_config()
        self._slot = OwnerSlot(storage, key, config=self._cfg)
        self._events = events

    @property
    def slot(self) -> OwnerSlot:
        return self._slot

    @property
    def key(self) -> bytes:
        return self._slot.key

    @property
    def events(self) -> EventSink:
        return self._events

    def owner(self) -> bytes:
        """Return the current owner (the zero address when unset or renounced)."""
        return self._slot.read()

    def initializer(self, owner: BytesLike) -> None:
        """
        Set the owner during host setup. Unguarded and unvalidated.

        Emits OwnershipTransferred(previous, owner); on first use `previous` is
        the zero address.
        """
        _ownership.transition(self._slot, self._events, to_bytes(owner))

    def require_owner(self, env: CallEnv) -> None:
        """Raise unless `env.caller` is the current owner."""
        _ownership.assert_only_owner(self._slot, env)

    def transfer_ownership(self, env: CallEnv, new_owner: BytesLike) -> None:
        """
        Owner-only: transfer ownership to `new_owner` (must be non-zero and, in
        strict mode, exactly `address_len` bytes).

        Emits:
            - "OwnershipTransferred" with {"previousOwner": <old>, "newOwner": <new_owner>}
        """
        target = to_bytes(new_owner)
        if is_zero_address(target):
            raise ZeroAddressNewOwner(
                "new owner is the zero address",
                context={"new_owner": to_hex(target)},
            )
        if self._cfg.strict_mode and len(target) != self._cfg.address_len:
            raise InvalidNewOwner(
                f"new owner must be {self._cfg.address_len} bytes, got {len(target)}",
                context={"new_owner": to_hex(target)},
            )
        _ownership.assert_only_owner(self._slot, env)
        _ownership.transition(self._slot, self._events, target)

    def renounce_ownership(self, env: CallEnv) -> None:
        """
        Owner-only: renounce ownership (sets owner to the zero address).

        No guarded operation can succeed afterward.
        Emits:
            - "OwnershipTransferred" with {"previousOwner": <old>, "newOwner": <zero>}
        """
        _ownership.assert_only_owner(self._slot, env)
        _ownership.transition(self._slot, self._events, self._cfg.zero_address)

    def is_renounced(self) -> bool:
        """True once the stored owner is the zero address after initialization."""
        return self._slot.is_set() and is_zero_address(self._slot.read())
