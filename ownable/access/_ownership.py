# -*- coding: utf-8 -*-
"""
ownable.access._ownership
=========================

Private guard and transition helpers behind :class:`ownable.access.Ownable`.

Nothing here is part of the public surface. The public operations call into
these helpers; these helpers never call back up.

- ``assert_only_owner(slot, env)`` — the guard run before every mutation.
- ``transition(slot, sink, new_owner)`` — read previous / write new / emit.
"""
from __future__ import annotations

import logging

from ownable.errors import NotOwner, ZeroAddressCaller
from ownable.runtime.context import CallEnv, is_zero_address, to_hex
from ownable.runtime.error import VmError
from ownable.runtime.events_api import EventSink
from ownable.runtime.storage_api import OwnerSlot

log = logging.getLogger(__name__)

EVENT_OWNERSHIP_TRANSFERRED = b"OwnershipTransferred"


def assert_only_owner(slot: OwnerSlot, env: CallEnv) -> None:
    """
    Raise unless ``env.caller`` is the current owner.

    The identity check runs before the null-caller check: a null caller
    against a real owner is ``NotOwner``; a null caller against a renounced
    owner (also null) is ``ZeroAddressCaller``.
    """
    owner = slot.read()
    caller = env.current_caller()
    if caller != owner:
        raise NotOwner(
            "caller is not the owner",
            context={"caller": to_hex(caller), "owner": to_hex(owner)},
        )
    if is_zero_address(caller):
        raise ZeroAddressCaller(
            "caller is the zero address",
            context={"caller": to_hex(caller)},
        )


def transition(slot: OwnerSlot, sink: EventSink, new_owner: bytes) -> None:
    """Unvalidated write of ``new_owner`` followed by OwnershipTransferred."""
    had_value = slot.is_set()
    previous = slot.read()
    slot.write(new_owner)
    try:
        sink.emit(
            EVENT_OWNERSHIP_TRANSFERRED,
            {"previousOwner": previous, "newOwner": new_owner},
        )
    except VmError:
        # a write without its event must not survive
        if had_value:
            slot.write(previous)
        else:
            slot.clear()
        raise
    log.debug("ownership %s -> %s", to_hex(previous), to_hex(new_owner))
