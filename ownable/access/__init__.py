# -*- coding: utf-8 -*-
"""
ownable.access
==============

Deterministic single-owner access control.

    from ownable.access import Ownable, dispatch

    o = Ownable(backend, sink)
    o.initializer(deployer)
    dispatch(o, CallEnv(caller=deployer), "transferOwnership", [new_owner])

Storage layout (by convention)
------------------------------
- Owner: key `b"access:owner"` -> `bytes` address; unset reads as zero.

Events (convention)
-------------------
- "OwnershipTransferred" args: {"previousOwner": bytes, "newOwner": bytes}
"""
from __future__ import annotations

from ._ownership import EVENT_OWNERSHIP_TRANSFERRED
from .abi import ABI, dispatch, function_names, is_view
from .ownable import OWNER_KEY, Ownable

__all__ = [
    "ABI",
    "EVENT_OWNERSHIP_TRANSFERRED",
    "OWNER_KEY",
    "Ownable",
    "dispatch",
    "function_names",
    "is_view",
]
