"""
ownable — deterministic single-owner access control.

    from ownable import LocalHost, NotOwner

    host = LocalHost()
    host.deploy(alice)
    host.call(alice, "transferOwnership", bob)
"""

from __future__ import annotations

from .access import ABI, OWNER_KEY, Ownable, dispatch
from .config import OwnableConfig, load_config
from .errors import (AlreadyInitialized, InvalidNewOwner, NotOwner, OwnableError,
                     UnknownFunction, VmError, ZeroAddressCaller,
                     ZeroAddressNewOwner)
from .host import LocalHost
from .runtime import CallEnv, EventSink, MemoryBackend, OwnerSlot
from .version import __version__

__all__ = [
    "__version__",
    "ABI",
    "OWNER_KEY",
    "Ownable",
    "dispatch",
    "LocalHost",
    "OwnableConfig",
    "load_config",
    "CallEnv",
    "EventSink",
    "MemoryBackend",
    "OwnerSlot",
    "VmError",
    "OwnableError",
    "NotOwner",
    "ZeroAddressCaller",
    "ZeroAddressNewOwner",
    "InvalidNewOwner",
    "AlreadyInitialized",
    "UnknownFunction",
]
