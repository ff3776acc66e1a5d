"""
Error kinds raised by the access layer and the reference host.

Every class derives from :class:`ownable.runtime.error.VmError`, so callers
get ``.code``, ``.message``, ``.context`` and ``to_dict()`` uniformly:

    from ownable.errors import NotOwner

    try:
        ownable.transfer_ownership(env, new_owner)
    except NotOwner as e:
        print(e.code)   # "ACCESS:NOT_OWNER"
"""

from __future__ import annotations

from ownable.runtime.error import VmError


class OwnableError(VmError):
    """Base class for ownership rejections."""

    default_code = "ACCESS:ERROR"


class NotOwner(OwnableError):
    """The caller is not the current owner."""

    default_code = "ACCESS:NOT_OWNER"


class ZeroAddressCaller(OwnableError):
    """The caller presented the null identifier."""

    default_code = "ACCESS:ZERO_ADDRESS_CALLER"


class ZeroAddressNewOwner(OwnableError):
    """A transfer named the null identifier as the new owner."""

    default_code = "ACCESS:NEW_OWNER_ZERO"


class InvalidNewOwner(OwnableError):
    """A transfer named a new owner of the wrong width (strict mode)."""

    default_code = "ACCESS:NEW_OWNER_INVALID"


class AlreadyInitialized(OwnableError):
    """The host tried to run the initializer a second time."""

    default_code = "ACCESS:ALREADY_INITIALIZED"


class UnknownFunction(VmError):
    """Dispatch of a name that is not part of the external surface."""

    default_code = "ABI:UNKNOWN_FUNCTION"


__all__ = [
    "VmError",
    "OwnableError",
    "NotOwner",
    "ZeroAddressCaller",
    "ZeroAddressNewOwner",
    "InvalidNewOwner",
    "AlreadyInitialized",
    "UnknownFunction",
]
