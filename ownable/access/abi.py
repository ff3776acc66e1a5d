"""
ownable.access.abi — external surface of Ownable and name-based dispatch.

Hosts route external calls by function name. This module is the single
table of which names exist, what they take, and which Ownable method
serves them. ``initializer`` is trusted setup and is not listed.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence

from ownable.errors import UnknownFunction
from ownable.runtime.context import CallEnv

from .ownable import Ownable

ABI: Dict[str, Any] = {
    "functions": [
        {
            "name": "owner",
            "inputs": [],
            "outputs": [{"type": "address"}],
            "stateMutability": "view",
        },
        {
            "name": "transferOwnership",
            "inputs": [{"name": "newOwner", "type": "address"}],
            "outputs": [],
            "stateMutability": "nonpayable",
        },
        {
            "name": "renounceOwnership",
            "inputs": [],
            "outputs": [],
            "stateMutability": "nonpayable",
        },
    ],
    "events": [
        {
            "name": "OwnershipTransferred",
            "inputs": [
                {"name": "previousOwner", "type": "address"},
                {"name": "newOwner", "type": "address"},
            ],
        }
    ],
}

_Handler = Callable[[Ownable, CallEnv, Sequence[Any]], Any]

_HANDLERS: Dict[str, _Handler] = {
    "owner": lambda o, env, args: o.owner(),
    "transferOwnership": lambda o, env, args: o.transfer_ownership(env, *args),
    "renounceOwnership": lambda o, env, args: o.renounce_ownership(env),
}


def _spec(fn: str) -> Dict[str, Any]:
    for entry in ABI["functions"]:
        if entry["name"] == fn:
            return entry
    raise UnknownFunction(f"unknown function: {fn}", context={"fn": fn})


def function_names() -> List[str]:
    return [f["name"] for f in ABI["functions"]]


def is_view(fn: str) -> bool:
    return _spec(fn)["stateMutability"] == "view"


def dispatch(ownable: Ownable, env: CallEnv, fn: str, args: Sequence[Any] = ()) -> Any:
    """
    Run external function `fn` against `ownable` on behalf of `env.caller`.

    Raises UnknownFunction for names outside the surface and TypeError when
    the argument count does not match the ABI entry.
    """
    spec = _spec(fn)
    expected = len(spec["inputs"])
    if len(args) != expected:
        raise TypeError(f"{fn} expects {expected} argument(s), got {len(args)}")
    return _HANDLERS[fn](ownable, env, args)


__all__ = ["ABI", "dispatch", "function_names", "is_view"]
