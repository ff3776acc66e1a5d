from __future__ import annotations

import pytest

from ownable.access import ABI, dispatch, function_names, is_view
from ownable.errors import NotOwner, UnknownFunction


def test_surface_names():
    assert function_names() == ["owner", "transferOwnership", "renounceOwnership"]
    assert "initializer" not in function_names()
    assert [e["name"] for e in ABI["events"]] == ["OwnershipTransferred"]


def test_view_flags():
    assert is_view("owner")
    assert not is_view("transferOwnership")
    assert not is_view("renounceOwnership")
    with pytest.raises(UnknownFunction):
        is_view("mint")


def test_dispatch_routes_to_methods(owned, env_for, accounts):
    assert dispatch(owned, env_for("bob"), "owner") == accounts["alice"]

    dispatch(owned, env_for("alice"), "transferOwnership", [accounts["bob"]])
    assert owned.owner() == accounts["bob"]

    with pytest.raises(NotOwner):
        dispatch(owned, env_for("alice"), "renounceOwnership")

    dispatch(owned, env_for("bob"), "renounceOwnership", ())
    assert owned.is_renounced()


def test_dispatch_checks_arity(owned, env_for, accounts):
    with pytest.raises(TypeError):
        dispatch(owned, env_for("alice"), "transferOwnership", [])
    with pytest.raises(TypeError):
        dispatch(owned, env_for("alice"), "owner", [accounts["bob"]])
    assert owned.owner() == accounts["alice"]


def test_dispatch_unknown(owned, env_for):
    with pytest.raises(UnknownFunction) as ei:
        dispatch(owned, env_for("alice"), "upgradeTo", [])
    assert ei.value.context == {"fn": "upgradeTo"}
