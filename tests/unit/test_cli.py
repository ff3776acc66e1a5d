from __future__ import annotations

import json

import pytest

from ownable.cli import ScriptError, load_script, main, run_script
from ownable.host import LocalHost


def _h(b: bytes) -> str:
    return "0x" + b.hex()


@pytest.fixture
def scenario(accounts):
    A, B, C, D = (_h(accounts[n]) for n in ("alice", "bob", "carol", "dave"))
    return {
        "owner": A,
        "calls": [
            {"caller": A, "fn": "transferOwnership", "args": [B]},
            {"caller": A, "fn": "transferOwnership", "args": [C]},
            {"caller": B, "fn": "renounceOwnership"},
            {"caller": B, "fn": "transferOwnership", "args": [D]},
            {"caller": C, "fn": "owner"},
        ],
    }


def test_run_script_outcomes(scenario):
    outcomes = run_script(LocalHost(), scenario)
    assert [o["ok"] for o in outcomes] == [True, False, True, False, True]
    assert outcomes[1]["error"] == "ACCESS:NOT_OWNER"
    assert outcomes[3]["error"] == "ACCESS:NOT_OWNER"
    assert outcomes[4]["result"] == "0x" + "00" * 32


def test_main_json(tmp_path, scenario, capsys):
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(scenario), encoding="utf-8")

    assert main([str(path), "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["owner"] == "0x" + "00" * 32
    assert out["deployed"] is True
    assert len(out["calls"]) == 5
    # init, A->B, B->zero
    assert len(out["events"]) == 3


def test_main_human(tmp_path, scenario, capsys):
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(scenario), encoding="utf-8")

    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "transferOwnership" in out and "ACCESS:NOT_OWNER" in out
    assert out.count("event 0x") == 3


def test_unknown_function_is_reported(tmp_path, accounts, capsys):
    A = _h(accounts["alice"])
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"owner": A, "calls": [{"caller": A, "fn": "mint", "args": [1]}]}))

    assert main([str(path), "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["calls"][0]["error"] == "ABI:UNKNOWN_FUNCTION"


@pytest.mark.parametrize(
    "content",
    ["not json", "[]", '{"calls": []}', '{"owner": "0x00", "calls": {}}', '{"owner": "0x00", "calls": [{"fn": "owner"}]}'],
)
def test_malformed_scripts(tmp_path, content, capsys):
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ScriptError):
        load_script(path)
    assert main([str(path)]) == 2
    assert "error:" in capsys.readouterr().err


def test_missing_file(tmp_path):
    assert main([str(tmp_path / "nope.json")]) == 2


def test_oversized_owner_is_a_bad_script(tmp_path, capsys):
    path = tmp_path / "big.json"
    path.write_text(json.dumps({"owner": "0x" + "11" * 131_073, "calls": []}), encoding="utf-8")

    assert main([str(path)]) == 2
    err = capsys.readouterr().err
    assert "error:" in err
    assert "storage value too large" in err
