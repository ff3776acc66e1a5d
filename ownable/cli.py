# -*- coding: utf-8 -*-
"""
cli.py
======

Replay an ownership scenario against a local host.

Script format (JSON)
--------------------
    {
      "owner": "0x11...11",
      "calls": [
        {"caller": "0x11...11", "fn": "transferOwnership", "args": ["0x22...22"]},
        {"caller": "0x22...22", "fn": "renounceOwnership"},
        {"caller": "0x33...33", "fn": "owner"}
      ]
    }

Every call is reported as ok (with its result, if any) or as the error code
it was rejected with. Rejections do not stop the replay.

Examples
--------
python -m ownable.cli scenario.json
python -m ownable.cli scenario.json --json --log-level DEBUG

Exit codes: 0 when the script ran, 2 when it could not be read or parsed.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ownable.errors import VmError
from ownable.host import LocalHost
from ownable.runtime.context import ContextError, to_hex

log = logging.getLogger("ownable.cli")


class ScriptError(ValueError):
    """The scenario file is unreadable or malformed."""


def load_script(path: Path) -> Dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ScriptError(f"cannot read {path}: {e}") from e
    if not isinstance(data, dict) or "owner" not in data:
        raise ScriptError("script must be an object with an 'owner' field")
    calls = data.get("calls", [])
    if not isinstance(calls, list):
        raise ScriptError("'calls' must be a list")
    for i, c in enumerate(calls):
        if not isinstance(c, dict) or "caller" not in c or "fn" not in c:
            raise ScriptError(f"call #{i} needs 'caller' and 'fn'")
        if not isinstance(c.get("args", []), list):
            raise ScriptError(f"call #{i}: 'args' must be a list")
    return data


def _result_view(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return to_hex(value)
    return value


def run_script(host: LocalHost, script: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Deploy and replay `script` on `host`; return one outcome per call."""
    host.deploy(script["owner"])
    outcomes: List[Dict[str, Any]] = []
    for c in script.get("calls", []):
        entry: Dict[str, Any] = {"caller": c["caller"], "fn": c["fn"]}
        try:
            result = host.call(c["caller"], c["fn"], *c.get("args", []))
        except (VmError, ContextError, TypeError) as e:
            entry["ok"] = False
            entry["error"] = getattr(e, "code", type(e).__name__)
            entry["message"] = str(e)
        else:
            entry["ok"] = True
            entry["result"] = _result_view(result)
        outcomes.append(entry)
    return outcomes


def _print_human(outcomes: Sequence[Dict[str, Any]], snapshot: Dict[str, Any]) -> None:
    for i, o in enumerate(outcomes):
        if o["ok"]:
            tail = f" -> {o['result']}" if o.get("result") is not None else ""
            print(f"[{i}] {o['fn']} by {o['caller']}: ok{tail}")
        else:
            print(f"[{i}] {o['fn']} by {o['caller']}: {o['error']} ({o['message']})")
    print(f"owner: {snapshot['owner']}")
    for ev in snapshot["events"]:
        args = ", ".join(f"{a['k']}={a['v']}" for a in ev["args"])
        print(f"event {ev['name']}: {args}")


def _parse_cli(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="ownable-sim",
        description="Replay an ownership scenario against a local host.",
    )
    p.add_argument("script", type=Path, help="Path to scenario JSON")
    p.add_argument("--json", action="store_true", help="Print machine-readable JSON")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_cli(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        script = load_script(args.script)
        host = LocalHost()
        outcomes = run_script(host, script)
    except (ScriptError, ContextError, VmError) as e:
        log.error("bad script: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    snapshot = host.snapshot()
    if args.json:
        print(json.dumps({"calls": outcomes, **snapshot}, indent=2, sort_keys=True))
    else:
        _print_human(outcomes, snapshot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
