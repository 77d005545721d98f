"""Tests for running droute as a module (`python -m droute`)."""

from __future__ import annotations

import json
import os
import runpy
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest


def test_module_help_exits_zero() -> None:
    """Running with --help should exit cleanly with code 0."""
    with patch("sys.argv", ["droute", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("droute", run_name="__main__")
    assert exc_info.value.code == 0


def test_module_cli_subcommand_help_exits_zero() -> None:
    """Invoking a subcommand's help via module entrypoint should exit 0."""
    with patch("sys.argv", ["droute", "roads", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("droute", run_name="__main__")
    assert exc_info.value.code == 0


def test_module_json_stdout_is_pure_json() -> None:
    """Log records must not share stdout with the JSON report."""
    root = Path(__file__).resolve().parents[2]
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(root), env.get("PYTHONPATH", "")) if p
    )
    proc = subprocess.run(
        [
            sys.executable,
            "-m",
            "droute",
            "run",
            str(root / "tests" / "scenarios" / "city_a.yaml"),
            "--format",
            "json",
        ],
        capture_output=True,
        text=True,
        env=env,
        check=True,
    )
    payload = json.loads(proc.stdout)
    assert payload["summary"] == {
        "locations": 4,
        "reachable": 3,
        "unreachable": 1,
        "routes": 5,
    }
    assert "Loading scenario from" in proc.stderr
