from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


def _run_module(*args: str) -> subprocess.CompletedProcess[str]:
    cmd = [sys.executable, "-m", "dfa_sim", *args]
    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO_ROOT) + os.pathsep + env.get("PYTHONPATH", "")
    return subprocess.run(
        cmd, text=True, capture_output=True, cwd=REPO_ROOT, env=env
    )


def test_cli_help_succeeds() -> None:
    p = _run_module("--help")
    assert p.returncode == 0, p.stderr
    assert "DFA Simulator" in (p.stdout or "")


def test_cli_list_shows_catalog() -> None:
    p = _run_module("list")
    assert p.returncode == 0, p.stderr
    assert "figure-1.6" in p.stdout
    assert "figure-1.11" in p.stdout


def test_cli_run_accepts() -> None:
    p = _run_module("run", "--example", "figure-1.6", "--input", "1,0,0")
    assert p.returncode == 0, p.stderr
    assert p.stdout.splitlines()[0] == "accept on"
    assert "with final states of [2]" in p.stdout


def test_cli_run_rejects_with_exit_code_one() -> None:
    p = _run_module("run", "--example", "figure-1.11", "--input", "a,b")
    assert p.returncode == 1, p.stderr
    assert p.stdout.splitlines()[0] == "reject on"


def test_cli_empty_word() -> None:
    p = _run_module("run", "--example", "figure-1.6", "--input", "")
    assert p.returncode == 1, p.stderr
    assert "[(1, '1'), (1, '')]" in p.stdout


def test_cli_symbol_outside_alphabet_is_an_error() -> None:
    p = _run_module("run", "--example", "figure-1.6", "--input", "1,2")
    assert p.returncode == 2
    assert "not in the alphabet" in p.stderr
    assert p.stdout == ""


def test_cli_unknown_example() -> None:
    p = _run_module("run", "--example", "figure-9.9", "--input", "a")
    assert p.returncode == 2
    assert "unknown example" in p.stderr


def test_cli_events_are_json_lines() -> None:
    p = _run_module("run", "--example", "figure-1.11", "--input", "b,a,b", "--events")
    assert p.returncode == 0, p.stderr
    events = [json.loads(line) for line in p.stdout.splitlines()[3:]]
    assert [e["type"] for e in events] == [
        "RUN_START",
        "TRANSITION",
        "TRANSITION",
        "TRANSITION",
        "RUN_END",
    ]
    assert events[-1]["data"] == {"accepted": True, "consumed": 3}


def test_cli_verbose_logs_to_stderr() -> None:
    p = _run_module("-v", "run", "--example", "figure-1.6", "--input", "1")
    assert p.returncode == 0, p.stderr
    assert "dfa_sim.engine" in p.stderr
    assert p.stdout.splitlines()[0] == "accept on"
