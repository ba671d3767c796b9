"""
--------------------------------------------------------------------------------
<pmcmc project>
src/pmcmc/tests/test_cli.py
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import re
from pathlib import Path

import yaml
from typer.testing import CliRunner

from pmcmc.cli.app import app

ANSI_RE = re.compile(r"\x1b\[[0-9;]*[mK]")
runner = CliRunner()


def invoke_cli(args: list[str]):
    return runner.invoke(app, args, color=False)


def combined_output(result) -> str:
    stderr = getattr(result, "stderr", "")
    return ANSI_RE.sub("", f"{result.output}{stderr}")


def test_validate_ok(parallel_control_path: Path) -> None:
    result = invoke_cli(["validate", str(parallel_control_path)])
    assert result.exit_code == 0, combined_output(result)
    assert "OK" in combined_output(result)


def test_validate_rejects_bad_topology(write_control) -> None:
    path = write_control({"n_steps": 10, "n_chains": 2, "n_workers": 4})
    result = invoke_cli(["validate", str(path)])
    assert result.exit_code == 1
    assert "n_chains" in combined_output(result)


def test_validate_missing_file(tmp_path: Path) -> None:
    result = invoke_cli(["validate", str(tmp_path / "missing.yaml")])
    assert result.exit_code != 0


def test_summary_lists_derived_values(parallel_control_path: Path) -> None:
    result = invoke_cli(["summary", str(parallel_control_path)])
    assert result.exit_code == 0, combined_output(result)
    output = combined_output(result)
    assert "n_threads_per_worker" in output
    assert "chains_per_worker" in output


def test_resolve_prints_yaml(parallel_control_path: Path) -> None:
    result = invoke_cli(["resolve", str(parallel_control_path)])
    assert result.exit_code == 0, combined_output(result)
    payload = yaml.safe_load(result.output)
    assert payload["pmcmc_control"]["n_steps_each"] == 100
    assert payload["pmcmc_control"]["rerun_every"] == "never"


def test_resolve_writes_file(parallel_control_path: Path, tmp_path: Path) -> None:
    out = tmp_path / "resolved.yaml"
    result = invoke_cli(["resolve", str(parallel_control_path), "--out", str(out)])
    assert result.exit_code == 0, combined_output(result)
    assert yaml.safe_load(out.read_text())["pmcmc_control"]["save_restart"] == [10, 20, 30]


def test_no_args_shows_help() -> None:
    result = invoke_cli([])
    assert "validate" in combined_output(result)
