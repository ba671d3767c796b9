"""
--------------------------------------------------------------------------------
<pmcmc project>
src/pmcmc/tests/conftest.py
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml


def _write_yaml(d: object, path: Path) -> Path:
    path.write_text(yaml.safe_dump(d, sort_keys=False))
    return path


# fixtures
@pytest.fixture
def write_control(tmp_path: Path):
    def _write(block: object, name: str = "control.yaml") -> Path:
        return _write_yaml({"pmcmc_control": block}, tmp_path / name)

    return _write


@pytest.fixture
def parallel_control_path(write_control) -> Path:
    return write_control(
        {
            "n_steps": 1000,
            "n_chains": 8,
            "n_workers": 4,
            "n_threads_total": 16,
            "save_restart": [10, 20, 30],
        }
    )
