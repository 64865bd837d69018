"""Test configuration for pytest.

:author: Shay Hill
:created: 7/2/2019
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest


def pytest_assertrepr_compare(
    config: Any, op: str, left: str, right: str
) -> list[str] | None:
    """See full error diffs"""
    del config
    if op in ("==", "!="):
        return [f"{left} {op} {right}"]
    return None


TEST_RESOURCES = Path(__file__).parent / "resources"


@pytest.fixture
def write_svg(tmp_path: Path):
    """Write svg markup to a temporary file and return the path."""

    def _write_svg(markup: str, name: str = "test.svg") -> Path:
        path = tmp_path / name
        _ = path.write_text(markup, encoding="utf-8")
        return path

    return _write_svg
