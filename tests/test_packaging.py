from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_mcp_sdk_pinned_below_2():
    # mcp 2.x no longer ships mcp.shared.exceptions.McpError
    project = tomllib.loads(PYPROJECT.read_text())["project"]
    mcp_requirement = next(dep for dep in project["dependencies"] if dep.startswith("mcp"))
    assert "<2" in mcp_requirement
