"""Shared pytest fixtures for the kadena-app-scaffold test suite.

Provides reusable fixtures for:
- A small, self-contained template tree
- Settings pointing at temporary directories
- Host tool detection (npm / yarn presence)
- Mock subprocess helpers
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from kadena_scaffold.config import Settings
from kadena_scaffold.models import CreationOptions, ResolvedOptions


CONFIG_TEMPLATE = (
    'const chainId = "{{chainId}}";\n'
    'const networkId = "{{networkId}}";\n'
    'const node = "{{node}}";\n'
    'const contractName = "{{contractName}}";\n'
    'const gasStationName = "{{gasStationName}}";\n'
    "const kadenaAPI = { chainId, networkId, node, contractName, gasStationName };\n"
)


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Templates & settings
# ---------------------------------------------------------------------------

@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """A minimal template tree mirroring the shipped layout."""
    root = tmp_path / "templates"
    _write(root / "vanilla" / "index.html", "<h1>vanilla</h1>\n")
    _write(root / "vanilla" / "package.json", '{"name": "pact-vanilla-app"}\n')
    _write(
        root / "react" / "app" / "package.json",
        '{"name": "pact-blank-app", "description": "pact-blank-app starter"}\n',
    )
    _write(root / "react" / "app" / "src" / "App.js", "// template app\n")
    _write(root / "react" / "app" / "src" / "index.js", "import App from './App';\n")
    _write(root / "react" / "files" / "WalletApp.js", "// wallet app\n")
    _write(root / "react" / "files" / "GasStationApp.js", "// gas station app\n")
    _write(root / "vue" / "app" / "src" / "main.js", "// vue\n")
    _write(root / "common" / "kadena-config.js", CONFIG_TEMPLATE)
    _write(root / "common" / "pact" / "memory-wall.pact", "(module memory-wall)\n")
    return root


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Directory new projects are created in."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def settings(templates_root: Path, work_dir: Path) -> Settings:
    return Settings(templates_root=templates_root, cwd=work_dir)


@pytest.fixture
def make_resolved(settings: Settings):
    """Factory building ``ResolvedOptions`` against the fixture templates."""
    def factory(
        has_npm: bool = False,
        has_yarn: bool = False,
        **option_overrides: Any,
    ) -> ResolvedOptions:
        values: dict[str, Any] = {"project_dir": "my-dapp", "project_name": "My dApp"}
        values.update(option_overrides)
        options = CreationOptions(**values)
        if options.platform.value == "vanilla":
            template_dir = settings.templates_root / "vanilla"
        else:
            template_dir = settings.templates_root / options.platform.value / "app"
        return ResolvedOptions(
            options=options,
            template_directory=template_dir,
            target_directory=settings.cwd / options.project_dir,
            has_npm=has_npm,
            has_yarn=has_yarn,
        )

    return factory


# ---------------------------------------------------------------------------
# Host tools
# ---------------------------------------------------------------------------

@pytest.fixture
def no_package_managers():
    """Pretend neither npm nor yarn is installed."""
    with patch("shutil.which", return_value=None) as mocked:
        yield mocked


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with a
    configurable return code.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(returncode: int = 0) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
