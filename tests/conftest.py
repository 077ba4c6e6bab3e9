"""Shared pytest fixtures for the AuthCraft test suite.

Provides reusable fixtures for:
- Temporary host projects with a ``package.json`` and App Router layout
- A mocked package-manager subprocess
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable
from unittest.mock import MagicMock, patch

import pytest

from authcraft.config import Config


# ---------------------------------------------------------------------------
# Host projects
# ---------------------------------------------------------------------------

def _write_manifest(root: Path, data: Any) -> Path:
    path = root / "package.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def write_manifest() -> Callable[[Path, Any], Path]:
    """Writes *data* as ``package.json`` under a root: ``write_manifest(root, data)``."""
    return _write_manifest


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty host project directory (resolved, so paths compare cleanly)."""
    root = tmp_path / "host-app"
    root.mkdir()
    yield root.resolve()


@pytest.fixture
def make_project(project_root: Path) -> Callable[..., Path]:
    """Factory that lays out a host project.

    Usage::

        root = make_project(dependencies={"next": "14.2.0"}, app_files=["page.tsx"])
    """

    def _make(
        dependencies: dict[str, str] | None = None,
        dev_dependencies: dict[str, str] | None = None,
        app_dir: str | None = "app",
        app_files: list[str] | None = None,
        manifest: bool = True,
    ) -> Path:
        if manifest:
            data: dict[str, Any] = {"name": "host-app", "version": "0.1.0"}
            if dependencies is not None:
                data["dependencies"] = dependencies
            if dev_dependencies is not None:
                data["devDependencies"] = dev_dependencies
            _write_manifest(project_root, data)
        if app_dir is not None:
            app_path = project_root / app_dir
            app_path.mkdir(parents=True, exist_ok=True)
            for name in app_files or []:
                (app_path / name).write_text("export default function Page() {}\n", encoding="utf-8")
        return project_root

    return _make


@pytest.fixture
def next_project(make_project: Callable[..., Path]) -> Path:
    """A Next.js App Router project without next-auth installed."""
    return make_project(
        dependencies={"next": "14.2.3", "react": "18.3.1"},
        app_files=["page.tsx", "layout.tsx"],
    )


@pytest.fixture
def config(project_root: Path) -> Config:
    return Config(project_root=project_root)


# ---------------------------------------------------------------------------
# Subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_install() -> MagicMock:
    """Patch the package-manager invocation to succeed without running anything."""
    with patch("authcraft.scaffolder.installer.run_command", return_value=0) as mocked:
        yield mocked
