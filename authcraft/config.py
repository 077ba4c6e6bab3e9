"""AuthCraft configuration.

Typed configuration for a single scaffolding run.  Settings use a Pydantic v2
model so they are validated at construction time and can be loaded from a
YAML file or from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

PACKAGE_MANAGERS: tuple[str, ...] = ("auto", "npm", "yarn", "pnpm", "bun")


class Config(BaseModel):
    """Settings for one run of the scaffolder.

    Instances are created once by the CLI entry point (or by tests) and passed
    to the planner and installer.
    """

    project_root: Path = Field(default=Path("."))
    framework_package: str = Field(
        default="next", description="Package whose presence marks a framework project"
    )
    auth_package: str = Field(
        default="next-auth", description="Package installed for the NextAuth integration"
    )
    package_manager: str = Field(
        default="auto", description="npm, yarn, pnpm, bun, or auto (detect from lockfile)"
    )
    placeholder_filename: str = Field(default="auth-placeholder.txt")

    @field_validator("package_manager")
    @classmethod
    def _known_package_manager(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in PACKAGE_MANAGERS:
            raise ValueError(
                f"Unknown package manager {value!r} (expected one of {', '.join(PACKAGE_MANAGERS)})"
            )
        return value

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def root(self) -> Path:
        """Absolute project root."""
        return self.project_root.resolve()

    @property
    def manifest_path(self) -> Path:
        return self.root / "package.json"

    @property
    def placeholder_path(self) -> Path:
        """Where the non-framework choices record their selection."""
        return self.root / self.placeholder_filename

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration as YAML and return the written path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            yaml.safe_dump(self.model_dump(mode="json"), sort_keys=False),
            encoding="utf-8",
        )
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load configuration from a YAML (or JSON) file.

        An empty file yields the defaults.
        """
        raw = Path(path).read_text(encoding="utf-8")
        data = yaml.safe_load(raw) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return cls.model_validate(data)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            AUTHCRAFT_PROJECT_ROOT, AUTHCRAFT_PACKAGE_MANAGER,
            AUTHCRAFT_AUTH_PACKAGE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("AUTHCRAFT_PROJECT_ROOT"):
            kwargs["project_root"] = Path(os.environ["AUTHCRAFT_PROJECT_ROOT"])
        if os.environ.get("AUTHCRAFT_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["AUTHCRAFT_PACKAGE_MANAGER"]
        if os.environ.get("AUTHCRAFT_AUTH_PACKAGE"):
            kwargs["auth_package"] = os.environ["AUTHCRAFT_AUTH_PACKAGE"]
        return cls(**kwargs)
