"""Data model for project detection and scaffolding.

Pydantic v2 models for the parsed manifest and the scaffold plan, plus a
plain dataclass for the run report (which carries a live exception object).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import AuthCraftError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class IntegrationChoice(str, Enum):
    """Authentication integration offered by the prompt."""
    SUPABASE = "supabase"
    FIREBASE = "firebase"
    NEXTJS = "nextjs"

    @property
    def label(self) -> str:
        return _CHOICE_LABELS[self]

    @property
    def color(self) -> str:
        return _CHOICE_COLORS[self]

    @property
    def requires_framework(self) -> bool:
        """Only the NextAuth.js choice wires code into the host framework."""
        return self is IntegrationChoice.NEXTJS


_CHOICE_LABELS: dict[IntegrationChoice, str] = {
    IntegrationChoice.SUPABASE: "Supabase Auth",
    IntegrationChoice.FIREBASE: "Firebase Auth",
    IntegrationChoice.NEXTJS: "NextAuth.js/Auth.js",
}

_CHOICE_COLORS: dict[IntegrationChoice, str] = {
    IntegrationChoice.SUPABASE: "yellow",
    IntegrationChoice.FIREBASE: "red",
    IntegrationChoice.NEXTJS: "green",
}


class PathKind(str, Enum):
    """What was found at a router-root candidate location."""
    MISSING = "missing"
    VALID = "valid"
    INVALID = "invalid"


class StepKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"


class StepAction(str, Enum):
    CREATED = "created"
    SKIPPED = "skipped"


class PlannerState(str, Enum):
    """States of the scaffold planner."""
    SELECTING_TARGET = "selecting_target"
    CLASSIFYING = "classifying"
    INSTALLING = "installing"
    RESOLVING = "resolving"
    MATERIALIZING = "materializing"
    WRITING_PLACEHOLDER = "writing_placeholder"
    DONE = "done"
    REJECTED = "rejected"


# ---------------------------------------------------------------------------
# Manifest & paths
# ---------------------------------------------------------------------------

class ProjectManifest(BaseModel):
    """Read-only view of the dependency sections of ``package.json``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    dependencies: dict[str, Any] = Field(
        default_factory=dict, description="Runtime dependencies: name -> version (any JSON value)"
    )
    dev_dependencies: dict[str, Any] = Field(
        default_factory=dict,
        alias="devDependencies",
        description="Development dependencies: name -> version (any JSON value)",
    )

    @field_validator("dependencies", "dev_dependencies", mode="before")
    @classmethod
    def _null_section_is_empty(cls, value: object) -> object:
        # ``"dependencies": null`` is treated like an absent section.
        return {} if value is None else value

    def has_package(self, name: str) -> bool:
        """Return ``True`` if *name* is declared in either dependency section."""
        return name in self.dependencies or name in self.dev_dependencies


class ProjectPath(BaseModel):
    """An absolute candidate location and what was found there."""

    model_config = ConfigDict(frozen=True)

    path: Path
    kind: PathKind

    @property
    def is_valid(self) -> bool:
        return self.kind is PathKind.VALID


# ---------------------------------------------------------------------------
# Scaffold steps
# ---------------------------------------------------------------------------

class ScaffoldStep(BaseModel):
    """One idempotent unit of work: ensure a directory, or ensure a file."""

    model_config = ConfigDict(frozen=True)

    kind: StepKind
    path: Path
    content: Optional[str] = Field(default=None, description="File content (files only)")

    @classmethod
    def directory(cls, path: Path) -> "ScaffoldStep":
        return cls(kind=StepKind.DIRECTORY, path=path)

    @classmethod
    def file(cls, path: Path, content: str) -> "ScaffoldStep":
        return cls(kind=StepKind.FILE, path=path, content=content)


class StepOutcome(BaseModel):
    """Observable result of applying a single :class:`ScaffoldStep`."""

    kind: StepKind
    path: Path
    action: StepAction
    created_paths: list[Path] = Field(
        default_factory=list,
        description="Every path segment this step brought into existence, outermost first",
    )

    @property
    def created(self) -> bool:
        return self.action is StepAction.CREATED


# ---------------------------------------------------------------------------
# Run report
# ---------------------------------------------------------------------------

@dataclass
class ScaffoldReport:
    """Everything a single planner run did, for the CLI summary."""

    choice: IntegrationChoice
    state: PlannerState = PlannerState.SELECTING_TARGET
    failed_state: Optional[PlannerState] = None
    error: Optional[AuthCraftError] = None
    outcomes: list[StepOutcome] = field(default_factory=list)
    installed: bool = False

    @property
    def succeeded(self) -> bool:
        return self.state is PlannerState.DONE

    @property
    def created_count(self) -> int:
        return sum(1 for o in self.outcomes if o.created)

    @property
    def skipped_count(self) -> int:
        return sum(1 for o in self.outcomes if not o.created)

    def summary(self) -> dict[str, str]:
        """Return ``{path: action}`` for every applied step, in order."""
        return {str(o.path): o.action.value for o in self.outcomes}
