"""Decides whether a host project can take the NextAuth.js integration.

Two questions are answered here:

* does the manifest declare the framework package at all, and
* where is the App Router root (``app/``) that the route handler belongs in?

Router-root resolution only ever looks at the filesystem; it never creates
anything while searching.
"""

from __future__ import annotations

import re
from pathlib import Path

from ..models import PathKind, ProjectManifest, ProjectPath
from ..utils import print_warning

# Files whose presence marks a directory as an App Router root.
ROUTING_FILES: tuple[str, ...] = ("page.js", "page.tsx", "layout.js", "layout.tsx")

# Checked in order; the first one that exists is the one consulted.
FRAMEWORK_CONFIG_FILES: tuple[str, ...] = ("next.config.js", "next.config.mjs", "next.config.ts")

_SRC_DIR_RE = re.compile(r"""\bsrcDir\s*:\s*(["'`])([^"'`]+)\1""")


def is_framework_project(manifest: ProjectManifest, framework_package: str = "next") -> bool:
    """Return ``True`` iff *framework_package* is a runtime or dev dependency."""
    return manifest.has_package(framework_package)


def read_custom_src_dir(project_root: str | Path) -> str | None:
    """Return the ``srcDir`` declared in the framework config file, if any.

    A config file that cannot be read, or that mentions ``srcDir`` without a
    plain string value, only produces a warning.
    """
    root = Path(project_root)
    config_path = next(
        (root / name for name in FRAMEWORK_CONFIG_FILES if (root / name).is_file()),
        None,
    )
    if config_path is None:
        return None

    try:
        source = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        print_warning(f"Warning: Unable to parse {config_path.name}.")
        return None

    match = _SRC_DIR_RE.search(source)
    if match:
        return match.group(2).strip()
    if re.search(r"\bsrcDir\b", source):
        print_warning(f"Warning: Unable to parse {config_path.name}.")
    return None


def router_root_candidates(project_root: str | Path) -> list[Path]:
    """Return the ordered, de-duplicated list of places an ``app/`` dir may live."""
    root = Path(project_root).resolve()
    candidates = [root / "app", root / "src" / "app"]

    src_dir = read_custom_src_dir(root)
    if src_dir:
        custom = (root / src_dir / "app").resolve()
        if custom not in candidates:
            candidates.append(custom)
    return candidates


def inspect_candidate(path: Path) -> ProjectPath:
    """Classify a single candidate as missing, valid, or invalid."""
    if not path.is_dir():
        return ProjectPath(path=path, kind=PathKind.MISSING)
    if any((path / name).is_file() for name in ROUTING_FILES):
        return ProjectPath(path=path, kind=PathKind.VALID)
    return ProjectPath(path=path, kind=PathKind.INVALID)


def resolve_router_root(
    project_root: str | Path, candidates: list[Path] | None = None
) -> ProjectPath | None:
    """Return the first candidate that is a populated App Router root.

    An ``app`` directory that exists but holds no page or layout entry point
    is rejected.  Returns ``None`` when no candidate qualifies.

    Args:
        project_root: Host project root.
        candidates: Pre-computed candidate list; defaults to
            :func:`router_root_candidates`.
    """
    if candidates is None:
        candidates = router_root_candidates(project_root)
    for candidate in candidates:
        inspected = inspect_candidate(candidate)
        if inspected.is_valid:
            return inspected
    return None
