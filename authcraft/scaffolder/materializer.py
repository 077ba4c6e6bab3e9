"""Idempotent directory and file creation.

Both operations report what they did as a :class:`StepOutcome` instead of
raising on "already exists".  Existing files are never truncated or
overwritten: files are opened in exclusive-create mode so the existence check
and the write cannot be separated.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import FilesystemWriteFailedError
from ..models import ScaffoldStep, StepAction, StepKind, StepOutcome


def ensure_directory(path: str | Path) -> StepOutcome:
    """Create *path* and any missing ancestors.

    Returns:
        A ``created`` outcome listing every newly made segment (outermost
        first), or ``skipped`` if the directory was already there.

    Raises:
        FilesystemWriteFailedError: If *path* (or an ancestor) exists as a
            non-directory, or the OS refuses the write.
    """
    target = Path(path)
    if target.is_dir():
        return StepOutcome(kind=StepKind.DIRECTORY, path=target, action=StepAction.SKIPPED)

    missing: list[Path] = []
    current = target
    while not current.exists():
        missing.append(current)
        if current.parent == current:
            break
        current = current.parent
    if current.exists() and not current.is_dir():
        raise FilesystemWriteFailedError(current, "exists and is not a directory")

    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemWriteFailedError(target, exc.strerror or str(exc)) from exc

    return StepOutcome(
        kind=StepKind.DIRECTORY,
        path=target,
        action=StepAction.CREATED,
        created_paths=list(reversed(missing)),
    )


def ensure_file(path: str | Path, content: str) -> StepOutcome:
    """Write *content* to *path* only if the file does not exist yet.

    An existing file keeps its content and the outcome is ``skipped``.

    Raises:
        FilesystemWriteFailedError: If something other than a regular file
            already sits at *path*, the parent directory is missing, or the
            OS refuses the write.
    """
    target = Path(path)
    try:
        with target.open("x", encoding="utf-8") as fh:
            fh.write(content)
    except FileExistsError as exc:
        if not target.is_file():
            raise FilesystemWriteFailedError(target, "exists and is not a file") from exc
        return StepOutcome(kind=StepKind.FILE, path=target, action=StepAction.SKIPPED)
    except OSError as exc:
        raise FilesystemWriteFailedError(target, exc.strerror or str(exc)) from exc

    return StepOutcome(
        kind=StepKind.FILE,
        path=target,
        action=StepAction.CREATED,
        created_paths=[target],
    )


def apply_step(step: ScaffoldStep) -> StepOutcome:
    """Apply one :class:`ScaffoldStep`."""
    if step.kind is StepKind.DIRECTORY:
        return ensure_directory(step.path)
    return ensure_file(step.path, step.content or "")
