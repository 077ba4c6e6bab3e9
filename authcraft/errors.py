"""Error hierarchy for the detection and scaffolding engine.

Every failure the engine can report derives from :class:`AuthCraftError` and
carries a short ``kind`` tag that the CLI uses to pick an exit status.
"""

from __future__ import annotations

from pathlib import Path


class AuthCraftError(Exception):
    """Base class for all terminal scaffolding failures."""

    kind = "AuthCraftError"


class ManifestMissingError(AuthCraftError):
    """Raised when no ``package.json`` exists at the project root."""

    kind = "ManifestMissing"

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"No package.json found at {path}")


class ManifestMalformedError(AuthCraftError):
    """Raised when ``package.json`` cannot be parsed into a manifest."""

    kind = "ManifestMalformed"

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to parse {path}: {reason}")


class NotFrameworkProjectError(AuthCraftError):
    kind = "NotFrameworkProject"

    def __init__(self, framework_package: str) -> None:
        self.framework_package = framework_package
        super().__init__(
            f"This must be run in a project that depends on '{framework_package}' "
            "to set up NextAuth.js/Auth.js."
        )


class RouterRootNotFoundError(AuthCraftError):
    """Raised when none of the candidate ``app`` directories is a usable router root."""

    kind = "RouterRootNotFound"

    def __init__(self, candidates: list[Path]) -> None:
        self.candidates = candidates
        searched = ", ".join(str(c) for c in candidates)
        super().__init__(
            "No valid `app` folder found. Ensure you are using the Next.js App Router "
            f"(searched: {searched})."
        )


class InstallationFailedError(AuthCraftError):
    """Raised when the package-manager invocation does not exit cleanly."""

    kind = "InstallationFailed"

    def __init__(self, command: list[str], returncode: int | None, reason: str = "") -> None:
        self.command = command
        self.returncode = returncode
        detail = reason or f"exit status {returncode}"
        super().__init__(f"Installation command failed ({detail}): {' '.join(command)}")


class FilesystemWriteFailedError(AuthCraftError):
    kind = "FilesystemWriteFailed"

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write {path}: {reason}")
