"""Makes sure a package is declared in the host project's manifest.

When the package is missing, the project's package manager is invoked in the
foreground so its own progress output reaches the user.  Its exit status is
the only success signal; the manifest is not re-read afterwards.
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from ..detector.manifest import read_manifest
from ..errors import InstallationFailedError
from ..utils import console, run_command

# Lockfile -> package manager, checked in order.
LOCKFILES: tuple[tuple[str, str], ...] = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("bun.lockb", "bun"),
    ("bun.lock", "bun"),
)

INSTALL_COMMANDS: dict[str, list[str]] = {
    "npm": ["npm", "install"],
    "yarn": ["yarn", "add"],
    "pnpm": ["pnpm", "add"],
    "bun": ["bun", "add"],
}


def detect_package_manager(project_root: str | Path) -> str:
    """Pick the package manager whose lockfile is present, defaulting to npm."""
    root = Path(project_root)
    for lockfile, manager in LOCKFILES:
        if (root / lockfile).is_file():
            return manager
    return "npm"


def install_command(manager: str, package_name: str) -> list[str]:
    """Return the argv that adds *package_name* with *manager*."""
    return [*INSTALL_COMMANDS[manager], package_name]


class DependencyInstaller:
    """Installs a package into the host project when it is not yet declared."""

    def __init__(self, package_manager: str = "auto") -> None:
        self.package_manager = package_manager

    def resolve_manager(self, project_root: str | Path) -> str:
        if self.package_manager == "auto":
            return detect_package_manager(project_root)
        return self.package_manager

    def ensure_installed(self, package_name: str, project_root: str | Path) -> bool:
        """Install *package_name* unless the manifest already declares it.

        Returns:
            ``True`` if the install command ran and succeeded, ``False`` if the
            package was already present and nothing was run.

        Raises:
            ManifestMissingError: If ``package.json`` is gone.
            InstallationFailedError: If the command cannot be started or exits
                non-zero.
        """
        manifest = read_manifest(project_root)
        if manifest.has_package(package_name):
            console.print(f"  [green]+[/green] {escape(package_name)} is already installed")
            return False

        cmd = install_command(self.resolve_manager(project_root), package_name)
        console.print(f"  Installing {escape(package_name)}: [bold]{escape(' '.join(cmd))}[/bold]")

        try:
            returncode = run_command(cmd, cwd=project_root)
        except FileNotFoundError as exc:
            raise InstallationFailedError(cmd, None, f"command not found: {cmd[0]}") from exc

        if returncode != 0:
            raise InstallationFailedError(cmd, returncode)
        return True
