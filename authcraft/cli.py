"""AuthCraft command-line entry point.

Usage::

    authcraft                      # interactive menu
    authcraft --choice nextjs      # scripted, no prompt
    python -m authcraft --project-root ./my-app
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence

import yaml
from rich.markup import escape
from rich.prompt import Prompt

from authcraft.config import Config
from authcraft.errors import ManifestMissingError
from authcraft.models import IntegrationChoice, ScaffoldReport
from authcraft.scaffolder import ScaffoldPlanner
from authcraft.scaffolder.templates import required_env_vars
from authcraft.utils import (
    console,
    print_banner,
    print_error,
    print_success,
    print_summary_table,
)

SelectionProvider = Callable[[], IntegrationChoice]


# ---------------------------------------------------------------------------
# Selection providers
# ---------------------------------------------------------------------------


def prompt_selection() -> IntegrationChoice:
    """Ask the user which integration to set up."""
    options = list(IntegrationChoice)
    console.print("[cyan]Which authentication method would you like to set up?[/cyan]")
    for index, option in enumerate(options, 1):
        console.print(f"  {index}) [{option.color}]{option.label}[/{option.color}]")
    answer = Prompt.ask(
        "  Enter number",
        choices=[str(i) for i in range(1, len(options) + 1)],
        console=console,
    )
    return options[int(answer) - 1]


def scripted_selection(choice: IntegrationChoice | str) -> SelectionProvider:
    """Return a provider that always yields *choice*."""
    fixed = IntegrationChoice(choice)
    return lambda: fixed


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------


def run(config: Config, select: SelectionProvider) -> int:
    """Collect a selection, run the planner, and report.

    Returns:
        The process exit status: ``1`` when the manifest is missing, else ``0``.
    """
    print_banner("Welcome to AuthCraft!", "Your Next.js Auth Companion")

    choice = select()
    report = ScaffoldPlanner(config).run(choice)
    _print_report(report)

    if isinstance(report.error, ManifestMissingError):
        return 1
    return 0


def _print_report(report: ScaffoldReport) -> None:
    if report.outcomes:
        print_summary_table(report.summary(), title=f"{report.choice.label} scaffold")

    if report.error is not None:
        state = report.failed_state.value if report.failed_state else "?"
        print_error(escape(f"x {report.error} [{report.error.kind} while {state}]"))
        return

    print_success(
        f"Done: {report.created_count} created, {report.skipped_count} skipped."
    )
    if report.choice.requires_framework:
        console.print("Next steps:")
        console.print("  Add these variables to [bold].env.local[/bold]:")
        for name in required_env_vars():
            console.print(f"    {name}=")
        console.print("  Replace the sample credentials check in the generated route.ts.")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``authcraft`` / ``python -m authcraft``."""
    parser = argparse.ArgumentParser(
        prog="authcraft",
        description="AuthCraft -- scaffold authentication into a Next.js project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  authcraft\n"
            "  authcraft --choice nextjs --project-root ./my-app\n"
            "  authcraft --choice supabase\n"
        ),
    )
    parser.add_argument(
        "--project-root", "-p",
        default=None,
        help="Host project directory (default: current directory)",
    )
    parser.add_argument(
        "--choice", "-c",
        choices=[c.value for c in IntegrationChoice],
        default=None,
        help="Integration to set up without prompting",
    )
    parser.add_argument(
        "--package-manager",
        default=None,
        help="npm, yarn, pnpm, bun or auto (default: auto)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML config file with default settings",
    )

    args = parser.parse_args(argv)

    try:
        config = Config.load(Path(args.config)) if args.config else Config.from_env()
        overrides: dict[str, object] = {}
        if args.project_root:
            overrides["project_root"] = Path(args.project_root)
        if args.package_manager:
            overrides["package_manager"] = args.package_manager
        if overrides:
            config = Config.model_validate({**config.model_dump(), **overrides})
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print_error(escape(f"Error: invalid configuration: {exc}"))
        sys.exit(1)

    if not config.root.is_dir():
        print_error(escape(f"Error: project root not found: {config.root}"))
        sys.exit(1)

    select = scripted_selection(args.choice) if args.choice else prompt_selection
    exit_code = run(config, select)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
