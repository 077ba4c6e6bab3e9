"""Scaffold planner -- the state machine that drives a single run.

For the NextAuth.js choice the planner walks::

    selecting_target -> classifying -> installing -> resolving -> materializing -> done

and for every other choice::

    selecting_target -> writing_placeholder -> done

Any :class:`AuthCraftError` moves the run to ``rejected`` and stops it.
Nothing is rolled back and nothing is retried; because every step is
idempotent, running the planner again resumes from where it stopped.
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from ..config import Config
from ..detector.classifier import (
    inspect_candidate,
    is_framework_project,
    resolve_router_root,
    router_root_candidates,
)
from ..detector.manifest import read_manifest
from ..errors import AuthCraftError, NotFrameworkProjectError, RouterRootNotFoundError
from ..models import (
    IntegrationChoice,
    PlannerState,
    ScaffoldReport,
    ScaffoldStep,
)
from ..utils import console
from .installer import DependencyInstaller
from .materializer import apply_step
from .templates import TemplateRenderer

# Route segments under the router root, each a child of the one before.
ROUTE_SEGMENTS: tuple[str, ...] = ("api", "auth", "[...nextauth]")
ROUTE_FILENAME = "route.ts"


def placeholder_content(choice: IntegrationChoice) -> str:
    return f"Authentication method selected: {choice.value}"


class ScaffoldPlanner:
    """Runs the scaffold state machine for one :class:`IntegrationChoice`.

    Attributes:
        config: Settings for this run.
        installer: Used in the ``installing`` state.
        renderer: Renders the route handler in the ``materializing`` state.
    """

    def __init__(
        self,
        config: Config,
        installer: DependencyInstaller | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.installer = installer or DependencyInstaller(config.package_manager)
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def run(self, choice: IntegrationChoice) -> ScaffoldReport:
        """Execute the plan for *choice* and report every step's outcome."""
        choice = IntegrationChoice(choice)
        report = ScaffoldReport(choice=choice)

        try:
            if choice.requires_framework:
                self._run_framework(report)
            else:
                self._enter(report, PlannerState.WRITING_PLACEHOLDER)
                self._apply(
                    report,
                    ScaffoldStep.file(self.config.placeholder_path, placeholder_content(choice)),
                )
        except AuthCraftError as exc:
            report.failed_state = report.state
            report.error = exc
            report.state = PlannerState.REJECTED
            return report

        report.state = PlannerState.DONE
        return report

    def plan_route_steps(self, router_root: Path) -> list[ScaffoldStep]:
        """Return the ordered directory chain and route file under *router_root*."""
        steps: list[ScaffoldStep] = []
        current = router_root
        for segment in ROUTE_SEGMENTS:
            current = current / segment
            steps.append(ScaffoldStep.directory(current))
        steps.append(
            ScaffoldStep.file(current / ROUTE_FILENAME, self.renderer.render_route_handler())
        )
        return steps

    # -- States ------------------------------------------------------------

    def _run_framework(self, report: ScaffoldReport) -> None:
        root = self.config.root

        self._enter(report, PlannerState.CLASSIFYING)
        manifest = read_manifest(root)
        if not is_framework_project(manifest, self.config.framework_package):
            raise NotFrameworkProjectError(self.config.framework_package)

        self._enter(report, PlannerState.INSTALLING)
        report.installed = self.installer.ensure_installed(self.config.auth_package, root)

        self._enter(report, PlannerState.RESOLVING)
        candidates = router_root_candidates(root)
        router_root = resolve_router_root(root, candidates)
        if router_root is None:
            for candidate in candidates:
                inspected = inspect_candidate(candidate)
                console.print(f"  [dim]{escape(str(inspected.path))}: {inspected.kind.value}[/dim]")
            raise RouterRootNotFoundError(candidates)

        self._enter(report, PlannerState.MATERIALIZING)
        for step in self.plan_route_steps(router_root.path):
            self._apply(report, step)

    # -- Helpers -----------------------------------------------------------

    @staticmethod
    def _enter(report: ScaffoldReport, state: PlannerState) -> None:
        report.state = state

    @staticmethod
    def _apply(report: ScaffoldReport, step: ScaffoldStep) -> None:
        report.outcomes.append(apply_step(step))
