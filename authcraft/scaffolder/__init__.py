"""AuthCraft scaffolder -- materializes authentication wiring in a host project.

The planner takes one ``IntegrationChoice`` and either writes a placeholder
file or, for NextAuth.js, installs ``next-auth`` and generates the catch-all
route handler under the project's App Router root.

Quick usage::

    from authcraft.config import Config
    from authcraft.models import IntegrationChoice
    from authcraft.scaffolder import ScaffoldPlanner

    planner = ScaffoldPlanner(Config(project_root="/path/to/app"))
    report = planner.run(IntegrationChoice.NEXTJS)
"""

from authcraft.scaffolder.installer import DependencyInstaller
from authcraft.scaffolder.materializer import ensure_directory, ensure_file
from authcraft.scaffolder.planner import ScaffoldPlanner
from authcraft.scaffolder.templates import TemplateRenderer

__all__ = [
    "DependencyInstaller",
    "ScaffoldPlanner",
    "TemplateRenderer",
    "ensure_directory",
    "ensure_file",
]
