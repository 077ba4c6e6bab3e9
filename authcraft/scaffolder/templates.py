"""Jinja2 template rendering for generated source files.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``authcraft/scaffolder/templates/`` directory, plus the fixed provider wiring
that the NextAuth route handler is rendered with.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

ROUTE_TEMPLATE = "nextauth/route.ts.j2"


# ---------------------------------------------------------------------------
# Provider wiring
# ---------------------------------------------------------------------------

# (import name, next-auth/providers module, env var prefix or None)
NEXTAUTH_PROVIDERS: tuple[tuple[str, str, str | None], ...] = (
    ("GoogleProvider", "google", "GOOGLE"),
    ("GitHubProvider", "github", "GITHUB"),
    ("FacebookProvider", "facebook", "FACEBOOK"),
    ("CredentialsProvider", "credentials", None),
)


def route_context() -> dict[str, Any]:
    """Build the template context for the NextAuth route handler."""
    providers = [
        {"import_name": name, "module": module, "env_prefix": prefix}
        for name, module, prefix in NEXTAUTH_PROVIDERS
    ]
    return {
        "providers": providers,
        "oauth_providers": [p for p in providers if p["env_prefix"]],
    }


def required_env_vars() -> list[str]:
    """Environment variables the generated route handler reads."""
    env_vars: list[str] = []
    for _, _, prefix in NEXTAUTH_PROVIDERS:
        if prefix:
            env_vars.extend([f"{prefix}_CLIENT_ID", f"{prefix}_CLIENT_SECRET"])
    return env_vars


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates shipped with the package.

    Templates are static assets; only the context varies between renders.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"nextauth/route.ts.j2"``).
            context: Dictionary of variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_route_handler(self) -> str:
        """Render the NextAuth ``route.ts`` handler."""
        return self.render(ROUTE_TEMPLATE, route_context())

