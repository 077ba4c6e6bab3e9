"""Loads the host project's ``package.json`` into a :class:`ProjectManifest`."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from ..errors import ManifestMalformedError, ManifestMissingError
from ..models import ProjectManifest
from ..utils import load_json

MANIFEST_FILENAME = "package.json"


def read_manifest(project_root: str | Path) -> ProjectManifest:
    """Read and parse the manifest at *project_root*.

    Always reads from disk; callers that need a fresh view simply call again.

    Raises:
        ManifestMissingError: If there is no ``package.json``.
        ManifestMalformedError: If it is not a JSON object, or a dependency
            section is not an object.
    """
    path = Path(project_root) / MANIFEST_FILENAME
    if not path.is_file():
        raise ManifestMissingError(path)

    try:
        data = load_json(path)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ManifestMalformedError(path, str(exc)) from exc

    if not isinstance(data, dict):
        raise ManifestMalformedError(path, "top-level value is not an object")

    try:
        return ProjectManifest.model_validate(data)
    except ValidationError as exc:
        raise ManifestMalformedError(path, f"{exc.error_count()} invalid dependency entries") from exc
