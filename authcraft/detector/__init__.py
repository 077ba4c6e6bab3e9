"""AuthCraft project detector -- reads the manifest and classifies the project.

Quick usage::

    from authcraft.detector import read_manifest, is_framework_project, resolve_router_root

    manifest = read_manifest("/path/to/app")
    if is_framework_project(manifest):
        router_root = resolve_router_root("/path/to/app")
"""

from authcraft.detector.classifier import (
    inspect_candidate,
    is_framework_project,
    read_custom_src_dir,
    resolve_router_root,
    router_root_candidates,
)
from authcraft.detector.manifest import read_manifest

__all__ = [
    "inspect_candidate",
    "is_framework_project",
    "read_custom_src_dir",
    "read_manifest",
    "resolve_router_root",
    "router_root_candidates",
]
