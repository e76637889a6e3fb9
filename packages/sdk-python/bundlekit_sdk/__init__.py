"""bundlekit SDK - compile package manifests into build plans.

This package provides tools for:
- Loading and validating package.json manifests
- Normalizing the "exports" field into canonical export paths
- Expanding export paths into build jobs and output targets
- Producing per-job configuration for a bundling engine

Example:
    >>> from bundlekit_sdk import compile_build_plan
    >>> plan = compile_build_plan("path/to/package")
    >>> [job.name for job in plan.jobs]
    ['.', './sub']
"""

from .build import (
    BuildContext,
    ParsedExportCondition,
    build_export_paths,
    expand_export_paths,
    resolve_declaration_path,
    resolve_targets,
)
from .client import BuildPlan, compile_build_plan, load_manifest

__version__ = "0.1.0"

__all__ = [
    # Core functions
    "load_manifest",
    "compile_build_plan",
    "BuildPlan",

    # Build planning
    "build_export_paths",
    "expand_export_paths",
    "resolve_targets",
    "resolve_declaration_path",
    "BuildContext",
    "ParsedExportCondition",
]
