"""
Manifest Loading and Plan Compilation
=====================================

Entry points that touch the filesystem: reading ``package.json`` and
compiling the complete build plan of a package directory.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from bundlekit_common import MANIFEST_FILENAME, TYPES_CONDITION, ManifestError, NotFoundError
from bundlekit_common import ValidationError as BundlekitValidationError
from bundlekit_schema import BundleOptions, PackageManifest
from pydantic import ValidationError as PydanticValidationError

from .build import (
    BuildContext,
    BundleJobConfig,
    ExportPaths,
    ParsedExportCondition,
    Reporter,
    build_entry_configs,
    build_export_paths,
    resolve_declaration_path,
)


def load_manifest(path: Union[str, Path]) -> PackageManifest:
    """
    Load and validate a package manifest.

    Args:
        path: Path to package.json, or a directory containing one

    Returns:
        Validated PackageManifest

    Raises:
        NotFoundError: If the manifest file does not exist
        ManifestError: If the file is not a valid JSON object or fails validation
    """
    manifest_path = Path(path)
    if manifest_path.is_dir():
        manifest_path = manifest_path / MANIFEST_FILENAME

    if not manifest_path.is_file():
        raise NotFoundError(f"{MANIFEST_FILENAME} not found: {manifest_path}")

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {manifest_path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"{manifest_path} must contain a JSON object")

    try:
        return PackageManifest.model_validate(data)
    except BundlekitValidationError as e:
        raise ManifestError(f"Invalid manifest {manifest_path}: {e.message}") from e
    except PydanticValidationError as e:
        raise ManifestError(f"Invalid manifest {manifest_path}: {e}") from e


@dataclass
class BuildPlan:
    """Everything computed for one package by a single compile."""

    manifest: PackageManifest
    export_paths: ExportPaths
    jobs: List[ParsedExportCondition]
    configs: List[BundleJobConfig]
    context: BuildContext
    declarations: Dict[int, str] = field(default_factory=dict)
    """Declaration path per job index, for jobs whose subpath declares types"""

    def to_dict(self) -> Dict[str, Any]:
        jobs = []
        for index, (job, config) in enumerate(zip(self.jobs, self.configs)):
            entry = job.to_dict()
            entry["targets"] = [
                {"format": o.format.value, "file": o.file} for o in config.output
            ]
            if index in self.declarations:
                entry["declaration"] = self.declarations[index]
            jobs.append(entry)
        return {
            "name": self.manifest.name,
            "exportPaths": self.export_paths,
            "jobs": jobs,
        }


def compile_build_plan(
    cwd: Union[str, Path],
    options: Optional[BundleOptions] = None,
    entry: Optional[str] = None,
    reporter: Optional[Reporter] = None,
) -> BuildPlan:
    """
    Compile the build plan of the package rooted at ``cwd``.

    Args:
        cwd: Package root containing package.json
        options: Bundle options (defaults to BundleOptions())
        entry: Explicit single-entry source
        reporter: Receives non-fatal warnings (defaults to the logger)

    Returns:
        BuildPlan; an empty job list means there is nothing to build
    """
    options = options or BundleOptions()
    context = BuildContext.create(cwd, reporter=reporter)
    manifest = load_manifest(context.cwd)

    export_paths = build_export_paths(manifest)
    configs = build_entry_configs(
        manifest, options, context, entry=entry, export_paths=export_paths
    )
    jobs = [config.export_condition for config in configs]

    declarations = {
        index: resolve_declaration_path(
            job,
            context.cwd,
            entry_file=options.file or entry,
            typings=manifest.typings_path,
        )
        for index, job in enumerate(jobs)
        if not job.export_type and TYPES_CONDITION in export_paths.get(job.name, {})
    }

    return BuildPlan(
        manifest=manifest,
        export_paths=export_paths,
        jobs=jobs,
        configs=configs,
        context=context,
        declarations=declarations,
    )
