"""
bundlekit Build Planning
========================

Compiles a package manifest into a build plan:

- Condition classification (ESM vs CJS)
- Export tree normalization
- Export map building (exports + legacy main/module/types)
- Build job expansion (default + runtime variants)
- Output target and declaration path resolution
- Per-job engine configuration

Usage:
    from bundlekit_sdk.build import build_export_paths, expand_export_paths, resolve_targets

    paths = build_export_paths(manifest)
    jobs = expand_export_paths(paths, cwd)
    for job in jobs:
        print(job.name, resolve_targets(job.export, cwd))
"""

from .conditions import (
    classify_format,
    file_extension,
    has_esm_export,
    is_cjs_condition_key,
    is_esm_condition_key,
)
from .config_builder import (
    build_entry_configs,
    build_env_replacements,
    build_job_config,
    build_output_descriptor,
    collect_externals,
    is_external,
)
from .context import BuildContext, CollectingReporter, LoggingReporter, Reporter, SizeCollector
from .entries import filename_without_extension, locate_source_file, resolve_source_file
from .expander import condition_for_job, expand_export_paths
from .export_paths import build_export_paths, legacy_default_condition
from .models import (
    BundleJobConfig,
    ExportPaths,
    FullExportCondition,
    InputDescriptor,
    ModuleFormat,
    OutputDescriptor,
    OutputTarget,
    ParsedExportCondition,
)
from .normalizer import is_export_leaf, join_subpath, normalize_exports, to_full_export_condition
from .targets import dist_path, resolve_declaration_path, resolve_targets

__all__ = [
    # Models
    "ModuleFormat",
    "ExportPaths",
    "FullExportCondition",
    "ParsedExportCondition",
    "OutputTarget",
    "OutputDescriptor",
    "InputDescriptor",
    "BundleJobConfig",
    # Classification
    "is_esm_condition_key",
    "is_cjs_condition_key",
    "classify_format",
    "file_extension",
    "has_esm_export",
    # Normalization
    "is_export_leaf",
    "to_full_export_condition",
    "join_subpath",
    "normalize_exports",
    # Export map
    "build_export_paths",
    "legacy_default_condition",
    # Expansion
    "expand_export_paths",
    "condition_for_job",
    # Entries
    "locate_source_file",
    "resolve_source_file",
    "filename_without_extension",
    # Targets
    "resolve_targets",
    "resolve_declaration_path",
    "dist_path",
    # Context
    "BuildContext",
    "Reporter",
    "LoggingReporter",
    "CollectingReporter",
    "SizeCollector",
    # Engine configs
    "collect_externals",
    "is_external",
    "build_env_replacements",
    "build_output_descriptor",
    "build_job_config",
    "build_entry_configs",
]
