"""
Bundle Config Builder
=====================

Builds the per-job engine configuration from a compiled plan: which module
ids stay external, which environment variables get inlined, and one output
descriptor per target. The engine itself (plugins, transpilation,
minification) is not configured here.
"""

import json
import os
from typing import Dict, Iterable, List, Mapping, Optional

from bundlekit_common.constants import DEFAULT_BUILD_ENV
from bundlekit_common.logger import get_logger
from bundlekit_schema import BundleOptions, PackageManifest

from .conditions import has_esm_export
from .context import BuildContext
from .entries import SourceLocator, filename_without_extension, locate_source_file
from .expander import expand_export_paths
from .export_paths import build_export_paths
from .models import (
    BundleJobConfig,
    ExportPaths,
    InputDescriptor,
    ModuleFormat,
    OutputDescriptor,
    ParsedExportCondition,
)
from .targets import dist_path, resolve_declaration_path, resolve_targets

logger = get_logger(__name__)


def collect_externals(manifest: PackageManifest, options: BundleOptions) -> List[str]:
    """
    Module ids left out of the bundle.

    Dependencies are external unless ``no_external`` is set: peer
    dependencies, dependencies, peer dependency metadata, then the extra
    ``external`` option and finally the package's own name.
    """
    if options.no_external:
        return []

    externals: List[str] = []
    for group in (
        manifest.peer_dependencies,
        manifest.dependencies,
        manifest.peer_dependencies_meta,
    ):
        externals.extend(group.keys())
    externals.extend(options.external)
    if manifest.name:
        externals.append(manifest.name)
    return externals


def is_external(module_id: str, externals: Iterable[str]) -> bool:
    """True when ``module_id`` is an external or a subpath of one."""
    return any(module_id == name or module_id.startswith(name + "/") for name in externals)


def build_env_replacements(
    env_names: Iterable[str],
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Compile-time replacements for ``process.env`` lookups.

    ``NODE_ENV`` is always requested. Variables missing from the environment
    are left untouched.

    Examples:
        >>> build_env_replacements(["API_URL"], {"API_URL": "https://x", "NODE_ENV": "production"})
        {'process.env.API_URL': '"https://x"', 'process.env.NODE_ENV': '"production"'}
    """
    environ = os.environ if environ is None else environ
    names = list(env_names)
    if DEFAULT_BUILD_ENV not in names:
        names.append(DEFAULT_BUILD_ENV)

    return {f"process.env.{name}": json.dumps(environ[name]) for name in names if name in environ}


def build_output_descriptor(
    manifest: PackageManifest,
    export_paths: ExportPaths,
    options: BundleOptions,
    file: str,
    format: ModuleFormat,
) -> OutputDescriptor:
    """Output options for one target file of a job."""
    es_module = has_esm_export(export_paths, options.es_module_interop)
    return OutputDescriptor(
        name=manifest.name or os.path.basename(filename_without_extension(file) or ""),
        file=file,
        format=format,
        es_module=True if es_module else "if-default-prop",
        sourcemap=options.sourcemap,
    )


def build_job_config(
    manifest: PackageManifest,
    export_paths: ExportPaths,
    options: BundleOptions,
    export_condition: ParsedExportCondition,
    context: BuildContext,
    entry: Optional[str] = None,
) -> BundleJobConfig:
    """
    Engine configuration for one build job.

    Declaration jobs get a single ESM output at the job's declaration path.
    Asset jobs get one output per resolved target, unless a ``file`` option
    is set: the CLI output then replaces them all, using ``format`` or the
    format of the first target.
    """
    cwd = context.cwd
    input_descriptor = InputDescriptor(
        input=export_condition.source,
        externals=collect_externals(manifest, options),
        env={} if options.dts else build_env_replacements(options.env),
        runtime=options.runtime,
        target=options.target,
        minify=options.minify,
        dts=options.dts,
    )

    if options.dts:
        declaration_file = resolve_declaration_path(
            export_condition,
            cwd,
            entry_file=options.file or entry,
            typings=manifest.typings_path,
        )
        outputs = [
            build_output_descriptor(
                manifest, export_paths, options, declaration_file, ModuleFormat.ESM
            )
        ]
    else:
        targets = resolve_targets(
            export_condition.export, cwd, context.reporter, package_name=manifest.name
        )
        if options.file:
            fallback_format = targets[0].format
            format = ModuleFormat(options.format) if options.format else fallback_format
            outputs = [
                build_output_descriptor(
                    manifest, export_paths, options, dist_path(options.file, cwd), format
                )
            ]
        else:
            outputs = [
                build_output_descriptor(manifest, export_paths, options, t.file, t.format)
                for t in targets
            ]

    return BundleJobConfig(
        input=input_descriptor,
        output=outputs,
        export_name=export_condition.name or ".",
        export_condition=export_condition,
    )


def build_entry_configs(
    manifest: PackageManifest,
    options: BundleOptions,
    context: BuildContext,
    entry: Optional[str] = None,
    export_paths: Optional[ExportPaths] = None,
    locate: SourceLocator = locate_source_file,
) -> List[BundleJobConfig]:
    """
    Compile a manifest into engine configs, one per build job.

    Args:
        manifest: Validated package manifest
        options: Bundle options of this invocation
        context: Per-invocation build context
        entry: Explicit single-entry source, if any
        export_paths: Precomputed export map (computed from ``manifest`` if omitted)
        locate: Source locator used by job expansion

    Returns:
        Ordered list of BundleJobConfig; empty when there is nothing to build
    """
    if export_paths is None:
        export_paths = build_export_paths(manifest)

    jobs = expand_export_paths(
        export_paths, context.cwd, entry=entry, dts=options.dts, locate=locate
    )
    configs = [
        build_job_config(manifest, export_paths, options, job, context, entry=entry)
        for job in jobs
    ]
    logger.info(
        "Compiled build plan",
        package=manifest.name,
        subpaths=len(export_paths),
        jobs=len(configs),
        dts=options.dts,
    )
    return configs
