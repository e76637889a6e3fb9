"""
Export Map Builder
==================

Merges the normalized ``exports`` tree with the legacy single-entry fields
(``main``, ``module``, ``types``/``typings``) into one canonical export map.

Example:
    ```json
    {
      "main": "./dist/index.cjs",
      "exports": {
        ".": {"import": "./dist/index.mjs"},
        "./foo": {"require": "./dist/foo.cjs", "import": "./dist/foo.mjs"}
      }
    }
    ```

    becomes:

    ```python
    {
        ".": {"require": "./dist/index.cjs", "import": "./dist/index.mjs"},
        "./foo": {"require": "./dist/foo.cjs", "import": "./dist/foo.mjs"},
    }
    ```
"""

from typing import Any, Mapping, Union

from bundlekit_common.logger import get_logger
from bundlekit_schema import PackageManifest

from .models import ExportPaths, FullExportCondition
from .normalizer import ROOT_SUBPATH, normalize_exports, to_full_export_condition

logger = get_logger(__name__)


def as_manifest(manifest: Union[PackageManifest, Mapping[str, Any]]) -> PackageManifest:
    """Accept either a validated manifest or a raw package.json dict."""
    if isinstance(manifest, PackageManifest):
        return manifest
    return PackageManifest.model_validate(dict(manifest))


def legacy_default_condition(manifest: PackageManifest) -> FullExportCondition:
    """
    Build the "." condition implied by ``main``, ``module`` and ``types``.

    ``main`` is keyed by the module-type appropriate primary condition
    (``require`` for commonjs, ``import`` for module packages).
    """
    primary = "require" if manifest.package_type == "commonjs" else "import"
    return to_full_export_condition(
        {
            primary: manifest.main,
            "module": manifest.module,
            "types": manifest.typings_path,
        },
        manifest.package_type,
    )


def build_export_paths(manifest: Union[PackageManifest, Mapping[str, Any]]) -> ExportPaths:
    """
    Compute the canonical export-paths map of a package.

    Explicit ``exports["."]`` conditions win over legacy fields on conflict;
    legacy fields only fill in keys the explicit export left out. The "."
    entry is dropped when neither source declares anything.

    Args:
        manifest: PackageManifest or raw package.json dict

    Returns:
        Insertion-ordered mapping of subpath -> condition, possibly empty
    """
    manifest = as_manifest(manifest)
    package_type = manifest.package_type

    paths: ExportPaths = {}
    if manifest.exports:
        paths.update(normalize_exports(manifest.exports, package_type))

    legacy = legacy_default_condition(manifest)
    main_export = {**legacy, **paths.get(ROOT_SUBPATH, {})}

    if main_export:
        paths[ROOT_SUBPATH] = main_export
    else:
        paths.pop(ROOT_SUBPATH, None)

    logger.debug(
        "Built export paths",
        package=manifest.name,
        package_type=package_type,
        subpaths=list(paths),
    )
    return paths
