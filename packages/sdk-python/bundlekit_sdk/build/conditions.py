"""
Condition Classification
========================

Decides whether an export condition produces an ESM or a CommonJS artifact.
A key/extension pair is checked for ESM first; anything unclassified falls
back to ESM.
"""

import posixpath

from bundlekit_common import (
    CJS_CONDITION_KEYS,
    CJS_EXTENSIONS,
    ESM_CONDITION_KEYS,
    ESM_EXTENSIONS,
)

from .models import ExportPaths, ModuleFormat


def file_extension(path: str) -> str:
    """
    Extension of ``path`` without the leading dot.

    The ``.esm.js`` double extension is reported as ``esm.js``.

    Examples:
        >>> file_extension("./dist/index.mjs")
        'mjs'
        >>> file_extension("./dist/index.esm.js")
        'esm.js'
    """
    if path.endswith(".esm.js"):
        return "esm.js"
    return posixpath.splitext(path)[1][1:]


def is_esm_condition_key(key: str, ext: str) -> bool:
    return key in ESM_CONDITION_KEYS or ext in ESM_EXTENSIONS


def is_cjs_condition_key(key: str, ext: str) -> bool:
    return key in CJS_CONDITION_KEYS or ext in CJS_EXTENSIONS


def classify_format(key: str, ext: str) -> ModuleFormat:
    """Module format for a condition key and its file extension."""
    if is_esm_condition_key(key, ext):
        return ModuleFormat.ESM
    if is_cjs_condition_key(key, ext):
        return ModuleFormat.CJS
    return ModuleFormat.ESM


def has_esm_export(export_paths: ExportPaths, es_module_interop: bool = False) -> bool:
    """
    Check whether any export of the package is an ES module.

    Args:
        export_paths: Canonical export-paths map
        es_module_interop: Compiler ``esModuleInterop`` flag, forces True

    Returns:
        True if an ESM condition exists or interop is requested
    """
    for condition in export_paths.values():
        for key, file in condition.items():
            if is_esm_condition_key(key, file_extension(file)):
                return True
    return es_module_interop
