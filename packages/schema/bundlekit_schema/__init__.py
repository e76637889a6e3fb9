"""
bundlekit Schema

Pydantic models for package manifests and bundle options.

Usage:
    from bundlekit_schema import PackageManifest, BundleOptions

    manifest = PackageManifest.model_validate({"name": "pkg", "main": "./index.js"})
"""

from .manifest import BundleOptions, ExportTree, PackageManifest, PackageType

__all__ = [
    "PackageManifest",
    "BundleOptions",
    "ExportTree",
    "PackageType",
]
