"""Tests for export_paths.py - canonical export map building."""

import pytest

from bundlekit_schema import PackageManifest
from bundlekit_sdk.build.export_paths import build_export_paths, legacy_default_condition


class TestLegacyDefaultCondition:
    """Tests for legacy_default_condition."""

    def test_commonjs_main(self):
        manifest = PackageManifest(main="./index.js")
        assert legacy_default_condition(manifest) == {"require": "./index.js"}

    def test_module_main(self):
        manifest = PackageManifest(type="module", main="./index.js")
        assert legacy_default_condition(manifest) == {"import": "./index.js"}

    def test_all_legacy_fields(self):
        manifest = PackageManifest(main="./a.js", module="./a.esm.js", typings="./a.d.ts")
        assert legacy_default_condition(manifest) == {
            "require": "./a.js",
            "module": "./a.esm.js",
            "types": "./a.d.ts",
        }

    def test_no_legacy_fields(self):
        assert legacy_default_condition(PackageManifest()) == {}


class TestBuildExportPaths:
    """Tests for build_export_paths."""

    @pytest.mark.parametrize(
        "package_type, key",
        [(None, "require"), ("commonjs", "require"), ("module", "import")],
    )
    def test_string_exports(self, package_type, key):
        """A string exports field yields one "." entry with one key."""
        data = {"exports": "./dist/index.js"}
        if package_type:
            data["type"] = package_type

        assert build_export_paths(data) == {".": {key: "./dist/index.js"}}

    def test_module_package_with_subpaths(self):
        manifest = {
            "type": "module",
            "exports": {
                ".": {"import": "./a.js", "require": "./a.cjs"},
                "./sub": "./sub.js",
            },
        }
        assert build_export_paths(manifest) == {
            ".": {"import": "./a.js", "require": "./a.cjs"},
            "./sub": {"import": "./sub.js"},
        }

    def test_legacy_fields_only(self):
        manifest = {"main": "./index.js", "module": "./index.esm.js", "types": "./index.d.ts"}
        assert build_export_paths(manifest) == {
            ".": {
                "require": "./index.js",
                "module": "./index.esm.js",
                "types": "./index.d.ts",
            }
        }

    def test_explicit_exports_win_over_legacy(self):
        manifest = {
            "main": "./legacy.js",
            "types": "./index.d.ts",
            "exports": {".": {"require": "./dist/index.cjs"}},
        }
        assert build_export_paths(manifest) == {
            ".": {"require": "./dist/index.cjs", "types": "./index.d.ts"}
        }

    def test_legacy_fills_missing_root(self):
        """Legacy fields add "." when exports only declares subpaths."""
        manifest = {"main": "./index.js", "exports": {"./sub": "./sub.js"}}
        paths = build_export_paths(manifest)

        assert paths == {
            "./sub": {"require": "./sub.js"},
            ".": {"require": "./index.js"},
        }
        assert list(paths) == ["./sub", "."]

    def test_root_position_preserved(self):
        manifest = {
            "module": "./index.mjs",
            "exports": {"./a": "./a.js", ".": {"require": "./index.cjs"}},
        }
        assert list(build_export_paths(manifest)) == ["./a", "."]

    def test_empty_manifest(self):
        assert build_export_paths({}) == {}
        assert build_export_paths(PackageManifest(name="empty")) == {}

    def test_empty_exports_object(self):
        """An empty condition object does not create a "." entry."""
        assert build_export_paths({"exports": {}}) == {}

    def test_accepts_manifest_instance(self):
        manifest = PackageManifest(name="pkg", exports={"./x": "./x.js"})
        assert build_export_paths(manifest) == {"./x": {"require": "./x.js"}}

    def test_empty_package_type_is_commonjs(self):
        """An empty "type" field falls back to commonjs instead of failing."""
        assert build_export_paths({"type": "", "main": "./a.js"}) == {
            ".": {"require": "./a.js"}
        }
