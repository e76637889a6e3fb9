"""Tests for normalizer.py - export tree flattening."""

import copy

import pytest

from bundlekit_sdk.build.normalizer import (
    is_export_leaf,
    join_subpath,
    normalize_exports,
    to_full_export_condition,
)


class TestIsExportLeaf:
    """Tests for the leaf predicate."""

    def test_string_is_leaf(self):
        assert is_export_leaf("./index.js")

    def test_condition_object_is_leaf(self):
        assert is_export_leaf({"import": "./a.mjs", "require": "./a.cjs"})

    def test_empty_object_is_leaf(self):
        assert is_export_leaf({})

    def test_subpath_key_is_not_leaf(self):
        """A string value under a "." key still makes a subpath node."""
        assert not is_export_leaf({"./sub": "./sub.js"})
        assert not is_export_leaf({".": "./index.js"})

    def test_nested_value_is_not_leaf(self):
        assert not is_export_leaf({"sub": {"import": "./sub.js"}})


class TestToFullExportCondition:
    """Tests for to_full_export_condition."""

    def test_string_commonjs(self):
        assert to_full_export_condition("./a.js", "commonjs") == {"require": "./a.js"}

    def test_string_module(self):
        assert to_full_export_condition("./a.js", "module") == {"import": "./a.js"}

    def test_object_drops_falsy_values(self):
        value = {"import": "./a.mjs", "require": "", "types": None}
        assert to_full_export_condition(value, "commonjs") == {"import": "./a.mjs"}

    def test_object_keeps_key_order(self):
        value = {"types": "./a.d.ts", "require": "./a.cjs", "import": "./a.mjs"}
        result = to_full_export_condition(value, "module")
        assert list(result) == ["types", "require", "import"]


class TestJoinSubpath:
    """Tests for join_subpath."""

    @pytest.mark.parametrize(
        "base, key, expected",
        [
            (".", "foo", "./foo"),
            (".", "./foo", "./foo"),
            (".", ".", "."),
            ("./foo", "bar", "./foo/bar"),
            ("./foo", "./bar", "./foo/bar"),
            ("./foo", ".", "./foo"),
            (".", "./utils/", "./utils/"),
            ("./lib", "utils/", "./lib/utils/"),
            (".", "./", "."),
        ],
    )
    def test_join(self, base, key, expected):
        assert join_subpath(base, key) == expected


class TestNormalizeExports:
    """Tests for normalize_exports."""

    def test_string_root(self):
        assert normalize_exports("./index.js", "commonjs") == {".": {"require": "./index.js"}}
        assert normalize_exports("./index.js", "module") == {".": {"import": "./index.js"}}

    def test_condition_root(self):
        """A flat condition object is the "." entry."""
        tree = {"import": "./index.mjs", "require": "./index.cjs"}
        assert normalize_exports(tree, "commonjs") == {".": tree}

    def test_subpath_map(self):
        tree = {
            ".": {"import": "./a.js", "require": "./a.cjs"},
            "./sub": "./sub.js",
        }
        assert normalize_exports(tree, "module") == {
            ".": {"import": "./a.js", "require": "./a.cjs"},
            "./sub": {"import": "./sub.js"},
        }

    def test_nested_bare_name_under_root(self):
        tree = {
            ".": {
                "sub": {
                    "import": "./sub.js",
                    "require": "./sub.cjs",
                    "types": "./sub.d.ts",
                }
            }
        }
        assert normalize_exports(tree, "commonjs") == {
            "./sub": {"import": "./sub.js", "require": "./sub.cjs", "types": "./sub.d.ts"}
        }

    def test_deeply_nested_subpaths(self):
        tree = {"./a": {"./b": {"import": "./ab.mjs"}, "./c": "./ac.cjs"}}
        assert normalize_exports(tree, "commonjs") == {
            "./a/b": {"import": "./ab.mjs"},
            "./a/c": {"require": "./ac.cjs"},
        }

    def test_insertion_order(self):
        tree = {"./z": "./z.js", ".": "./index.js", "./a": "./a.js"}
        assert list(normalize_exports(tree, "module")) == ["./z", ".", "./a"]

    def test_every_leaf_reachable(self):
        """Every leaf appears under its path, no subpath twice."""
        tree = {
            ".": {"import": "./index.mjs"},
            "./client": {"import": "./client.mjs", "require": "./client.cjs"},
            "./server": {"./edge": {"edge-light": "./edge.mjs"}},
            "./package.json": "./package.json",
        }
        paths = normalize_exports(tree, "module")

        assert set(paths) == {".", "./client", "./server/edge", "./package.json"}
        assert paths["./server/edge"] == {"edge-light": "./edge.mjs"}
        assert paths["./package.json"] == {"import": "./package.json"}

    def test_folder_export_kept_apart_from_file_export(self):
        tree = {
            ".": "./index.js",
            "./utils": "./dist/utils.js",
            "./utils/": "./dist/utils/",
        }
        assert normalize_exports(tree, "commonjs") == {
            ".": {"require": "./index.js"},
            "./utils": {"require": "./dist/utils.js"},
            "./utils/": {"require": "./dist/utils/"},
        }

    def test_idempotent(self):
        tree = {".": {"import": "./a.mjs"}, "./sub": {"./x": "./x.js"}}
        snapshot = copy.deepcopy(tree)

        first = normalize_exports(tree, "commonjs")
        second = normalize_exports(tree, "commonjs")

        assert first == second
        assert tree == snapshot

    def test_none_tree(self):
        assert normalize_exports(None, "commonjs") == {}
