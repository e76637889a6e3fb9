"""Tests for expander.py - build job expansion."""

import os

from bundlekit_sdk.build.expander import condition_for_job, expand_export_paths
from bundlekit_sdk.build.models import ParsedExportCondition


def fake_locator(cwd, subpath, variant=""):
    """Every subpath has a source; variants are tagged in the file name."""
    name = "index" if subpath == "." else subpath[2:]
    suffix = f".{variant}" if variant else ""
    return f"{cwd}/src/{name}{suffix}.ts"


def locator_without(*missing):
    """Locator that misses the given (subpath, variant) pairs."""

    def locate(cwd, subpath, variant=""):
        if (subpath, variant) in missing:
            return None
        return fake_locator(cwd, subpath, variant)

    return locate


class TestConditionForJob:
    """Tests for condition_for_job."""

    def test_default_job_strips_variants(self):
        condition = {
            "edge-light": "./edge.js",
            "react-server": "./rsc.js",
            "react-native": "./native.js",
            "import": "./index.mjs",
            "types": "./index.d.ts",
        }
        assert condition_for_job(".", condition) == {
            "import": "./index.mjs",
            "types": "./index.d.ts",
        }

    def test_variant_job_keyed_by_subpath(self):
        condition = {"react-server": "./rsc.js", "import": "./index.mjs"}
        assert condition_for_job("./server", condition, "react-server") == {
            "./server": "./rsc.js"
        }


class TestExpandExportPaths:
    """Tests for expand_export_paths."""

    def test_default_and_variant_job(self):
        paths = {".": {"edge-light": "./edge.js", "default": "./index.js"}}

        jobs = expand_export_paths(paths, "/pkg", locate=fake_locator)

        assert jobs == [
            ParsedExportCondition(
                source="/pkg/src/index.ts",
                name=".",
                export={"default": "./index.js"},
            ),
            ParsedExportCondition(
                source="/pkg/src/index.edge-light.ts",
                name=".",
                export={".": "./edge.js"},
                export_type="edge-light",
            ),
        ]

    def test_ordering(self):
        """Subpaths keep map order; variants follow their default job in fixed order."""
        paths = {
            "./b": {"react-native": "./b.native.js", "edge-light": "./b.edge.js", "import": "./b.js"},
            "./a": {"react-server": "./a.rsc.js", "import": "./a.js"},
        }

        jobs = expand_export_paths(paths, "/pkg", locate=fake_locator)

        assert [(j.name, j.export_type) for j in jobs] == [
            ("./b", ""),
            ("./b", "edge-light"),
            ("./b", "react-native"),
            ("./a", ""),
            ("./a", "react-server"),
        ]

    def test_default_job_keeps_full_condition(self):
        paths = {"./sub": {"import": "./sub.mjs", "require": "./sub.cjs", "types": "./sub.d.ts"}}

        [job] = expand_export_paths(paths, "/pkg", locate=fake_locator)

        assert job.export == paths["./sub"]
        assert job.export_type == ""

    def test_dts_mode_only_typed_default_jobs(self):
        paths = {
            ".": {"import": "./index.mjs", "types": "./index.d.ts", "react-server": "./rsc.mjs"},
            "./untyped": {"import": "./untyped.mjs"},
        }

        jobs = expand_export_paths(paths, "/pkg", dts=True, locate=fake_locator)

        assert len(jobs) == 1
        assert jobs[0].name == "."
        assert jobs[0].export_type == ""
        assert jobs[0].export == {"import": "./index.mjs", "types": "./index.d.ts"}

    def test_missing_source_dropped(self):
        paths = {
            ".": {"import": "./index.mjs"},
            "./gone": {"import": "./gone.mjs", "edge-light": "./gone.edge.mjs"},
        }

        jobs = expand_export_paths(
            paths, "/pkg", locate=locator_without(("./gone", ""))
        )

        assert [(j.name, j.export_type) for j in jobs] == [
            (".", ""),
            ("./gone", "edge-light"),
        ]

    def test_missing_variant_source_dropped(self):
        paths = {".": {"import": "./index.mjs", "react-native": "./native.js"}}

        jobs = expand_export_paths(
            paths, "/pkg", locate=locator_without((".", "react-native"))
        )

        assert [j.export_type for j in jobs] == [""]

    def test_entry_override_used_for_every_job(self, tmp_path):
        paths = {
            ".": {"import": "./index.mjs", "edge-light": "./edge.mjs"},
            "./sub": {"require": "./sub.cjs"},
        }

        jobs = expand_export_paths(
            paths, tmp_path, entry="index.js", locate=locator_without()
        )

        expected = os.path.abspath(os.path.join(str(tmp_path), "index.js"))
        assert [j.source for j in jobs] == [expected, expected, expected]

    def test_empty_map(self):
        assert expand_export_paths({}, "/pkg", locate=fake_locator) == []

    def test_real_filesystem_layout(self, tmp_path):
        """Default locator picks up src/ conventions."""
        (tmp_path / "src" / "server").mkdir(parents=True)
        (tmp_path / "src" / "index.ts").write_text("")
        (tmp_path / "src" / "server" / "index.ts").write_text("")
        (tmp_path / "src" / "server" / "index.react-server.ts").write_text("")
        paths = {
            ".": {"import": "./dist/index.mjs"},
            "./server": {"import": "./dist/server.mjs", "react-server": "./dist/rsc.mjs"},
            "./missing": {"import": "./dist/missing.mjs"},
        }

        jobs = expand_export_paths(paths, tmp_path)

        assert [(j.name, j.export_type, j.source) for j in jobs] == [
            (".", "", str(tmp_path / "src" / "index.ts")),
            ("./server", "", str(tmp_path / "src" / "server" / "index.ts")),
            (
                "./server",
                "react-server",
                str(tmp_path / "src" / "server" / "index.react-server.ts"),
            ),
        ]
