"""
Build Plan Models
=================

Value objects produced while compiling a package manifest into a build plan.
None of them hold references back to the manifest; they live only as long
as the compile invocation that created them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

FullExportCondition = Dict[str, str]
"""Condition name (import, require, types, edge-light, ...) -> output file"""

ExportPaths = Dict[str, FullExportCondition]
"""Canonical subpath ("." or "./name") -> resolved leaf condition"""


class ModuleFormat(str, Enum):
    """Output module format of a build target."""

    ESM = "esm"
    """ECMAScript module"""

    CJS = "cjs"
    """CommonJS module"""


@dataclass(frozen=True)
class ParsedExportCondition:
    """One resolved build job: which source builds which export outputs."""

    source: str
    """Absolute path of the source entry file"""

    name: str
    """Export subpath ("." or "./name")"""

    export: FullExportCondition
    """Conditions this job writes"""

    export_type: str = ""
    """Runtime variant tag that produced the job, empty for the default job"""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "name": self.name,
            "export": dict(self.export),
            "exportType": self.export_type,
        }


@dataclass(frozen=True)
class OutputTarget:
    """A single (format, file) pair emitted by a build job."""

    format: ModuleFormat
    file: str

    def to_dict(self) -> Dict[str, str]:
        return {"format": self.format.value, "file": self.file}


@dataclass
class OutputDescriptor:
    """Output options handed to the bundling engine for one target."""

    name: str
    file: str
    format: ModuleFormat
    exports: str = "named"
    es_module: Any = "if-default-prop"
    """True when the plan has ESM exports, else the engine's lazy mode"""
    interop: str = "auto"
    freeze: bool = False
    strict: bool = False
    sourcemap: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "file": self.file,
            "format": self.format.value,
            "exports": self.exports,
            "esModule": self.es_module,
            "interop": self.interop,
            "freeze": self.freeze,
            "strict": self.strict,
            "sourcemap": self.sourcemap,
        }


@dataclass
class InputDescriptor:
    """Input options handed to the bundling engine for one job."""

    input: str
    externals: List[str] = field(default_factory=list)
    env: Dict[str, str] = field(default_factory=dict)
    runtime: str = "browser"
    target: Any = None
    minify: bool = False
    dts: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input": self.input,
            "externals": list(self.externals),
            "env": dict(self.env),
            "runtime": self.runtime,
            "target": self.target,
            "minify": self.minify,
            "dts": self.dts,
        }


@dataclass
class BundleJobConfig:
    """Complete engine configuration for one ParsedExportCondition."""

    input: InputDescriptor
    output: List[OutputDescriptor]
    export_name: str
    export_condition: ParsedExportCondition

    def to_dict(self) -> Dict[str, Any]:
        return {
            "exportName": self.export_name,
            "exportType": self.export_condition.export_type,
            "input": self.input.to_dict(),
            "output": [o.to_dict() for o in self.output],
        }
