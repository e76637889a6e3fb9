"""
bundlekit Manifest Schema

Pydantic models for the inputs of one build-plan compile:

- PackageManifest: the subset of ``package.json`` the resolver reads
- BundleOptions: per-invocation options normally supplied by the CLI

Design Principles:
- Pure validation: receives dicts, validates structure, returns typed objects
- No file I/O: reading package.json is the SDK's responsibility
- Extensible: unknown manifest fields are kept (extra="allow")
- Export trees are NOT validated beyond their JSON shape; the normalizer
  assumes well-formed input

Usage:
    from bundlekit_schema import PackageManifest

    data = json.loads(Path("package.json").read_text())
    manifest = PackageManifest.model_validate(data)
"""

from typing import Any, Dict, List, Literal, Optional, Union

from bundlekit_common import (
    MODULE_FORMATS,
    PACKAGE_TYPES,
    RUNTIMES,
    ValidationError,
)
from pydantic import BaseModel, ConfigDict, Field, field_validator

ExportTree = Union[str, Dict[str, Any]]
PackageType = Literal["commonjs", "module"]


# =============================================================================
# PACKAGE MANIFEST
# =============================================================================


class PackageManifest(BaseModel):
    """
    Package metadata declared in ``package.json``.

    Field names are snake_case in Python; the camelCase JSON names are
    accepted as aliases so raw ``package.json`` dicts validate directly.

    Example:
        ```json
        {
          "name": "my-lib",
          "type": "module",
          "exports": {
            ".": {"import": "./dist/index.mjs", "require": "./dist/index.cjs"},
            "./sub": "./dist/sub.mjs"
          }
        }
        ```
    """

    name: Optional[str] = None
    version: Optional[str] = None
    main: Optional[str] = None
    module: Optional[str] = None
    types: Optional[str] = None
    typings: Optional[str] = None
    type: Optional[str] = None
    """Package module type: "module" or "commonjs" (default when absent)"""

    exports: Optional[ExportTree] = None
    """Raw export-condition tree, normalized by bundlekit_sdk.build"""

    dependencies: Dict[str, str] = {}
    peer_dependencies: Dict[str, str] = Field(default_factory=dict, alias="peerDependencies")
    peer_dependencies_meta: Dict[str, Any] = Field(
        default_factory=dict, alias="peerDependenciesMeta"
    )

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: Optional[str]) -> Optional[str]:
        """Validate the package module type."""
        # An empty type means the default, as when the field is absent
        if not v:
            return None
        if v not in PACKAGE_TYPES:
            raise ValidationError(
                f"Unsupported package type: '{v}'. "
                f"Supported types: {', '.join(PACKAGE_TYPES)}"
            )
        return v

    @property
    def package_type(self) -> PackageType:
        """Resolved module type, defaulting to commonjs."""
        return self.type or "commonjs"  # type: ignore[return-value]

    @property
    def typings_path(self) -> Optional[str]:
        """Legacy declaration entry: ``types`` falling back to ``typings``."""
        return self.types or self.typings


# =============================================================================
# BUNDLE OPTIONS
# =============================================================================


class BundleOptions(BaseModel):
    """
    Options for one build-plan compile.

    Mirrors the CLI flags of the bundler front end. None of these change how
    the export map is parsed; they shape the generated job configs.
    """

    file: Optional[str] = None
    """Single output file override; replaces every output of a job"""

    format: Optional[str] = None
    """Output format used with ``file`` ("esm" or "cjs")"""

    external: List[str] = []
    """Extra module ids to keep external"""

    no_external: bool = False
    """Bundle every dependency, ignoring package dependencies"""

    env: List[str] = []
    """Environment variable names inlined as ``process.env.NAME``"""

    sourcemap: bool = False
    minify: bool = False
    target: Optional[str] = None
    runtime: str = "browser"

    dts: bool = False
    """Compile declaration jobs instead of asset jobs"""

    es_module_interop: bool = False
    """Mirrors the compiler option of the same name"""

    model_config = ConfigDict(extra="allow")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: Optional[str]) -> Optional[str]:
        """Validate the output format."""
        if v is not None and v not in MODULE_FORMATS:
            raise ValidationError(
                f"Unsupported output format: '{v}'. "
                f"Supported formats: {', '.join(MODULE_FORMATS)}"
            )
        return v

    @field_validator("runtime")
    @classmethod
    def validate_runtime(cls, v: str) -> str:
        """Validate the target runtime."""
        if v not in RUNTIMES:
            raise ValidationError(
                f"Unsupported runtime: '{v}'. Supported runtimes: {', '.join(RUNTIMES)}"
            )
        return v

    @field_validator("external", "env")
    @classmethod
    def validate_non_empty_strings(cls, v: List[str]) -> List[str]:
        """Validate that list items are non-empty strings."""
        for item in v:
            if not item or not item.strip():
                raise ValidationError("External ids and env names cannot be empty strings")
        return v
