"""
bundlekit Constants

Shared conventions used by the export resolver and build plan compiler.
"""

from typing import Tuple

MANIFEST_FILENAME = "package.json"

# Source and output directory conventions
SRC_DIR = "src"
DIST_DIR = "dist"
DEFAULT_DIST_FILE = "dist/index.js"
DECLARATION_SUFFIX = ".d.ts"

# Source file extensions probed in order when locating an entry
AVAILABLE_EXTENSIONS: Tuple[str, ...] = ("js", "cjs", "mjs", "jsx", "ts", "tsx", "cts", "mts")

# Runtime-specific export conditions that get their own build job, in emission order
RUNTIME_VARIANTS: Tuple[str, ...] = ("edge-light", "react-server", "react-native")

ESM_CONDITION_KEYS: Tuple[str, ...] = ("import", "module")
CJS_CONDITION_KEYS: Tuple[str, ...] = ("require", "main", "node", "default")

# Extensions are compared without the leading dot
ESM_EXTENSIONS: Tuple[str, ...] = ("mjs", "esm.js")
CJS_EXTENSIONS: Tuple[str, ...] = ("cjs",)

TYPES_CONDITION = "types"

PACKAGE_TYPES: Tuple[str, ...] = ("commonjs", "module")
MODULE_FORMATS: Tuple[str, ...] = ("esm", "cjs")
RUNTIMES: Tuple[str, ...] = ("browser", "node")

LOG_LEVELS: Tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_LEVEL_ENV_VAR = "BUNDLEKIT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

# Always inlined into builds, even when not requested explicitly
DEFAULT_BUILD_ENV = "NODE_ENV"
