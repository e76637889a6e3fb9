"""
Source Entry Location
=====================

Maps an export subpath to the source file that builds it, following the
``src/`` directory convention:

- "."          -> src/index.<ext>
- "./foo"      -> src/foo.<ext> or src/foo/index.<ext>
- variant tags -> src/foo.<variant>.<ext> or src/foo/index.<variant>.<ext>

Extensions are probed in AVAILABLE_EXTENSIONS order; the first existing
file wins.
"""

import os
import posixpath
from pathlib import Path
from typing import Callable, Optional, Union

from bundlekit_common import AVAILABLE_EXTENSIONS, RUNTIME_VARIANTS, SRC_DIR
from bundlekit_common.logger import get_logger

logger = get_logger(__name__)

SourceLocator = Callable[[str, str, str], Optional[str]]
"""(cwd, subpath, variant) -> absolute source path or None"""


def resolve_source_file(cwd: Union[str, Path], filename: str) -> str:
    """Absolute path of ``filename`` inside the source directory."""
    return os.path.abspath(os.path.join(cwd, SRC_DIR, filename))


def filename_without_extension(path: Optional[str]) -> Optional[str]:
    """
    Strip the last extension of ``path``.

    Examples:
        >>> filename_without_extension("./dist/index.cjs")
        './dist/index'
        >>> filename_without_extension(None) is None
        True
    """
    if not path:
        return None
    return os.path.splitext(path)[0]


def _find_entry_file(cwd: Union[str, Path], name: str, suffix: str, ext: str) -> Optional[str]:
    suffix_part = f".{suffix}" if suffix else ""
    candidates = (
        f"{name}{suffix_part}.{ext}",
        posixpath.join(name, f"index{suffix_part}.{ext}"),
    )
    for candidate in candidates:
        filename = resolve_source_file(cwd, candidate)
        if os.path.isfile(filename):
            return filename
    return None


def locate_source_file(cwd: Union[str, Path], subpath: str, variant: str = "") -> Optional[str]:
    """
    Locate the source file for an export subpath.

    Args:
        cwd: Package root directory
        subpath: Export subpath ("." or "./name")
        variant: Optional runtime variant tag (e.g. "react-server")

    Returns:
        Absolute source path, or None when no convention matches

    Examples:
        >>> locate_source_file("/pkg", ".")               # src/index.ts exists
        '/pkg/src/index.ts'
        >>> locate_source_file("/pkg", "./server", "react-server")
        '/pkg/src/server/index.react-server.ts'
    """
    # Exporting the manifest itself has no source
    if subpath.endswith("package.json"):
        return None

    name = "./index" if subpath == "." else subpath

    # Variant-specific sources first, then the plain subpath source
    suffixes = (variant, "") if variant in RUNTIME_VARIANTS else ("",)
    for suffix in suffixes:
        for ext in AVAILABLE_EXTENSIONS:
            found = _find_entry_file(cwd, name, suffix, ext)
            if found:
                return found

    logger.debug("No source file found", subpath=subpath, variant=variant or None)
    return None
