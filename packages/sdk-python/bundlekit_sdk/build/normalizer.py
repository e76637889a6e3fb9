"""
Export Tree Normalization
=========================

Flattens the nested ``exports`` field of a package manifest into a map of
canonical subpath -> leaf condition.

The same object shape is used both for condition sets and for subpath
groups, so every node is classified by a single structural test
(``is_export_leaf``) before it is either recorded or descended into.

Example:
    Input:
        {
            ".": {
                "sub": {
                    "import": "./sub.js",
                    "require": "./sub.cjs",
                    "types": "./sub.d.ts"
                }
            }
        }

    Output:
        {
            "./sub": {
                "import": "./sub.js",
                "require": "./sub.cjs",
                "types": "./sub.d.ts"
            }
        }
"""

import posixpath
from typing import Any, Mapping, Optional, Union

from .models import ExportPaths, FullExportCondition

ROOT_SUBPATH = "."


def is_export_leaf(node: Any) -> bool:
    """
    Check whether an export-tree node is a resolved condition set.

    A node is a leaf if it is a string, or a mapping whose values are all
    strings and whose keys never start with ".".
    """
    if isinstance(node, str):
        return True
    return all(isinstance(value, str) and not key.startswith(".") for key, value in node.items())


def to_full_export_condition(
    value: Union[str, Mapping[str, Optional[str]]],
    package_type: str,
) -> FullExportCondition:
    """
    Convert a leaf node into a condition mapping.

    A bare string becomes ``{"require": value}`` for commonjs packages and
    ``{"import": value}`` otherwise. Mapping entries with falsy values are
    dropped; the others are kept verbatim in their original order.
    """
    if isinstance(value, str):
        key = "require" if package_type == "commonjs" else "import"
        return {key: value}
    return {key: file for key, file in value.items() if file}


def join_subpath(base: str, key: str) -> str:
    """
    Join an accumulated subpath with a child key, POSIX style.

    The result is always "." or starts with "./". A trailing "/" on the key
    is kept, so folder exports stay distinct from file exports.

    Examples:
        >>> join_subpath(".", "foo")
        './foo'
        >>> join_subpath(".", "./foo")
        './foo'
        >>> join_subpath("./foo", "bar")
        './foo/bar'
        >>> join_subpath(".", "./utils/")
        './utils/'
    """
    joined = posixpath.normpath(posixpath.join(base, key))
    if joined == ROOT_SUBPATH:
        return joined
    if not joined.startswith("./"):
        joined = "./" + joined
    if key.endswith("/"):
        joined += "/"
    return joined


def _walk(subpath: str, node: Any, paths: ExportPaths, package_type: str) -> None:
    if is_export_leaf(node):
        paths[subpath] = to_full_export_condition(node, package_type)
        return

    for key, child in node.items():
        _walk(join_subpath(subpath, key), child, paths, package_type)


def normalize_exports(tree: Any, package_type: str) -> ExportPaths:
    """
    Normalize a raw export tree into canonical export paths.

    The root itself is tested against the leaf predicate first, so a string
    or a flat condition object describes the "." entry.

    Args:
        tree: Raw ``exports`` value (string or nested mapping)
        package_type: "commonjs" or "module"

    Returns:
        Insertion-ordered mapping of subpath -> condition
    """
    paths: ExportPaths = {}
    if tree is None:
        return paths
    _walk(ROOT_SUBPATH, tree, paths, package_type)
    return paths
