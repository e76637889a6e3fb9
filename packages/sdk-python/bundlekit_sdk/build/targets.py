"""
Output Target Resolution
========================

Turns the condition set of one build job into the list of (format, file)
targets the bundling engine writes, and derives where the job's type
declaration file goes.
"""

import os
from pathlib import Path
from typing import List, Mapping, Optional, Set, Union

from bundlekit_common import DECLARATION_SUFFIX, DEFAULT_DIST_FILE, DIST_DIR, TYPES_CONDITION

from .conditions import classify_format, file_extension
from .context import Reporter
from .entries import filename_without_extension
from .models import ModuleFormat, OutputTarget, ParsedExportCondition

PathLike = Union[str, Path]


def dist_path(relative_path: str, cwd: PathLike) -> str:
    """Absolute output path of ``relative_path`` inside the package."""
    return os.path.abspath(os.path.join(cwd, relative_path))


def resolve_targets(
    condition: Mapping[str, str],
    cwd: PathLike,
    reporter: Optional[Reporter] = None,
    package_name: Optional[str] = None,
) -> List[OutputTarget]:
    """
    Compute the output targets of one build job.

    Conditions are visited in insertion order and ``types`` is skipped.
    Two keys resolving to the same absolute file produce a single target,
    using the format of the key seen first. A condition with no outputs
    yields one ESM target at ``dist/index.js``.

    Args:
        condition: Condition mapping of the job
        cwd: Package root directory
        reporter: Receives the warning emitted when the fallback is used
        package_name: Package name used in that warning

    Returns:
        Ordered, de-duplicated list of OutputTarget
    """
    targets: List[OutputTarget] = []
    seen: Set[str] = set()

    for key, file in condition.items():
        if key == TYPES_CONDITION:
            continue

        dist_file = dist_path(file, cwd)
        if dist_file in seen:
            continue
        seen.add(dist_file)
        targets.append(OutputTarget(classify_format(key, file_extension(file)), dist_file))

    if not targets:
        if reporter is not None:
            reporter.warn(
                f"Doesn't find any exports in {package_name or 'package'}, "
                f"using default dist path {DEFAULT_DIST_FILE}"
            )
        targets.append(OutputTarget(ModuleFormat.ESM, dist_path(DEFAULT_DIST_FILE, cwd)))

    return targets


def resolve_declaration_path(
    export_condition: ParsedExportCondition,
    cwd: PathLike,
    entry_file: Optional[str] = None,
    typings: Optional[str] = None,
) -> str:
    """
    Derive the type declaration output path of a build job.

    Precedence:
    1. An explicit single-entry path: same name with a ``.d.ts`` suffix
    2. The job's ``types`` condition
    3. ``<declarations dir>/<index|subpath>.d.ts``, where the directory is
       that of the manifest's legacy typings, else ``dist/``

    Args:
        export_condition: The job being compiled
        cwd: Package root directory
        entry_file: Explicitly requested single-entry path, if any
        typings: Manifest ``types``/``typings`` value, if any

    Returns:
        Absolute path of the declaration file
    """
    if entry_file:
        return dist_path(filename_without_extension(entry_file) + DECLARATION_SUFFIX, cwd)

    types_file = export_condition.export.get(TYPES_CONDITION)
    if types_file:
        return dist_path(types_file, cwd)

    declarations_dir = (
        os.path.dirname(dist_path(typings, cwd)) if typings else dist_path(DIST_DIR, cwd)
    )
    name = "index" if export_condition.name == "." else export_condition.name
    return os.path.abspath(os.path.join(declarations_dir, name + DECLARATION_SUFFIX))
