"""
Build Job Expansion
===================

Expands every subpath of a canonical export map into build jobs:

1. A default job carrying the subpath's conditions minus runtime variants
2. One job per runtime variant declared on the subpath, in RUNTIME_VARIANTS
   order, whose condition maps the subpath itself to the variant output

Jobs are emitted subpath by subpath in the map's insertion order, so the
resulting plan is reproducible. A job whose source cannot be located is
dropped without error.

Example:
    {".": {"edge-light": "./edge.js", "default": "./index.js"}}

    expands to:

    [
        ParsedExportCondition(name=".", export={"default": "./index.js"}),
        ParsedExportCondition(name=".", export={".": "./edge.js"}, export_type="edge-light"),
    ]
"""

import os
from pathlib import Path
from typing import List, Optional, Union

from bundlekit_common import RUNTIME_VARIANTS, TYPES_CONDITION
from bundlekit_common.logger import get_logger

from .entries import SourceLocator, locate_source_file
from .models import ExportPaths, FullExportCondition, ParsedExportCondition

logger = get_logger(__name__)


def condition_for_job(
    subpath: str,
    condition: FullExportCondition,
    export_type: str = "",
) -> FullExportCondition:
    """
    Condition mapping written by one job of ``subpath``.

    Variant jobs only see their own output, keyed by the subpath. The default
    job sees everything except the runtime variants.
    """
    if export_type in RUNTIME_VARIANTS:
        return {subpath: condition[export_type]}
    return {key: file for key, file in condition.items() if key not in RUNTIME_VARIANTS}


def expand_export_paths(
    export_paths: ExportPaths,
    cwd: Union[str, Path],
    entry: Optional[str] = None,
    dts: bool = False,
    locate: SourceLocator = locate_source_file,
) -> List[ParsedExportCondition]:
    """
    Expand canonical export paths into build jobs.

    Args:
        export_paths: Canonical export-paths map
        cwd: Package root directory
        entry: Explicit single-entry source, used for every job when given
        dts: Declaration mode; only default jobs of subpaths with ``types``
        locate: Source locator, ``(cwd, subpath, variant) -> path | None``

    Returns:
        Ordered list of ParsedExportCondition
    """
    jobs: List[ParsedExportCondition] = []
    cwd = str(cwd)

    for subpath, condition in export_paths.items():
        if dts and TYPES_CONDITION not in condition:
            continue

        export_types = [""]
        if not dts:
            export_types.extend(v for v in RUNTIME_VARIANTS if condition.get(v))

        for export_type in export_types:
            if entry:
                source: Optional[str] = os.path.abspath(os.path.join(cwd, entry))
            else:
                source = locate(cwd, subpath, export_type)

            if not source:
                logger.debug(
                    "Skipping export without source",
                    subpath=subpath,
                    export_type=export_type or None,
                )
                continue

            jobs.append(
                ParsedExportCondition(
                    source=source,
                    name=subpath,
                    export=condition_for_job(subpath, condition, export_type),
                    export_type=export_type,
                )
            )

    return jobs
