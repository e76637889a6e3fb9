"""
Build Context
=============

Per-invocation state for one build-plan compile. A fresh BuildContext is
created for every compile and passed explicitly to the functions that need
to report warnings or record artifact sizes; callers aggregate the results.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol, Union

from bundlekit_common.logger import get_logger

logger = get_logger(__name__)


class Reporter(Protocol):
    """Receives non-fatal warnings produced while compiling a plan."""

    def warn(self, message: str) -> None:
        ...


class LoggingReporter:
    """Reporter that forwards warnings to the structured logger."""

    def __init__(self, package_name: Optional[str] = None):
        self._logger = logger.with_context(package=package_name) if package_name else logger

    def warn(self, message: str) -> None:
        self._logger.warning(message)


@dataclass
class CollectingReporter:
    """Reporter that keeps warnings in memory for the caller to inspect."""

    warnings: List[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        self.warnings.append(message)


@dataclass(frozen=True)
class SizeEntry:
    export_name: str
    file: str
    size: int


@dataclass
class SizeCollector:
    """Artifact sizes recorded by the engine for one compile."""

    _entries: List[SizeEntry] = field(default_factory=list)

    def add(self, export_name: str, file: str, size: int) -> None:
        self._entries.append(SizeEntry(export_name, file, size))

    def entries(self, export_name: Optional[str] = None) -> List[SizeEntry]:
        if export_name is None:
            return list(self._entries)
        return [e for e in self._entries if e.export_name == export_name]

    def total(self) -> int:
        return sum(e.size for e in self._entries)


@dataclass
class BuildContext:
    """State shared by the jobs of a single compile invocation."""

    cwd: str
    reporter: Reporter = field(default_factory=LoggingReporter)
    sizes: SizeCollector = field(default_factory=SizeCollector)

    @classmethod
    def create(
        cls,
        cwd: Union[str, Path],
        reporter: Optional[Reporter] = None,
    ) -> "BuildContext":
        return cls(cwd=str(Path(cwd).resolve()), reporter=reporter or LoggingReporter())
