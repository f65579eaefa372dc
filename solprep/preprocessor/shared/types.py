"""
Common type definitions for the preprocessor module.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# File paths
FilePath = str | Path

# Define substitution
DefineSet = Mapping[str, Any]

# Reads one file and returns its text
FileReader = Callable[[Path], str]

# Receives one user-facing progress line
ProgressCallback = Callable[[str], None]


@dataclass(frozen=True)
class ProcessingJob:
    """The unit of work for one file: where to read, where to write, and with which defines."""

    source_path: Path
    destination_path: Path
    defines: DefineSet

    @property
    def name(self) -> str:
        return self.source_path.name


@dataclass
class PreprocessResult:
    """Outcome of a directory run."""

    processed_files: list[str] = field(default_factory=list)
    output_paths: list[Path] = field(default_factory=list)
    defines: dict[str, Any] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return len(self.processed_files)
