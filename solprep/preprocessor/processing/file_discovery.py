"""
File discovery functionality for finding source files to preprocess.
"""

import logging
from pathlib import Path

from solprep.preprocessor.shared.constants import DEFAULT_SOURCE_EXTENSION
from solprep.preprocessor.shared.exceptions import FileDiscoveryError

# Configure logging
logger = logging.getLogger(__name__)


class FileDiscovery:
    """Handles discovery of source files in a single (non-recursive) folder."""

    def __init__(self, source_folder: Path, extension: str = DEFAULT_SOURCE_EXTENSION):
        """
        Initialize the file discovery.

        Args:
            source_folder: Path to the source folder
            extension: File name suffix that selects a file, e.g. ".sol"
        """
        self.source_folder = Path(source_folder)
        self.extension = extension
        self._file_cache: dict[str, list[Path]] = {}

    def matches(self, path: Path) -> bool:
        """Return True if the path is a regular file whose name ends with the extension."""
        return path.is_file() and path.name.endswith(self.extension)

    def discover_source_files(self) -> list[Path]:
        """
        Discover all source files directly inside the source folder.

        Subdirectories are not searched.

        Returns:
            List of source file paths, sorted by name

        Raises:
            FileDiscoveryError: If the folder is missing or cannot be listed
        """
        try:
            cache_key = f"source_files:{self.extension}"
            if cache_key in self._file_cache:
                return self._file_cache[cache_key]

            if not self.source_folder.exists():
                raise FileDiscoveryError(f"Source folder not found: {self.source_folder}")
            if not self.source_folder.is_dir():
                raise FileDiscoveryError(f"Source path is not a folder: {self.source_folder}")

            source_files = [path for path in self.source_folder.iterdir() if self.matches(path)]

            # Sort for consistent ordering
            source_files.sort(key=lambda path: path.name)

            # Cache the result
            self._file_cache[cache_key] = source_files

            logger.debug(f"Discovered {len(source_files)} {self.extension} files in {self.source_folder}")
            return source_files

        except Exception as e:
            if isinstance(e, FileDiscoveryError):
                raise
            raise FileDiscoveryError(f"Failed to discover source files: {e}") from e

    def discover_ignored_files(self) -> list[Path]:
        """
        List the entries of the source folder that will not be processed.

        Returns:
            Sorted list of paths (files with other extensions and subfolders)
        """
        try:
            if not self.source_folder.is_dir():
                return []
            ignored = [path for path in self.source_folder.iterdir() if not self.matches(path)]
            ignored.sort(key=lambda path: path.name)
            return ignored
        except OSError as e:
            raise FileDiscoveryError(f"Failed to list source folder: {e}") from e

    def clear_cache(self) -> None:
        """Clear the file discovery cache."""
        self._file_cache.clear()
        logger.debug("File discovery cache cleared")
