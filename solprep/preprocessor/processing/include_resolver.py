"""
Include Resolution

Expands @@include('<path>') directives by substituting the literal content of the
referenced file. Expansion is single-level: directives that appear inside an
included file are copied through untouched.
"""

import logging
import re
from pathlib import Path

from ..shared.constants import FILE_ENCODING, INCLUDE_DIRECTIVE_PATTERN
from ..shared.exceptions import IncludeError
from ..shared.types import FilePath, FileReader

logger = logging.getLogger(__name__)

_INCLUDE_RE = re.compile(INCLUDE_DIRECTIVE_PATTERN)


def read_text_file(path: Path) -> str:
    """Read a file from disk as UTF-8 text, keeping its line endings as they are."""
    with open(path, encoding=FILE_ENCODING, newline="") as f:
        return f.read()


def find_include_paths(content: str) -> list[str]:
    """
    List the include paths referenced in content, in order of appearance.

    Args:
        content: Text to scan

    Returns:
        Paths as written in the directives (duplicates kept)
    """
    return _INCLUDE_RE.findall(content)


class IncludeCache:
    """
    Memoizes include file contents by resolved path.

    The first content read for a path is returned for every later lookup; entries
    are never re-read or invalidated. One cache is normally used per job, but a
    run may share a single instance across jobs.
    """

    def __init__(self) -> None:
        self._contents: dict[str, str] = {}
        self.hits = 0
        self.misses = 0

    def __contains__(self, key: str) -> bool:
        return key in self._contents

    def __len__(self) -> int:
        return len(self._contents)

    def get(self, key: str) -> str | None:
        content = self._contents.get(key)
        if content is None:
            self.misses += 1
        else:
            self.hits += 1
        return content

    def store(self, key: str, content: str) -> None:
        self._contents[key] = content

    def paths(self) -> list[str]:
        return list(self._contents)

    def clear(self) -> None:
        """Drop all cached contents and reset the counters."""
        self._contents.clear()
        self.hits = 0
        self.misses = 0


class IncludeResolver:
    """Replaces include directives with the contents of the files they name."""

    def __init__(
        self,
        cache: IncludeCache | None = None,
        include_root: FilePath | None = None,
        read_file: FileReader | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            cache: Cache to read from and populate (a fresh one if omitted)
            include_root: Base directory for relative include paths. When omitted,
                relative paths resolve against the process working directory.
            read_file: Callable used to load an include target from disk
        """
        self.cache = cache if cache is not None else IncludeCache()
        self.include_root = Path(include_root) if include_root is not None else None
        self.read_file = read_file or read_text_file

    def resolve_path(self, include_path: str) -> Path:
        """
        Turn the path written in a directive into the path that will be read.

        Absolute paths are used as-is. Relative paths are joined to the include
        root if one is configured, otherwise they stay relative to the working
        directory.
        """
        path = Path(include_path)
        if path.is_absolute() or self.include_root is None:
            return path
        return self.include_root / path

    def load(self, include_path: str, source_name: str | None = None) -> str:
        """
        Return the content for an include path, reading it on first use.

        Args:
            include_path: Path as written in the directive
            source_name: Name of the file being processed, used in error messages

        Returns:
            Raw content of the included file

        Raises:
            IncludeError: If the file does not exist or cannot be read
        """
        resolved = self.resolve_path(include_path)
        key = str(resolved)

        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Include cache hit: {key}")
            return cached

        try:
            content = self.read_file(resolved)
        except (OSError, UnicodeDecodeError) as e:
            where = f" (included from {source_name})" if source_name else ""
            raise IncludeError(f"Cannot read include '{include_path}'{where}: {e}") from e

        self.cache.store(key, content)
        logger.debug(f"Loaded include {key} ({len(content)} chars)")
        return content

    def resolve(self, content: str, source_name: str | None = None) -> str:
        """
        Expand every include directive found in content.

        Args:
            content: Text to expand
            source_name: Name of the file being processed, used in error messages

        Returns:
            New text with each directive replaced by the literal file content

        Raises:
            IncludeError: If any include target cannot be read
        """
        if "@@include(" not in content:
            return content

        def _replace(match: re.Match) -> str:
            return self.load(match.group(1), source_name)

        return _INCLUDE_RE.sub(_replace, content)


def resolve_includes(
    content: str,
    cache: IncludeCache | None = None,
    include_root: FilePath | None = None,
    source_name: str | None = None,
) -> str:
    """
    Expand include directives in content with a one-off resolver.

    Args:
        content: Text with @@include('<path>') directives
        cache: Optional cache to share with other calls
        include_root: Optional base directory for relative include paths
        source_name: Name of the file being processed, used in error messages

    Returns:
        Text with includes expanded (single level)

    Raises:
        IncludeError: If an include target cannot be read
    """
    resolver = IncludeResolver(cache=cache, include_root=include_root)
    return resolver.resolve(content, source_name)
