"""
Processing layer for include resolution, macro evaluation, and file discovery.
"""

from .file_discovery import FileDiscovery
from .include_resolver import IncludeCache, IncludeResolver, find_include_paths, resolve_includes
from .macro_processor import MacroProcessor, process_macros

__all__ = [
    "resolve_includes",
    "find_include_paths",
    "process_macros",
    "IncludeCache",
    "IncludeResolver",
    "MacroProcessor",
    "FileDiscovery",
]
