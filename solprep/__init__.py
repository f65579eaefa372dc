"""
solprep

Include-expanding, define-driven text preprocessor for Solidity sources.
"""

from .preprocessor import (
    DirectoryDriver,
    IncludeCache,
    MacroProcessor,
    PreprocessorError,
    preprocess_directory,
    preprocess_file,
    process_macros,
    resolve_includes,
)

__version__ = "0.1.0"

__all__ = [
    "DirectoryDriver",
    "IncludeCache",
    "MacroProcessor",
    "PreprocessorError",
    "preprocess_directory",
    "preprocess_file",
    "process_macros",
    "resolve_includes",
]
