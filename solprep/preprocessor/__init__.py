"""
Preprocessor Module

Expands @@include directives and evaluates define-driven macros over a folder
of source files.
"""

from .core import DirectoryDriver, preprocess_directory, preprocess_file

__all__ = ["DirectoryDriver", "preprocess_directory", "preprocess_file"]

# Re-export key components for advanced usage
from .processing import (
    FileDiscovery,
    IncludeCache,
    IncludeResolver,
    MacroProcessor,
    process_macros,
    resolve_includes,
)
from .shared import (
    ConfigurationError,
    FileDiscoveryError,
    IncludeError,
    MacroEvaluationError,
    OutputWriteError,
    PreprocessorError,
    PreprocessResult,
    ProcessingJob,
    SourceReadError,
)
