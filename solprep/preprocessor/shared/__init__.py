"""
Shared exceptions, constants and types for the preprocessor module.
"""

from .constants import *
from .exceptions import *
from .types import *

__all__ = [
    # Types
    "DefineSet",
    "FilePath",
    "FileReader",
    "ProcessingJob",
    "PreprocessResult",
    "ProgressCallback",
    # Exceptions
    "PreprocessorError",
    "ConfigurationError",
    "FileDiscoveryError",
    "SourceReadError",
    "IncludeError",
    "MacroEvaluationError",
    "OutputWriteError",
    # Constants
    "DEFAULT_SOURCE_EXTENSION",
    "INCLUDE_DIRECTIVE_PATTERN",
    "FILE_ENCODING",
]
