"""
Custom exceptions for the preprocessor module.
"""


class PreprocessorError(Exception):
    """Base exception for all preprocessor-related errors."""

    pass


class ConfigurationError(PreprocessorError):
    """Raised when defines, options or the config file are invalid."""

    pass


class FileDiscoveryError(PreprocessorError):
    """Raised when source file discovery fails."""

    pass


class SourceReadError(PreprocessorError, OSError):
    """Raised when a source file cannot be read."""

    pass


class IncludeError(PreprocessorError, OSError):
    """Raised when the target of an include directive cannot be read."""

    pass


class MacroEvaluationError(PreprocessorError):
    """Raised when macro substitution or a conditional block fails to evaluate."""

    pass


class OutputWriteError(PreprocessorError, OSError):
    """Raised when a processed file cannot be written to the destination."""

    pass
