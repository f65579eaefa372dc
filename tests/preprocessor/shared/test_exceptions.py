"""
Tests for preprocessor exceptions.
"""

import pytest

from solprep.preprocessor.shared.exceptions import (
    ConfigurationError,
    FileDiscoveryError,
    IncludeError,
    MacroEvaluationError,
    OutputWriteError,
    PreprocessorError,
    SourceReadError,
)


class TestPreprocessorExceptions:
    """Test the preprocessor exception hierarchy."""

    def test_all_exceptions_are_preprocessor_errors(self):
        """Test that every exception is catchable as PreprocessorError."""
        exceptions = [
            ConfigurationError,
            FileDiscoveryError,
            IncludeError,
            MacroEvaluationError,
            OutputWriteError,
            SourceReadError,
        ]
        for exc_class in exceptions:
            assert issubclass(exc_class, PreprocessorError)

    def test_io_exceptions_are_os_errors(self):
        """Test that read and write failures are also IOErrors."""
        assert issubclass(IncludeError, OSError)
        assert issubclass(SourceReadError, OSError)
        assert issubclass(OutputWriteError, OSError)
        assert issubclass(IncludeError, IOError)

    def test_configuration_error_is_not_os_error(self):
        """Test that configuration and macro errors are not IOErrors."""
        assert not issubclass(ConfigurationError, OSError)
        assert not issubclass(MacroEvaluationError, OSError)

    def test_include_error_message(self):
        """Test that IncludeError keeps its message."""
        with pytest.raises(OSError) as exc_info:
            raise IncludeError("Cannot read include 'inc/missing.sol'")
        assert str(exc_info.value) == "Cannot read include 'inc/missing.sol'"
        assert isinstance(exc_info.value, PreprocessorError)
