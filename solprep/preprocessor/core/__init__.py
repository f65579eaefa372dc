"""
Core layer that drives the pipeline over a folder of source files.
"""

from .directory_driver import DirectoryDriver, normalize_dir, preprocess_directory, preprocess_file

__all__ = [
    "DirectoryDriver",
    "preprocess_directory",
    "preprocess_file",
    "normalize_dir",
]
