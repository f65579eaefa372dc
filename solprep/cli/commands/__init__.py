"""
CLI command implementations.
"""

from solprep.cli.commands.preprocess import cmd_preprocess

__all__ = ["cmd_preprocess"]
