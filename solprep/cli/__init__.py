"""
Command-line interface for solprep.
"""
