"""
Constants for the preprocessor module.
"""

# Source files selected by default
DEFAULT_SOURCE_EXTENSION = ".sol"

# Include directive, e.g. @@include('contracts/Ownable.sol')
INCLUDE_DIRECTIVE_PATTERN = r"@@include\('([^)]*)'\)"

# Encoding used for every file read or written
FILE_ENCODING = "utf-8"

# Macro syntax handed to Jinja2
MACRO_SYNTAX = {
    "variable_start_string": "@@",
    "variable_end_string": "@@",
    "block_start_string": "{%@",
    "block_end_string": "@%}",
    "comment_start_string": "{#@",
    "comment_end_string": "@#}",
    "line_statement_prefix": "// #",
    "line_comment_prefix": "// ##",
}

# Jinja2 raw block wrapped around text that must not be evaluated
MACRO_RAW_START = "{%@ raw @%}"
MACRO_RAW_END = "{%@ endraw @%}"

# Shorthand conditionals rewritten to Jinja2 tests before rendering.
# The lookahead leaves a CR of a CRLF line ending in place.
MACRO_IFDEF_PATTERNS = {
    "ifdef": r"^([ \t]*// #)[ \t]*ifdef[ \t]+(\w+)[ \t]*(?=\r?$)",
    "ifndef": r"^([ \t]*// #)[ \t]*ifndef[ \t]+(\w+)[ \t]*(?=\r?$)",
}

# Line endings Jinja2 can emit, in detection order
NEWLINE_SEQUENCES = ("\r\n", "\r", "\n")

# Value given to a define passed without "=VALUE"
DEFAULT_DEFINE_VALUE = "true"

# Names Jinja2 reads as literals or operators, so a define cannot use them
RESERVED_DEFINE_NAMES = {
    "true",
    "false",
    "none",
    "True",
    "False",
    "None",
    "and",
    "or",
    "not",
    "in",
    "is",
    "if",
    "else",
}

# Keys accepted in the TOML config file
CONFIG_KEYS = {
    "source",
    "destination",
    "extension",
    "include_root",
    "share_include_cache",
    "defines",
}
