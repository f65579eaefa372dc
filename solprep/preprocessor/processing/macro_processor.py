"""
Macro Processing

Evaluates define substitution and conditional blocks with Jinja2.

Syntax:
- @@NAME@@ substitutes a define (any Jinja2 expression may appear between the markers)
- // #if EXPR, // #elif EXPR, // #else, // #endif
- // #ifdef NAME and // #ifndef NAME (closed with // #endif)
- // #set NAME = EXPR
- // ## starts a comment that runs to the end of the line

Sources written for the older `// #put` / `// #define` convention translate as:
- // #put EXPR becomes @@EXPR@@
- // #define NAME VALUE becomes // #set NAME = VALUE

Include directives still present in the text (those copied in from an
included file) are emitted as written, never evaluated. Output keeps the
line ending style of the input.
"""

import logging
import re

from jinja2 import Environment, StrictUndefined, TemplateError, TemplateSyntaxError

from ..shared.constants import (
    INCLUDE_DIRECTIVE_PATTERN,
    MACRO_IFDEF_PATTERNS,
    MACRO_RAW_END,
    MACRO_RAW_START,
    MACRO_SYNTAX,
    NEWLINE_SEQUENCES,
)
from ..shared.exceptions import MacroEvaluationError
from ..shared.types import DefineSet

logger = logging.getLogger(__name__)

_IFDEF_RE = re.compile(MACRO_IFDEF_PATTERNS["ifdef"], re.MULTILINE)
_IFNDEF_RE = re.compile(MACRO_IFDEF_PATTERNS["ifndef"], re.MULTILINE)
_INCLUDE_RE = re.compile(INCLUDE_DIRECTIVE_PATTERN)


def create_environment() -> Environment:
    """Build the Jinja2 environment used for macro evaluation."""
    return Environment(
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        **MACRO_SYNTAX,
    )


def expand_ifdef(content: str) -> str:
    """Rewrite // #ifdef and // #ifndef lines into Jinja2 `is defined` tests."""
    content = _IFDEF_RE.sub(r"\1if \2 is defined", content)
    return _IFNDEF_RE.sub(r"\1if \2 is not defined", content)


def protect_includes(content: str) -> str:
    """Wrap every include directive in a raw block so Jinja2 copies it verbatim."""
    if "@@include(" not in content:
        return content
    return _INCLUDE_RE.sub(lambda match: MACRO_RAW_START + match.group(0) + MACRO_RAW_END, content)


def detect_newline(content: str) -> str:
    """Return the line ending style of content: CRLF if any, else CR if any, else LF."""
    for sequence in NEWLINE_SEQUENCES:
        if sequence in content:
            return sequence
    return "\n"


class MacroProcessor:
    """Renders include-expanded text against a set of defines."""

    def __init__(self, environment: Environment | None = None):
        self.environment = environment or create_environment()
        self._environments: dict[str, Environment] = {}

    def environment_for(self, newline: str) -> Environment:
        """Return the environment that renders line breaks as newline."""
        if newline == self.environment.newline_sequence:
            return self.environment
        if newline not in self._environments:
            self._environments[newline] = self.environment.overlay(newline_sequence=newline)
        return self._environments[newline]

    def process(self, content: str, defines: DefineSet, source_name: str | None = None) -> str:
        """
        Evaluate macros in content.

        Line breaks in the output follow the style of the input (LF, CRLF or CR).

        Args:
            content: Include-expanded text
            defines: Values visible to substitutions and conditions
            source_name: Name of the file being processed, used in error messages

        Returns:
            Rendered text

        Raises:
            MacroEvaluationError: If the text contains malformed macro syntax or
                references an undefined name
        """
        where = f" in {source_name}" if source_name else ""
        environment = self.environment_for(detect_newline(content))
        try:
            template = environment.from_string(protect_includes(expand_ifdef(content)))
            rendered = template.render(dict(defines))
        except TemplateSyntaxError as e:
            raise MacroEvaluationError(f"Macro syntax error{where} (line {e.lineno}): {e.message}") from e
        except TemplateError as e:
            raise MacroEvaluationError(f"Macro evaluation failed{where}: {e}") from e

        logger.debug(f"Rendered macros{where} with {len(defines)} defines")
        return rendered


def process_macros(content: str, defines: DefineSet | None = None, source_name: str | None = None) -> str:
    """
    Evaluate macros in content with a default processor.

    Args:
        content: Include-expanded text
        defines: Values visible to substitutions and conditions
        source_name: Name of the file being processed, used in error messages

    Returns:
        Rendered text
    """
    return MacroProcessor().process(content, defines or {}, source_name)
