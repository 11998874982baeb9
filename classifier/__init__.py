"""
classifier — rekonstrukcja hierarchii KZiS z linii tekstu.

Publiczne API:
  parse_lines(lines)                        → ParseResult
  classify_line(line)                       → LineKind
  fold_header(code, title, lines, pos)      → (HeaderGroup, pos)
  emit_occupations(lines, pos, context)     → (list[OccupationRecord], pos)
  ContextRegister, ParseResult, LineKind    typy danych
"""

from .context  import ContextRegister
from .emitter  import emit_occupations, extract_occupations, gather_occupation_line
from .engine   import ParseResult, parse_lines
from .folder   import fold_header
from .patterns import LineKind, classify_line

__all__ = [
    "ContextRegister",
    "emit_occupations",
    "extract_occupations",
    "gather_occupation_line",
    "ParseResult",
    "parse_lines",
    "fold_header",
    "LineKind",
    "classify_line",
]
