#
# src/parabehat/protocol/__init__.py
#
"""
Parsing of the `progress` output format emitted by the test executable.
"""
from .glyphs import GLYPH_OUTCOMES, StepOutcome
from .stream_parser import ParseEvents, ParserState, StreamParser
from .summary_line import SummaryCategory, SummaryLine, parse_summary_line

__all__ = [
    "GLYPH_OUTCOMES",
    "ParseEvents",
    "ParserState",
    "StepOutcome",
    "StreamParser",
    "SummaryCategory",
    "SummaryLine",
    "parse_summary_line",
]

# 🔼⚙️
