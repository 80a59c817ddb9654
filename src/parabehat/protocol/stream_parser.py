#
# src/parabehat/protocol/stream_parser.py
#
"""
Finite-state parser for the `progress` output of one test process.

The parser never touches I/O: it is fed raw byte chunks as they arrive
and returns what it recognized in each chunk. Chunk boundaries do not
affect the result.

    GLYPHS --(blank line)--> EXTRAS_OR_SUMMARY --> [EXTRAS] --> SUMMARY --(close)--> DONE
"""
from enum import Enum, auto
from functools import reduce
from operator import add

from attrs import define, field

from parabehat.protocol.glyphs import GLYPH_OUTCOMES, StepOutcome
from parabehat.protocol.summary_line import SummaryLine, parse_summary_line
from parabehat.summary import SummaryCounts

NEWLINE = ord("\n")
DEFAULT_CONTINUATION_MARKERS = b" \t-"


class ParserState(Enum):
    GLYPHS = auto()
    EXTRAS_OR_SUMMARY = auto()
    EXTRAS = auto()
    SUMMARY = auto()
    DONE = auto()


@define(frozen=True, slots=True)
class ParseEvents:
    """Everything recognized in one chunk, in stream order per kind."""

    glyphs: tuple[StepOutcome, ...] = field(default=())
    extras: tuple[str, ...] = field(default=())
    summary: tuple[SummaryLine, ...] = field(default=())

    @property
    def counts(self) -> SummaryCounts:
        return reduce(add, (record.to_counts() for record in self.summary), SummaryCounts())


@define(frozen=True, slots=True)
class GlyphScan:
    glyphs: tuple[StepOutcome, ...]
    consumed: int
    finished: bool
    previous_newline: bool


def scan_glyphs(data: bytes, previous_newline: bool = False) -> GlyphScan:
    """
    Scans data for outcome glyphs until two consecutive newlines.

    `consumed` is the number of bytes belonging to the glyph stream,
    including the terminating blank line when `finished` is set.
    """
    glyphs: list[StepOutcome] = []
    for index, byte in enumerate(data):
        if byte == NEWLINE:
            if previous_newline:
                return GlyphScan(glyphs=tuple(glyphs), consumed=index + 1, finished=True, previous_newline=True)
            previous_newline = True
            continue
        previous_newline = False
        outcome = GLYPH_OUTCOMES.get(byte)
        if outcome is not None:
            glyphs.append(outcome)
    return GlyphScan(glyphs=tuple(glyphs), consumed=len(data), finished=False, previous_newline=previous_newline)


def next_trailing_state(state: ParserState, line: bytes, markers: bytes = DEFAULT_CONTINUATION_MARKERS) -> ParserState:
    """Transition taken on one complete line of the block after the glyphs."""
    if state in (ParserState.EXTRAS_OR_SUMMARY, ParserState.EXTRAS):
        if line[:1] and line[0] in markers:
            return ParserState.EXTRAS
        return ParserState.SUMMARY
    return state


def _decode(line: bytes) -> str:
    return line.decode("utf-8", errors="replace").rstrip("\r")


class StreamParser:
    """Incremental parser for a single output stream."""

    def __init__(self, continuation_markers: bytes = DEFAULT_CONTINUATION_MARKERS):
        self.continuation_markers = continuation_markers
        self.state = ParserState.GLYPHS
        self._previous_newline = False
        self._line = bytearray()
        self._extras_lines: list[str] = []

    def feed(self, data: bytes) -> ParseEvents:
        if self.state is ParserState.DONE:
            raise RuntimeError("Cannot feed a parser that has been closed.")

        glyphs: tuple[StepOutcome, ...] = ()
        offset = 0
        if self.state is ParserState.GLYPHS:
            scan = scan_glyphs(data, self._previous_newline)
            glyphs = scan.glyphs
            offset = scan.consumed
            self._previous_newline = scan.previous_newline
            if scan.finished:
                self.state = ParserState.EXTRAS_OR_SUMMARY

        extras: list[str] = []
        summary: list[SummaryLine] = []
        if self.state is not ParserState.GLYPHS:
            self._line.extend(data[offset:])
            while (end := self._line.find(NEWLINE)) != -1:
                line = bytes(self._line[:end])
                del self._line[: end + 1]
                self._consume_line(line, extras, summary)

        return ParseEvents(glyphs=glyphs, extras=tuple(extras), summary=tuple(summary))

    def close(self) -> ParseEvents:
        """Signals end of stream, flushing a final unterminated line."""
        extras: list[str] = []
        summary: list[SummaryLine] = []
        if self.state not in (ParserState.GLYPHS, ParserState.DONE):
            if self._line:
                line = bytes(self._line)
                self._line.clear()
                self._consume_line(line, extras, summary)
            self._flush_extras(extras)
        self.state = ParserState.DONE
        return ParseEvents(extras=tuple(extras), summary=tuple(summary))

    def abort(self) -> ParseEvents:
        """
        Stops parsing after a failed read.

        Extras blocks built from complete lines are still returned; a
        partial trailing line is dropped since it may have been cut short.
        """
        extras: list[str] = []
        self._line.clear()
        self._flush_extras(extras)
        self.state = ParserState.DONE
        return ParseEvents(extras=tuple(extras))

    def _consume_line(self, line: bytes, extras: list[str], summary: list[SummaryLine]) -> None:
        new_state = next_trailing_state(self.state, line, self.continuation_markers)
        if new_state is ParserState.EXTRAS:
            self._extras_lines.append(_decode(line))
        else:
            self._flush_extras(extras)
            summary.extend(parse_summary_line(_decode(line)))
        self.state = new_state

    def _flush_extras(self, extras: list[str]) -> None:
        if self._extras_lines:
            extras.append("\n".join(self._extras_lines))
            self._extras_lines = []


# 🔼⚙️
