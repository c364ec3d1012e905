"""Grouping lines into sections.

:class:`SectionAccumulator` is fed raw lines one at a time and hands back a
:class:`~songsheet.models.Section` whenever a section-boundary directive
closes the one being built.  Content before any boundary belongs to an
implicit first verse.

Section boundaries
------------------

+------------------------------------------+-----------------------------+
| Directive                                | Opens                       |
+==========================================+=============================+
| ``{start_of_verse}``, ``{sov}``,         | verse                       |
| ``{verse}``, ``{v}``                     |                             |
+------------------------------------------+-----------------------------+
| ``{start_of_chorus}``, ``{soc}``,        | chorus                      |
| ``{chorus}``, ``{refrain}``              |                             |
+------------------------------------------+-----------------------------+
| ``{start_of_bridge}``, ``{sob}``,        | bridge                      |
| ``{bridge}``                             |                             |
+------------------------------------------+-----------------------------+
| ``{start_of_<other>}``                   | that type, or ``unknown``   |
+------------------------------------------+-----------------------------+

``{end_of_*}`` directives close nothing by themselves; the next boundary or
:meth:`SectionAccumulator.finish` does.  Blank lines before the first content
of the document are dropped; every later blank line is kept.

Usage::

    acc = SectionAccumulator()
    sections = [s for s in map(acc.feed, text.splitlines()) if s]
    if last := acc.finish():
        sections.append(last)
"""

import logging
from collections import Counter

from ..models import Line, LineKind, Section, SectionType
from .directives import (
    is_comment_directive,
    is_section_end_directive,
    parse_directive,
    section_type_for_directive,
)
from .lines import tokenize_line
from .merge import merge_chord_line
from .metadata import MetadataAccumulator

logger = logging.getLogger(__name__)


class SectionAccumulator:
    """Line-by-line section state machine.

    Holds at most one chords-only line back so it can be merged with the
    lyric line that follows it.
    """

    def __init__(self, metadata: MetadataAccumulator | None = None) -> None:
        self.metadata = metadata if metadata is not None else MetadataAccumulator()
        self.section_type = SectionType.VERSE
        self._buffer: list[Line] = []
        self._counters: Counter[SectionType] = Counter()
        self._pending: Line | None = None
        self._started = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def feed(self, raw: str) -> Section | None:
        """Consume one raw line; return a section if this line closed one."""
        stripped = raw.strip()

        if not stripped and not self._started:
            return None

        directive = parse_directive(stripped)
        if directive is not None:
            return self._handle_directive(*directive, raw=stripped)

        if stripped.startswith("#"):
            self._append(Line.comment(stripped[1:].strip(), raw=stripped))
            return None

        if not stripped:
            self._append(Line.blank())
            return None

        line = tokenize_line(stripped)
        if line.kind is LineKind.CHORDS_ONLY:
            self._release_pending()
            self._pending = line
            self._started = True
        elif self._pending is not None:
            self._buffer.append(merge_chord_line(self._pending, line))
            self._pending = None
        else:
            self._append(line)
        return None

    def finish(self) -> Section | None:
        """Flush everything still held; return the final section, if any."""
        self._release_pending()
        return self._flush()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _handle_directive(self, name: str, value: str, raw: str) -> Section | None:
        if is_comment_directive(name):
            self._append(Line.comment(value, raw=raw))
            return None

        self._release_pending()

        section_type = section_type_for_directive(name)
        if section_type is None:
            if not is_section_end_directive(name):
                self.metadata.set(name, value)
            return None

        section = self._flush()
        self.section_type = section_type
        return section

    def _append(self, line: Line) -> None:
        """Buffer a line that can't merge, releasing any held chords-only line first."""
        self._release_pending()
        self._buffer.append(line)
        self._started = True

    def _release_pending(self) -> None:
        if self._pending is None:
            return
        logger.debug("Chords-only line kept unmerged: %r", self._pending.raw)
        self._buffer.append(self._pending)
        self._pending = None

    def _flush(self) -> Section | None:
        if not self._buffer:
            return None
        self._counters[self.section_type] += 1
        section = Section(
            type=self.section_type,
            lines=tuple(self._buffer),
            index=self._counters[self.section_type],
        )
        self._buffer = []
        logger.debug("Section complete: %s (%d lines)", section.label, len(section.lines))
        return section
