"""Tokenizing a single line of song text into positioned segments.

Chords are written inline in square brackets, attached to the character that
follows them::

    "Ama[G]zing gr[C]ace"  ->  ("Ama", None, 0) ("zing gr", "G", 3) ("ace", "C", 10)

Positions count characters of the chord-free text only, so the segments of a
line always join back into :func:`strip_chords` of that line.

A line holding nothing but chords over blank space (``"[G]  [C]"``) is a
chords-only line; the section state machine tries to merge it with the lyric
line below it.
"""

import logging

from ..models import Line, LineKind, LineSegment

logger = logging.getLogger(__name__)


def _scan(line: str) -> list[tuple[str, str | None]]:
    """Split *line* into ``(text, chord)`` pairs, in order.

    An ``[`` with no closing ``]`` is kept as literal text together with
    everything after it.  Empty brackets carry no chord and vanish.
    """
    pairs: list[tuple[str, str | None]] = []
    text = ""
    chord: str | None = None
    i = 0
    while i < len(line):
        ch = line[i]
        if ch != "[":
            text += ch
            i += 1
            continue

        close = line.find("]", i + 1)
        if close == -1:
            logger.debug("Unterminated chord bracket kept as text: %r", line[i:])
            text += line[i:]
            break

        name = line[i + 1 : close].strip()
        i = close + 1
        if not name:
            continue
        if text or chord is not None:
            pairs.append((text, chord))
        text = ""
        chord = name

    if text or chord is not None:
        pairs.append((text, chord))
    return pairs


def strip_chords(line: str) -> str:
    """Return the chord-free text of *line* (trimmed, brackets removed)."""
    return "".join(text for text, _ in _scan(line.strip()))


def tokenize_line(line: str) -> Line:
    """Tokenize *line* into a :class:`~songsheet.models.Line`.

    The line is trimmed first.  The result is ``BLANK`` if nothing remains,
    ``CHORDS_ONLY`` if every segment has a chord and only whitespace text, and
    ``LYRICS`` otherwise.  Directive and ``#`` comment lines are the caller's
    business; here they would be treated as plain lyrics.
    """
    stripped = line.strip()
    segments: list[LineSegment] = []
    position = 0
    for text, chord in _scan(stripped):
        segments.append(LineSegment(text=text, chord=chord, position=position))
        position += len(text)

    return Line(segments=tuple(segments), kind=classify_segments(segments), raw=stripped)


def classify_segments(segments: list[LineSegment] | tuple[LineSegment, ...]) -> LineKind:
    if not segments:
        return LineKind.BLANK
    if all(seg.has_chord and not seg.text.strip() for seg in segments):
        return LineKind.CHORDS_ONLY
    return LineKind.LYRICS


def chord_breakpoints(line: Line) -> list[tuple[int, str]]:
    """Return ``(position, chord)`` pairs of *line*, sorted by position.

    The sort is stable, so chords sharing a position keep their order.
    """
    points = [(seg.position, seg.chord) for seg in line.segments if seg.chord is not None]
    return sorted(points, key=lambda p: p[0])
