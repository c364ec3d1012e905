"""Merging a chords-only line into the lyric line below it.

ChordPro sources often align chords above the words they belong to::

    [G]  [C]
    Hello there

The chords line tokenizes to breakpoints ``(0, "G")`` and ``(2, "C")``; the
merge cuts the lyric text at those offsets::

    ("He", "G", 0) ("llo there", "C", 2)

Chords whose offset lies past the end of the lyric are kept as empty-text
segments at the end of the line rather than dropped.
"""

from ..models import Line, LineKind, LineSegment
from .lines import chord_breakpoints


def merge_chord_line(chords_line: Line, lyrics_line: Line) -> Line:
    """Return one ``LYRICS`` line carrying *chords_line*'s chords over *lyrics_line*'s text.

    Only the chord-free text of *lyrics_line* is used.  If *chords_line*
    carries no chords, *lyrics_line* is returned unchanged.
    """
    breakpoints = chord_breakpoints(chords_line)
    if not breakpoints:
        return lyrics_line

    text = lyrics_line.text
    end = len(text)
    segments: list[LineSegment] = []
    cursor = 0
    i = 0

    while i < len(breakpoints):
        position, chord = breakpoints[i]

        if cursor >= end:
            # Past the end of the lyric: remaining chords trail at the end.
            segments.append(LineSegment(text="", chord=chord, position=end))
            i += 1
            continue

        if position <= cursor:
            stop = breakpoints[i + 1][0] if i + 1 < len(breakpoints) else end
            piece = text[cursor : max(cursor, min(stop, end))]
            segments.append(LineSegment(text=piece, chord=chord, position=cursor))
            cursor += len(piece)
            i += 1
            continue

        piece = text[cursor : min(position, end)]
        segments.append(LineSegment(text=piece, chord=None, position=cursor))
        cursor += len(piece)

    if cursor < end:
        segments.append(LineSegment(text=text[cursor:], chord=None, position=cursor))

    return Line(segments=tuple(segments), kind=LineKind.LYRICS, raw=lyrics_line.raw)
