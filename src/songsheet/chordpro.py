"""ChordPro formatter.

Renders a :class:`~songsheet.models.ParsedDocument` back to ChordPro (``.cho``)
text.  Chords are written inline; whitespace alignment of any chords-only
source line that was merged into its lyric is not reconstructed.  Sections
follow each other without separator lines, since the parser keeps every blank
line after the first content as part of the section it falls in.

Section type -> ChordPro directive mapping
------------------------------------------

+-------------------------------+---------------------------------------------+
| Section type                  | Directive pair                              |
+===============================+=============================================+
| verse, chorus, bridge         | ``{start_of_verse: Verse 1}`` /             |
|                               | ``{end_of_verse}``                          |
+-------------------------------+---------------------------------------------+
| pre-chorus, intro, outro,     | ``{start_of_intro}`` / ``{end_of_intro}``   |
| solo, tag, unknown, ...       |                                             |
+-------------------------------+---------------------------------------------+

Usage::

    from songsheet.chordpro import ChordProFormatter
    text = ChordProFormatter().render(doc)
    Path("output.cho").write_text(text)
"""

from .models import Line, LineKind, ParsedDocument, Section, SectionType

# (ParsedDocument attribute, directive name), in output order.
_METADATA = [
    ("title", "title"),
    ("subtitle", "subtitle"),
    ("artist", "artist"),
    ("album", "album"),
    ("composer", "composer"),
    ("lyricist", "lyricist"),
    ("arranger", "arranger"),
    ("key", "key"),
    ("original_key", "original_key"),
    ("capo", "capo"),
    ("tempo", "tempo"),
    ("time_signature", "time"),
    ("year", "year"),
    ("copyright", "copyright"),
    ("ccli_id", "ccli"),
]

# Section types ChordPro has standardised; these carry their label.
_STRUCTURED = {SectionType.VERSE, SectionType.CHORUS, SectionType.BRIDGE}


class ChordProFormatter:
    """Render a :class:`~songsheet.models.ParsedDocument` to ChordPro text."""

    def render(self, doc: ParsedDocument) -> str:
        """Return ChordPro text for *doc*.

        The returned string ends with a single newline and uses Unix line
        endings (``\\n``) throughout.
        """
        parts: list[str] = []

        # --- Metadata block ---
        for attr, directive in _METADATA:
            value = getattr(doc, attr)
            if value is not None and value != "":
                parts.append(f"{{{directive}: {value}}}")

        # --- Section blocks ---
        if parts and doc.sections:
            parts.append("")  # blank line after the metadata block
        for section in doc.sections:
            parts.extend(_render_section(section))

        if not parts:
            return ""
        return "\n".join(parts) + "\n"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def render_line(line: Line) -> str:
    """Return one ChordPro source line with chords inline, e.g. ``Ama[G]zing``."""
    if line.kind is LineKind.BLANK:
        return ""
    if line.kind is LineKind.COMMENT:
        return f"{{comment: {line.text}}}"
    return "".join(
        f"[{seg.chord}]{seg.text}" if seg.chord is not None else seg.text
        for seg in line.segments
    )


def _render_section(section: Section) -> list[str]:
    """Return a list of lines for one section (no trailing blank line)."""
    lines = [render_line(line) for line in section.lines]
    name = section.type.value
    if section.type in _STRUCTURED:
        start_line = f"{{start_of_{name}: {section.label}}}"
    else:
        start_line = f"{{start_of_{name}}}"
    return [start_line, *lines, f"{{end_of_{name}}}"]
