"""Recognition of ChordPro directive lines.

A directive is a whole line wrapped in braces::

    {title: Amazing Grace}     -> ("title", "Amazing Grace")
    {start_of_chorus}          -> ("start_of_chorus", "")

Anything else, including an unterminated ``{incomplete``, is not a directive
and is left to the line tokenizer.
"""

from ..models import SectionType

_COMMENT_NAMES = {
    "comment",
    "c",
    "comment_italic",
    "ci",
    "comment_box",
    "cb",
    "highlight",
}

# Shorthand start-of-section prefixes (after underscores are removed).
_SHORTHAND_STARTS = {
    "soc": SectionType.CHORUS,
    "sov": SectionType.VERSE,
    "sob": SectionType.BRIDGE,
}

_SHORTHAND_ENDS = {"eoc", "eov", "eob"}


def parse_directive(line: str) -> tuple[str, str] | None:
    """Return ``(name, value)`` for a directive line, or ``None``.

    Only the first ``:`` separates name from value, so ``{title: Intro: Reprise}``
    keeps the second colon in the value.  Nested braces are not handled.
    """
    stripped = line.strip()
    if len(stripped) < 2 or not (stripped.startswith("{") and stripped.endswith("}")):
        return None
    content = stripped[1:-1]
    name, sep, value = content.partition(":")
    if not sep:
        return content.strip(), ""
    return name.strip(), value.strip()


def is_comment_directive(name: str) -> bool:
    return name.strip().lower() in _COMMENT_NAMES


def is_section_end_directive(name: str) -> bool:
    """True for ``end_of_<type>`` and the ``eoc``/``eov``/``eob`` shorthands."""
    normalized = name.strip().lower().replace("_", "")
    return normalized.startswith("endof") or normalized in _SHORTHAND_ENDS


def section_type_for_directive(name: str) -> SectionType | None:
    """Return the section a directive opens, or ``None`` if it opens none.

    Handles ``start_of_<type>`` (``startof...`` with underscores removed), the
    ``soc``/``sov``/``sob`` shorthands, and bare section names such as
    ``{verse}`` or ``{refrain}``.  ``start_of_`` followed by an unrecognized
    type opens an :attr:`~SectionType.UNKNOWN` section.  End-of-section
    directives open nothing.
    """
    normalized = name.strip().lower().replace("_", "")

    if normalized.startswith("startof"):
        return SectionType.from_directive(normalized[len("startof"):])

    for prefix, section_type in _SHORTHAND_STARTS.items():
        if normalized.startswith(prefix):
            return section_type

    section_type = SectionType.from_directive(name)
    if section_type is not SectionType.UNKNOWN:
        return section_type
    return None
