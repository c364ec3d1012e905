from .models import ParsedDocument, Section
from .parsing.sections import SectionAccumulator


def parse(text: str) -> ParsedDocument:
    """Parse ChordPro-style song text into a :class:`~songsheet.models.ParsedDocument`.

    Never raises: malformed directives, brackets and metadata values degrade
    to plain text or are ignored.  Any newline convention is accepted.
    """
    acc = SectionAccumulator()
    sections: list[Section] = []

    for raw in text.splitlines():
        section = acc.feed(raw)
        if section is not None:
            sections.append(section)

    last = acc.finish()
    if last is not None:
        sections.append(last)

    return ParsedDocument(**acc.metadata.fields(), sections=tuple(sections), raw_text=text)
