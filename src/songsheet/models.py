from dataclasses import dataclass, field
from enum import Enum, auto

# Section types numbered from their second occurrence ("Chorus 2").
_NUMBERED_FROM_SECOND = {"chorus", "bridge", "prechorus"}


class SectionType(Enum):
    VERSE = "verse"
    CHORUS = "chorus"
    BRIDGE = "bridge"
    PRECHORUS = "prechorus"
    INSTRUMENTAL = "instrumental"
    INTRO = "intro"
    OUTRO = "outro"
    INTERLUDE = "interlude"
    TAG = "tag"
    VAMP = "vamp"
    CODA = "coda"
    SOLO = "solo"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        if self is SectionType.PRECHORUS:
            return "Pre-Chorus"
        return self.value.capitalize()

    @classmethod
    def from_directive(cls, name: str) -> "SectionType":
        """Resolve a directive stem such as ``"v"``, ``"Pre-Chorus"`` or ``"refrain"``.

        Case, underscores, hyphens and spaces are ignored.  Names that match no
        alias resolve to :attr:`UNKNOWN`.
        """
        key = name.lower().strip()
        for ch in "_- ":
            key = key.replace(ch, "")
        return _SECTION_ALIASES.get(key, cls.UNKNOWN)


_SECTION_ALIASES = {
    **{t.value: t for t in SectionType if t is not SectionType.UNKNOWN},
    "v": SectionType.VERSE,
    "c": SectionType.CHORUS,
    "refrain": SectionType.CHORUS,
    "b": SectionType.BRIDGE,
    "pc": SectionType.PRECHORUS,
    "inst": SectionType.INSTRUMENTAL,
}


class LineKind(Enum):
    LYRICS = auto()  # text, with or without inline chords
    CHORDS_ONLY = auto()  # chords over blank space: [G]  [C]
    BLANK = auto()
    COMMENT = auto()  # "# ..." lines and {comment: ...} directives


@dataclass(frozen=True)
class LineSegment:
    """A run of text with an optional chord attached to its first character.

    ``position`` is the offset of ``text`` within the chord-free text of the
    owning line.
    """

    text: str
    chord: str | None = None
    position: int = 0

    @property
    def has_chord(self) -> bool:
        return self.chord is not None


@dataclass(frozen=True)
class Line:
    """One visual row of a song.

    Example: ``Ama[G]zing grace`` becomes two segments, ``("Ama", None, 0)``
    and ``("zing grace", "G", 3)``.
    """

    segments: tuple[LineSegment, ...] = ()
    kind: LineKind = LineKind.LYRICS
    raw: str | None = field(default=None, compare=False)  # source text, diagnostics only

    @property
    def text(self) -> str:
        return "".join(seg.text for seg in self.segments)

    @property
    def chords(self) -> list[str]:
        return [seg.chord for seg in self.segments if seg.chord is not None]

    @property
    def has_chords(self) -> bool:
        return any(seg.has_chord for seg in self.segments)

    @classmethod
    def blank(cls) -> "Line":
        return cls(kind=LineKind.BLANK, raw="")

    @classmethod
    def comment(cls, text: str, raw: str | None = None) -> "Line":
        return cls(segments=(LineSegment(text=text),), kind=LineKind.COMMENT, raw=raw)


@dataclass(frozen=True)
class Section:
    """A block of lines sharing one role (verse, chorus, bridge, etc.)."""

    type: SectionType
    lines: tuple[Line, ...] = ()
    index: int = 1  # 1-based occurrence count of this type within the document

    @property
    def label(self) -> str:
        """Human label, e.g. ``"Verse 1"``, ``"Chorus"``, ``"Chorus 2"``, ``"Intro"``.

        Verses are always numbered; choruses, bridges and pre-choruses only
        from their second occurrence; every other type never.
        """
        name = self.type.display_name
        numbered = self.type is SectionType.VERSE or (
            self.type.value in _NUMBERED_FROM_SECOND and self.index > 1
        )
        return f"{name} {self.index}" if numbered else name

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)

    @property
    def chords(self) -> list[str]:
        return [chord for line in self.lines for chord in line.chords]

    @property
    def unique_chords(self) -> set[str]:
        return set(self.chords)

    @property
    def has_chords(self) -> bool:
        return any(line.has_chords for line in self.lines)


@dataclass(frozen=True)
class ParsedDocument:
    """Canonical, immutable result of parsing one song."""

    title: str | None = None
    subtitle: str | None = None
    artist: str | None = None
    album: str | None = None
    key: str | None = None
    original_key: str | None = None
    tempo: int | None = None  # BPM
    time_signature: str | None = None  # e.g. "3/4"
    capo: int | None = None
    year: int | None = None
    copyright: str | None = None
    ccli_id: str | None = None
    composer: str | None = None
    lyricist: str | None = None
    arranger: str | None = None
    sections: tuple[Section, ...] = ()
    raw_text: str = ""

    @property
    def all_chords(self) -> list[str]:
        return [chord for section in self.sections for chord in section.chords]

    @property
    def unique_chords(self) -> set[str]:
        return set(self.all_chords)

    def sections_of_type(self, section_type: SectionType) -> list[Section]:
        return [s for s in self.sections if s.type is section_type]

    @property
    def verses(self) -> list[Section]:
        return self.sections_of_type(SectionType.VERSE)

    @property
    def choruses(self) -> list[Section]:
        return self.sections_of_type(SectionType.CHORUS)

    @property
    def bridges(self) -> list[Section]:
        return self.sections_of_type(SectionType.BRIDGE)

    @property
    def has_chords(self) -> bool:
        return any(s.has_chords for s in self.sections)

    @property
    def total_lines(self) -> int:
        return sum(len(s.lines) for s in self.sections)

    @property
    def lyrics_only(self) -> str:
        """Chord-free text, each section introduced by its label."""
        return "\n\n".join(f"{s.label}\n{s.text}" for s in self.sections)
