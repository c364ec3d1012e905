from songsheet.models import Line, LineKind, LineSegment
from songsheet.parsing.lines import tokenize_line
from songsheet.parsing.merge import merge_chord_line


def _merge(chords: str, lyrics: str) -> Line:
    return merge_chord_line(tokenize_line(chords), tokenize_line(lyrics))


def _triples(line):
    return [(s.text, s.chord, s.position) for s in line.segments]


# ---------------------------------------------------------------------------
# merge_chord_line
# ---------------------------------------------------------------------------


def test_merge_reference_example():
    merged = _merge("[G]  [C]", "Hello there")
    assert _triples(merged) == [("He", "G", 0), ("llo there", "C", 2)]
    assert merged.text == "Hello there"
    assert merged.kind == LineKind.LYRICS


def test_merge_leading_plain_text():
    merged = _merge("[D]", "I pulled")
    assert _triples(merged) == [("I pulled", "D", 0)]

    chords = Line(segments=(LineSegment("", "D", 2),), kind=LineKind.CHORDS_ONLY)
    merged = merge_chord_line(chords, tokenize_line("I pulled"))
    assert _triples(merged) == [("I ", None, 0), ("pulled", "D", 2)]


def test_merge_chords_past_end_are_trailing():
    merged = _merge("[G]        [C]   [D]", "Short")
    assert _triples(merged) == [("Short", "G", 0), ("", "C", 5), ("", "D", 5)]
    assert merged.text == "Short"


def test_merge_three_chords():
    merged = _merge("[G]  [C]  [D]", "Amazing grace how sweet")
    assert merged.chords == ["G", "C", "D"]
    assert _triples(merged) == [("Am", "G", 0), ("az", "C", 2), ("ing grace how sweet", "D", 4)]


def test_merge_uses_chord_free_lyric_text():
    merged = _merge("[G]", "Ama[D]zing")
    assert merged.text == "Amazing"
    assert merged.chords == ["G"]


def test_merge_without_chords_returns_lyrics_unchanged():
    lyrics = tokenize_line("Some lyrics here")
    assert merge_chord_line(Line(kind=LineKind.CHORDS_ONLY), lyrics) is lyrics


def test_merge_keeps_lyric_raw_text():
    merged = _merge("[G]", "Hello")
    assert merged.raw == "Hello"


def test_merge_preserves_unicode_lyrics():
    merged = _merge("[G]   [D]", "café au lait")
    assert merged.text == "café au lait"
    assert _triples(merged)[1] == ("é au lait", "D", 3)


def test_merge_positions_non_decreasing():
    merged = _merge("[A] [B]      [C]  [D]", "one two three four five")
    positions = [s.position for s in merged.segments]
    assert positions == sorted(positions)
    assert merged.text == "one two three four five"
