import json

from click.testing import CliRunner

from songsheet.cli import main

SONG = "{title: Dark Star}\n{artist: Grateful Dead}\n[A]  [G]\nDark star crashes\n"


def _write(tmp_path, text=SONG):
    path = tmp_path / "song.cho"
    path.write_text(text, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# --help
# ---------------------------------------------------------------------------


def test_help_output():
    result = CliRunner().invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Parse a ChordPro song sheet" in result.output


# ---------------------------------------------------------------------------
# Formats
# ---------------------------------------------------------------------------


def test_default_format_is_chordpro(tmp_path):
    result = CliRunner().invoke(main, [str(_write(tmp_path))])
    assert result.exit_code == 0
    assert "{title: Dark Star}" in result.output
    assert "{start_of_verse: Verse 1}" in result.output
    assert "[A]Da[G]rk star crashes" in result.output


def test_text_format(tmp_path):
    result = CliRunner().invoke(main, ["--format", "text", str(_write(tmp_path))])
    assert result.exit_code == 0
    assert result.output == "Dark Star\n\nVerse 1\nDark star crashes\n"


def test_json_format(tmp_path):
    result = CliRunner().invoke(main, ["--format", "json", str(_write(tmp_path))])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["title"] == "Dark Star"
    assert data["sections"][0]["type"] == "verse"
    assert data["sections"][0]["label"] == "Verse 1"
    assert data["sections"][0]["lines"][0]["segments"][0] == {"text": "Da", "chord": "A", "position": 0}


def test_stdin_source():
    result = CliRunner().invoke(main, ["--format", "text", "-"], input="hello\n")
    assert result.exit_code == 0
    assert result.output == "Verse 1\nhello\n"


# ---------------------------------------------------------------------------
# File output
# ---------------------------------------------------------------------------


def test_output_file_written(tmp_path):
    out_file = tmp_path / "out.cho"
    result = CliRunner().invoke(main, ["-o", str(out_file), str(_write(tmp_path))])
    assert result.exit_code == 0
    assert "Written to" in result.output
    assert "{title: Dark Star}" in out_file.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


def test_missing_file_exits_nonzero(tmp_path):
    result = CliRunner().invoke(main, [str(tmp_path / "nope.cho")])
    assert result.exit_code != 0
    assert "Error" in result.output
    assert "no such file" in result.output


def test_undecodable_file_exits_nonzero(tmp_path):
    path = tmp_path / "bad.cho"
    path.write_bytes(b"\xff\xfe\xfa")
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code != 0
    assert "not valid UTF-8" in result.output
