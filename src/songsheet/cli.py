import json
import logging
import sys
from dataclasses import asdict
from enum import Enum
from pathlib import Path

import click

from .chordpro import ChordProFormatter
from .exceptions import SourceReadError
from .logging_setup import setup_logging
from .models import ParsedDocument
from .parser import parse

logger = logging.getLogger(__name__)


def _read_source(source: str) -> str:
    """Return the text of *source*, a file path or ``-`` for stdin."""
    if source == "-":
        return click.get_text_stream("stdin").read()
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SourceReadError(source, "no such file") from exc
    except IsADirectoryError as exc:
        raise SourceReadError(source, "is a directory") from exc
    except UnicodeDecodeError as exc:
        raise SourceReadError(source, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise SourceReadError(source, exc.strerror or str(exc)) from exc


def _json_default(obj):
    if isinstance(obj, Enum):
        return obj.value if isinstance(obj.value, str) else obj.name.lower()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _to_json(doc: ParsedDocument) -> str:
    data = asdict(doc)
    for section, out in zip(doc.sections, data["sections"]):
        out["label"] = section.label
    return json.dumps(data, default=_json_default, indent=2, ensure_ascii=False) + "\n"


def _to_text(doc: ParsedDocument) -> str:
    body = doc.lyrics_only
    if doc.title:
        body = f"{doc.title}\n\n{body}" if body else doc.title
    return body + "\n" if body else ""


_RENDERERS = {
    "chordpro": lambda doc: ChordProFormatter().render(doc),
    "text": _to_text,
    "json": _to_json,
}


@click.command()
@click.argument("source")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Write to PATH instead of stdout.")
@click.option("--format", "output_format", type=click.Choice(sorted(_RENDERERS)),
              default="chordpro", show_default=True,
              help="Output format.")
@click.option("--debug", is_flag=True, default=False,
              help="Log parser decisions to stderr.")
def main(source: str, output_path: str | None, output_format: str, debug: bool) -> None:
    """Parse a ChordPro song sheet and print it normalised.

    \b
    SOURCE is a file path, or - to read from stdin.
    Formats:
      - chordpro  inline-chord ChordPro with explicit sections
      - text      lyrics only, one labelled block per section
      - json      the full parsed document
    """
    setup_logging(debug)

    # --- Read ---
    try:
        text = _read_source(source)
    except SourceReadError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    # --- Parse + render ---
    doc = parse(text)
    logger.info("Parsed %d sections (%d lines) from %s", len(doc.sections), doc.total_lines, source)
    rendered = _RENDERERS[output_format](doc)

    # --- Output ---
    if output_path is None:
        click.echo(rendered, nl=False)
        return

    dest = Path(output_path)
    dest.write_text(rendered, encoding="utf-8")
    click.echo(f"Written to {dest}")
