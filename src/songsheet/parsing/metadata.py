import logging
import re

logger = logging.getLogger(__name__)

# Directive name (lower-cased) -> ParsedDocument field.
_ALIASES = {
    "title": "title",
    "t": "title",
    "subtitle": "subtitle",
    "st": "subtitle",
    "artist": "artist",
    "a": "artist",
    "album": "album",
    "key": "key",
    "k": "key",
    "original_key": "original_key",
    "originalkey": "original_key",
    "tempo": "tempo",
    "time": "time_signature",
    "time_signature": "time_signature",
    "timesignature": "time_signature",
    "capo": "capo",
    "year": "year",
    "copyright": "copyright",
    "ccli": "ccli_id",
    "ccli_number": "ccli_id",
    "cclinumber": "ccli_id",
    "composer": "composer",
    "lyricist": "lyricist",
    "arranger": "arranger",
}

_INT_FIELDS = {"tempo", "capo", "year"}

_INT_RE = re.compile(r"[+-]?[0-9]+")


class MetadataAccumulator:
    """Collects song metadata from directives while a document is scanned.

    The last directive for a field wins.  Unknown names and non-numeric values
    for integer fields are ignored.
    """

    def __init__(self) -> None:
        self._values: dict[str, str | int] = {}

    def set(self, name: str, value: str) -> None:
        directive = name.strip().lower()
        value = value.strip()

        if directive == "meta":
            # {meta: artist John Newton}
            meta_name, _, meta_value = value.partition(" ")
            if meta_name:
                self.set(meta_name, meta_value)
            return

        field_name = _ALIASES.get(directive)
        if field_name is None:
            logger.debug("Ignoring unknown directive %r", name)
            return

        if field_name in _INT_FIELDS:
            if not _INT_RE.fullmatch(value):
                logger.debug("Ignoring non-numeric %s value %r", field_name, value)
                return
            self._values[field_name] = int(value)
        else:
            self._values[field_name] = value

    def get(self, field_name: str) -> str | int | None:
        return self._values.get(field_name)

    def fields(self) -> dict[str, str | int]:
        """Return the collected values keyed by ParsedDocument field name."""
        return dict(self._values)
