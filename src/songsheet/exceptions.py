class SongsheetError(Exception):
    """Base exception for songsheet."""


class SourceReadError(SongsheetError):
    """Raised when a song source file cannot be read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")
