import logging
import os


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    # Allow env override, e.g. SONGSHEET_LOG_LEVEL=info; unknown names are ignored
    level_name = os.getenv("SONGSHEET_LOG_LEVEL")
    if level_name:
        named = logging.getLevelName(level_name.strip().upper())
        if isinstance(named, int):
            level = named

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
