"""File-system helpers shared by the handler and the API."""
import logging
from pathlib import Path

import config

logger = logging.getLogger(__name__)


def file_exists(path: str) -> bool:
    """True if `path` names an existing regular file."""
    return Path(path).is_file()


def get_file_extension(path: str) -> str:
    """Return the text after the last '.' in `path`, or "" if there is none.

    This works on the raw path string, so "archive.d/data" yields "d/data"
    and the dispatcher rejects it as an unsupported format.
    """
    _, dot, ext = path.rpartition(".")
    return ext if dot else ""


def file_size(path: str) -> int:
    """Size of the file on disk in bytes."""
    return Path(path).stat().st_size


def read_file(path: str) -> str:
    """Read the whole file as text.

    Returns "" when the file cannot be opened or decoded, so callers see an
    unreadable file the same way as an empty one. The cause is logged.
    """
    try:
        with Path(path).open("r", encoding=config.FILE_ENCODING) as f:
            return f.read()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        # LookupError: FILE_ENCODING names no known codec
        logger.warning("Could not read %s: %s", path, e)
        return ""
