"""Dispatch a file to its format parser and print the rendered result."""
import logging
import sys
from dataclasses import dataclass
from enum import Enum

import config
from parsers import get_parser
from utils import file_exists, file_size, get_file_extension, read_file

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    FILE_NOT_FOUND = "file_not_found"
    UNKNOWN_FORMAT = "unknown_format"
    UNSUPPORTED_FORMAT = "unsupported_format"
    EMPTY_OR_UNREADABLE = "empty_or_unreadable"


class InspectionError(Exception):
    """A file was rejected before any parser ran."""
    kind: ErrorKind

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class MissingFileError(InspectionError):
    kind = ErrorKind.FILE_NOT_FOUND


class UnknownFormatError(InspectionError):
    kind = ErrorKind.UNKNOWN_FORMAT


class UnsupportedFormatError(InspectionError):
    kind = ErrorKind.UNSUPPORTED_FORMAT

    def __init__(self, message: str, path: str, extension: str):
        super().__init__(message, path)
        self.extension = extension


class EmptyOrUnreadableError(InspectionError):
    kind = ErrorKind.EMPTY_OR_UNREADABLE


@dataclass
class InspectionResult:
    path: str
    file_type: str
    size: int
    output: str
    ok: bool


def inspect_file(path: str) -> InspectionResult:
    """Run the checks, read the file and parse it, without printing.

    Raises an InspectionError subclass if the file is missing, has no
    extension, has an unsupported extension, or reads as empty. Grammar
    errors are not raised; they come back in `output` with ok=False.
    """
    if not file_exists(path):
        raise MissingFileError(f"File does not exist: {path}", path)

    extension = get_file_extension(path)
    if not extension:
        raise UnknownFormatError("Unable to determine file type from extension.", path)

    try:
        parser = get_parser(extension)
    except ValueError:
        raise UnsupportedFormatError(f"Unsupported file type: {extension}", path, extension)
    logger.debug("Dispatching %s to %s parser", path, parser.file_type)

    content = read_file(path)
    if not content:
        raise EmptyOrUnreadableError("Unable to read file or file is empty.", path)

    result = parser.parse(content)
    return InspectionResult(
        path=path,
        file_type=parser.file_type,
        size=file_size(path),
        output=result.text,
        ok=result.ok,
    )


class ParserHandler:
    """Parse files one at a time and print each result between banners."""

    def __init__(self, out=None, err=None):
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def _print(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.out)

    def parse_file(self, path: str) -> bool:
        """Return True once the file was parsed and printed (even if the parse failed)."""
        self._print(f"Processing file: {path}")
        try:
            result = inspect_file(path)
        except InspectionError as e:
            logger.warning("Rejected %s (%s): %s", path, e.kind.value, e)
            print(f"Error: {e}", file=self.err)
            return False

        if not result.ok:
            logger.info("%s reported a parse failure for %s", result.file_type, path)
        self._print(
            f"File read successfully. Size: {result.size} bytes",
            f"Parser type: {result.file_type}\n",
        )
        self.print_parsed_data(result.output, result.file_type)
        return True

    def print_parsed_data(self, data: str, file_type: str) -> None:
        rule = "=" * config.BANNER_WIDTH
        self._print(rule, f"PARSED {file_type} DATA", rule, data, rule)
