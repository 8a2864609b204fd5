"""Format parsers: each turns raw text into display text for one file format."""
from dataclasses import dataclass
from typing import Callable, Protocol

import config


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a parse: display text, either rendered data or an error line.

    Both cases are printed the same way; `ok` only records which one it is.
    """
    text: str
    ok: bool = True

    @classmethod
    def failure(cls, file_type: str, message: str) -> "ParseResult":
        return cls(text=f"{file_type} Parse Error: {message}", ok=False)


class Parser(Protocol):
    file_type: str

    def parse(self, content: str) -> ParseResult: ...


class RenderDepthError(RecursionError):
    """Raised when a document nests deeper than MAX_RENDER_DEPTH."""

    def __init__(self, limit: int):
        super().__init__(f"Maximum nesting depth of {limit} exceeded")
        self.limit = limit


def check_depth(depth: int) -> None:
    if depth > config.MAX_RENDER_DEPTH:
        raise RenderDepthError(config.MAX_RENDER_DEPTH)


def _json_parser() -> Parser:
    from parsers.json_parser import JSONParser
    return JSONParser()


def _csv_parser() -> Parser:
    from parsers.csv_parser import CSVParser
    return CSVParser()


def _xml_parser() -> Parser:
    from parsers.xml_parser import XMLParser
    return XMLParser()


_PARSER_FACTORIES: dict[str, Callable[[], Parser]] = {
    "json": _json_parser,
    "csv": _csv_parser,
    "xml": _xml_parser,
}


def supported_extensions() -> list[str]:
    """Extensions that are both implemented and enabled in config."""
    enabled = {fmt.lower() for fmt in config.SUPPORTED_FORMATS}
    return [ext for ext in _PARSER_FACTORIES if ext in enabled]


def get_parser(extension: str) -> Parser:
    """Return a new parser for a file extension (without the dot, any case)."""
    ext = extension.lower()
    if ext not in supported_extensions():
        raise ValueError(f"Unsupported file format: {extension}")
    return _PARSER_FACTORIES[ext]()
