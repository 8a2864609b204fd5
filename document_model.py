"""In-memory document trees handed from the format grammars to the renderers.

Each format owns its own tree shape; there is no shared base type:

    JSON -> JsonValue (plain Python values, dict order is authoritative)
    XML  -> XmlElement / XmlText / XmlComment
    CSV  -> CsvTable (lazy view over the grammar's DataFrame)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

import pandas as pd

JsonValue = Union[None, bool, int, float, str, list, dict]


def json_type(value: JsonValue) -> str:
    """Return the JSON type tag of a parsed value."""
    if value is None:
        return "null"
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


@dataclass
class XmlText:
    content: str


@dataclass
class XmlComment:
    content: str


@dataclass
class XmlElement:
    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[XmlNode] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Direct text of the element: its leading text child, if not blank."""
        if self.children and isinstance(self.children[0], XmlText):
            content = self.children[0].content
            if content.strip():
                return content
        return ""

    def element_children(self) -> Iterator[XmlElement]:
        for child in self.children:
            if isinstance(child, XmlElement):
                yield child


XmlNode = Union[XmlElement, XmlText, XmlComment]


class CellUnavailableError(IndexError):
    """Raised when a CSV cell is out of range or not readable as text."""


class CsvTable:
    """Rectangular view over a parsed CSV document.

    Cells are read from the underlying DataFrame on demand; nothing is copied.
    """

    def __init__(self, frame: pd.DataFrame):
        self._frame = frame

    @property
    def rows(self) -> int:
        return len(self._frame.index)

    @property
    def columns(self) -> int:
        return len(self._frame.columns)

    @property
    def column_names(self) -> list[str]:
        return [str(c) for c in self._frame.columns]

    def cell(self, row: int, col: int) -> str:
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            raise CellUnavailableError(f"Cell ({row}, {col}) is out of range")
        value = self._frame.iat[row, col]
        if not isinstance(value, str):
            raise CellUnavailableError(f"Cell ({row}, {col}) has no text value")
        return value
