"""JSON parser — renders a JSON document as an indented tree."""
import json
import logging

import config
from document_model import JsonValue, json_type
from parsers import ParseResult, check_depth

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def load_json(content: str) -> JsonValue:
    """Parse JSON text strictly (NaN/Infinity are rejected).

    A leading byte order mark is ignored.
    """
    if content.startswith("\ufeff"):
        content = content[1:]
    return json.loads(content, parse_constant=_reject_constant)


def render_json(value: JsonValue, indent: int = 0) -> str:
    """Render a JSON value with INDENT_WIDTH spaces per nesting level.

    Strings are written between quotes without escaping; the output is for
    reading, not for feeding back into a JSON parser.
    """
    check_depth(indent)
    kind = json_type(value)
    pad = " " * (indent * config.INDENT_WIDTH)
    inner = " " * ((indent + 1) * config.INDENT_WIDTH)

    if kind == "object":
        if not value:
            return "{\n}"
        entries = [
            f'{inner}"{key}": {render_json(item, indent + 1)}'
            for key, item in value.items()
        ]
        return "{\n" + ",\n".join(entries) + "\n" + pad + "}"
    if kind == "array":
        if not value:
            return "[\n]"
        items = [inner + render_json(item, indent + 1) for item in value]
        return "[\n" + ",\n".join(items) + "\n" + pad + "]"
    if kind == "string":
        return f'"{value}"'
    if kind == "bool":
        return "true" if value else "false"
    if kind == "null":
        return "null"
    return repr(value) if isinstance(value, float) else str(value)


class JSONParser:
    """Parse JSON text and render it, reporting grammar errors as text."""

    file_type = "JSON"

    def parse(self, content: str) -> ParseResult:
        try:
            value = load_json(content)
        except (ValueError, RecursionError) as e:
            # JSONDecodeError is a ValueError
            logger.warning("JSON parse failed: %s", e)
            return ParseResult.failure(self.file_type, str(e))
        try:
            return ParseResult(render_json(value))
        except RecursionError as e:
            # RenderDepthError, or the interpreter limit on very deep input
            logger.warning("JSON render stopped: %s", e)
            return ParseResult(text=f"JSON Render Error: {e}", ok=False)
