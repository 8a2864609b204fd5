"""CSV parser — summarizes a table: counts, header and a bounded sample."""
import logging
import warnings
from io import StringIO

import pandas as pd

import config
from document_model import CellUnavailableError, CsvTable
from parsers import ParseResult

logger = logging.getLogger(__name__)

CELL_UNAVAILABLE = "[N/A]"


def load_csv(content: str) -> CsvTable:
    """Parse CSV text; the first line is the header, every cell is kept as text.

    Cells stay positional: a first data row with more fields than the header
    keeps its leading cells instead of becoming an index column.
    """
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", pd.errors.ParserWarning)
        frame = pd.read_csv(
            StringIO(content),
            sep=config.CSV_SEPARATOR,
            dtype=str,
            keep_default_na=False,
            index_col=False,
        )
    for warning in caught:
        logger.warning("CSV: %s", warning.message)
    return CsvTable(frame)


def _format_row(table: CsvTable, row: int, max_cols: int) -> str:
    cells = []
    for col in range(min(table.columns, max_cols)):
        try:
            cells.append(f"[{table.cell(row, col)}]")
        except CellUnavailableError:
            cells.append(CELL_UNAVAILABLE)
    line = f"Row {row + 1:>3}: " + " | ".join(cells)
    if table.columns > max_cols:
        line += f" ... (+{table.columns - max_cols} more cols)"
    return line


def render_csv(table: CsvTable) -> str:
    """Render a summary of at most CSV_MAX_ROWS rows by CSV_MAX_COLUMNS columns."""
    max_rows = config.CSV_MAX_ROWS
    max_cols = config.CSV_MAX_COLUMNS

    text = "CSV Data Summary:\n"
    text += "================\n"
    text += f"Rows: {table.rows}, Columns: {table.columns}\n\n"

    names = table.column_names
    if names:
        text += f"Columns: {', '.join(names)}\n\n"

    shown = min(table.rows, max_rows)
    text += f"Sample Data (first {shown} rows):\n"
    text += "-" * 50 + "\n"
    for row in range(shown):
        text += _format_row(table, row, max_cols) + "\n"

    if table.rows > shown:
        text += f"... (+{table.rows - shown} more rows)\n"
    return text


class CSVParser:
    """Parse CSV text into a table summary, reporting grammar errors as text."""

    file_type = "CSV"

    def parse(self, content: str) -> ParseResult:
        try:
            table = load_csv(content)
        except (ValueError, pd.errors.ParserError) as e:
            # EmptyDataError and ParserError both land here
            logger.warning("CSV parse failed: %s", e)
            return ParseResult.failure(self.file_type, str(e).strip())
        return ParseResult(render_csv(table))
