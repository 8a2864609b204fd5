"""Shared fixtures for parser tests."""
import pytest

import config


@pytest.fixture(autouse=True)
def restore_config():
    """Undo any runtime config changes a test makes."""
    saved = config.get_tunable_config()
    yield
    for key, value in saved.items():
        setattr(config, key, value)


@pytest.fixture
def write_file(tmp_path):
    """Write `content` to a file named `name` under tmp_path and return its path."""
    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def sample_json(write_file):
    return write_file("example.json", '{"name": "Ada", "tags": ["x", "y"], "active": true}')


@pytest.fixture
def sample_csv(write_file):
    return write_file("data.csv", "id,name,score\n1,Ada,95\n2,Bob,87\n")


@pytest.fixture
def sample_xml(write_file):
    return write_file(
        "config.xml",
        '<?xml version="1.0"?>\n<config version="2">\n  <item id="1">first</item>\n</config>\n',
    )


@pytest.fixture
def make_csv():
    """Build CSV text with a header line and `rows` data rows of `cols` columns."""
    def _make(rows: int, cols: int) -> str:
        header = ",".join(f"c{c}" for c in range(cols))
        lines = [header]
        for r in range(rows):
            lines.append(",".join(f"r{r}c{c}" for c in range(cols)))
        return "\n".join(lines) + "\n"
    return _make
