import os
from dotenv import load_dotenv

# Load environment variables from .env file (explicit path so it is found from any cwd)
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), ".env"))

_PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

# Formats the dispatcher will accept (subset of json, csv, xml)
SUPPORTED_FORMATS = [
    fmt.strip().lower()
    for fmt in os.getenv("SUPPORTED_FORMATS", "json,csv,xml").split(",")
    if fmt.strip()
]
FILE_ENCODING = os.getenv("FILE_ENCODING", "utf-8")

# Rendering
INDENT_WIDTH = int(os.getenv("INDENT_WIDTH", "2"))
MAX_RENDER_DEPTH = int(os.getenv("MAX_RENDER_DEPTH", "200"))
BANNER_WIDTH = int(os.getenv("BANNER_WIDTH", "60"))

# CSV summary truncation
CSV_MAX_ROWS = int(os.getenv("CSV_MAX_ROWS", "10"))
CSV_MAX_COLUMNS = int(os.getenv("CSV_MAX_COLUMNS", "5"))
CSV_SEPARATOR = os.getenv("CSV_SEPARATOR", ",")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

# CORS
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:8000",
    ).split(",")
    if origin.strip()
]

# --- Config persistence ---
CONFIG_FILE = os.path.join(_PROJECT_ROOT, "config.json")

_TUNABLE_KEYS = [
    "SUPPORTED_FORMATS", "FILE_ENCODING",
    "INDENT_WIDTH", "MAX_RENDER_DEPTH", "BANNER_WIDTH",
    "CSV_MAX_ROWS", "CSV_MAX_COLUMNS", "CSV_SEPARATOR",
]

import codecs as _codecs
import json as _json


def get_tunable_config() -> dict:
    this = __import__(__name__)
    return {key: getattr(this, key) for key in _TUNABLE_KEYS}


def apply_config(updates: dict) -> None:
    this = __import__(__name__)
    tunable = get_tunable_config()
    for key, value in updates.items():
        if key not in tunable:
            raise ValueError(f"Unknown config key: {key}")
        expected_type = type(tunable[key])
        if not isinstance(value, expected_type) or (
            expected_type is int and isinstance(value, bool)
        ):
            raise TypeError(
                f"Invalid type for {key}: expected {expected_type.__name__}, "
                f"got {type(value).__name__}"
            )
        if expected_type is int and value < 1:
            raise ValueError(f"{key} must be a positive integer")
        if expected_type is list and not all(isinstance(item, str) for item in value):
            raise TypeError(f"Invalid type for {key}: expected a list of str")
        if key == "FILE_ENCODING":
            try:
                _codecs.lookup(value)
            except LookupError:
                raise ValueError(f"Unknown encoding for {key}: {value}")
        setattr(this, key, value)


def save_config(path: str = CONFIG_FILE) -> None:
    with open(path, "w") as f:
        _json.dump(get_tunable_config(), f, indent=2)


def load_config(path: str = CONFIG_FILE) -> dict:
    with open(path) as f:
        data = _json.load(f)
    apply_config(data)
    return data
