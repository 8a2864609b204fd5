"""Interactive and batch front end for the file parser."""
import argparse
import sys

import config
from handler import ParserHandler
from logging_config import setup_logging
from parsers import supported_extensions

QUIT_COMMANDS = ("quit", "q")
FIRST_PROMPT = "Enter file path to parse (or 'quit' to exit): "
NEXT_PROMPT = "Enter another file path (or 'quit' to exit): "


def interactive(handler: ParserHandler | None = None) -> None:
    handler = handler or ParserHandler()
    formats = ", ".join(ext.upper() for ext in supported_extensions())
    print("=== Multi-Format File Parser ===")
    print(f"Supported formats: {formats}\n")

    prompt = FIRST_PROMPT
    while True:
        try:
            path = input(prompt).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if path in QUIT_COMMANDS:
            break

        if path:
            print()
            if handler.parse_file(path):
                print("\nFile parsed successfully!")
            else:
                print("\nFailed to parse file.")
        prompt = "\n" + NEXT_PROMPT

    print("Parser application terminated.")


def run_batch(paths: list[str], handler: ParserHandler | None = None) -> int:
    """Parse each path once; return 1 if any file was rejected, else 0."""
    handler = handler or ParserHandler()
    failed = 0
    for path in paths:
        if not handler.parse_file(path):
            failed += 1
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print JSON, CSV and XML files in a readable form.")
    parser.add_argument("files", nargs="*", help="Files to parse; omit to enter paths interactively.")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level (default: %(default)s).")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    if args.files:
        return run_batch(args.files)
    interactive()
    return 0


if __name__ == "__main__":
    sys.exit(main())
