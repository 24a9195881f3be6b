"""Convert a markdown file to Block Kit JSON.

Usage:
    python -m mdblocks [input.md] [--level DEBUG] [--indent 2]

    Reads stdin when no file (or "-") is given. Task list prefixes and the
    default log level come from MDBLOCKS_* environment variables.
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from mdblocks import markdown_to_blocks
from mdblocks.config import get_settings
from mdblocks.exceptions import InputReadError
from mdblocks.logging_config import configure_logging
from mdblocks.models import blocks_to_json


def read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(source, str(e)) from e


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(prog="mdblocks", description="Convert markdown to Block Kit blocks")
    parser.add_argument("input", nargs="?", default="-", help="Markdown file (default: stdin)")
    parser.add_argument("--level", default=settings.log_level, help="Log level (default: %(default)s)")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: %(default)s)")
    args = parser.parse_args(argv)

    configure_logging(args.level)

    try:
        body = read_input(args.input)
    except InputReadError as e:
        logger.error(str(e))
        return 1

    blocks = markdown_to_blocks(body, settings.parsing_options())
    logger.info(f"Converted {args.input} into {len(blocks)} blocks")
    print(blocks_to_json(blocks, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
