"""
Document converter — CLI entry point.

Usage:
    python parser.py <file> [--output <output.json>] [--provider <name>]

Reads a source document (currently spreadsheet workbooks), converts it
into the format-agnostic document model, and writes the result as a
single JSON file.

If --provider is omitted, the provider is chosen from DEFAULT_PROVIDER or,
failing that, from the file extension.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import dotenv

dotenv.load_dotenv()

import constants  # noqa: E402  (reads the environment loaded above)
from dto.document import Document  # noqa: E402
from errors import ConversionError  # noqa: E402
from providers import DocumentProvider, get_provider, provider_for_filename  # noqa: E402

logging.basicConfig(
    level=constants.LOG_LEVEL,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
logger = logging.getLogger(__name__)


def _select_provider(file_path: str, provider_name: Optional[str]) -> DocumentProvider:
    name = provider_name or constants.DEFAULT_PROVIDER
    if name:
        return get_provider(name)
    return provider_for_filename(file_path)


def convert_file(file_path: str, provider_name: Optional[str] = None) -> Document:
    """Read *file_path* and convert it with the selected provider."""
    provider = _select_provider(file_path, provider_name)
    logger.info("Converting %s with provider '%s'", file_path, provider.name())

    data = Path(file_path).read_bytes()
    document = provider.parse_buffer(data)

    logger.info("  -> %d block(s)", len(document.blocks))
    return document


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert a document into the format-agnostic JSON document model.",
    )
    parser.add_argument(
        "input_file",
        help="Path to the document to convert (.xlsx, .xlsm, .xls, ...)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON file path (default: <input_name>_document.json)",
    )
    parser.add_argument(
        "-p",
        "--provider",
        default=None,
        help="Provider name (default: chosen by file extension)",
    )
    args = parser.parse_args(argv)

    input_path = args.input_file
    if not os.path.isfile(input_path):
        logger.error("File not found: %s", input_path)
        return 1

    if args.output:
        output_path = args.output
    else:
        output_path = f"{Path(input_path).stem}_document.json"

    try:
        document = convert_file(input_path, provider_name=args.provider)
    except (ConversionError, ValueError) as exc:
        logger.error("Conversion failed: %s", exc)
        return 1

    json_str = document.model_dump_json(indent=2)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(json_str)

    logger.info("Output written to %s", output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
