"""
Build pipeline: UI Events code tables -> TypeScript declaration file.

Reads the code-table source document, then:
  1. parse      -- extract BEGIN_CODE_TABLE blocks and parse them into sections
  2. normalize  -- decode entities and strip markup from code descriptions
  3. build      -- map sections onto union type aliases plus the KeyCode aggregate
  4. render     -- print the aliases as TypeScript using the .prettierrc style

The output file is written only after every step has succeeded.

Usage:
  python -m keycode_gen.build [--source PATH] [--style PATH] [--output PATH]
"""

import argparse
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from keycode_gen.config import OUTPUT_FILE, SOURCE_FILE, STYLE_FILE
from keycode_gen.declarations.render import render_declarations
from keycode_gen.declarations.style import StyleConfig, load_style_config
from keycode_gen.declarations.tree import build_declarations
from keycode_gen.errors import KeyCodeSpecError
from keycode_gen.parsing.normalize import normalize_sections
from keycode_gen.parsing.parse import parse_document

logger = logging.getLogger(__name__)


def load_document(filepath: Path) -> str:
    """Read the code-table source document from disk."""
    logger.info("Loading code tables from %s", filepath)
    with open(filepath, "r", encoding="utf-8") as fopen:
        return fopen.read()


def generate(document: str, style: StyleConfig) -> str:
    """Run the full pipeline on an in-memory document and return the formatted declarations."""
    sections = parse_document(document)
    sections = normalize_sections(sections)
    declarations = build_declarations(sections)
    return render_declarations(declarations, style)


def save_output(text: str, filepath: Path) -> None:
    # newline="" so the style's endOfLine is written as-is
    with open(filepath, "w", encoding="utf-8", newline="") as fopen:
        fopen.write(text)
    logger.info("Wrote %s", filepath)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate TypeScript KeyCode types from UI Events code tables.")
    parser.add_argument("--source", type=Path, default=SOURCE_FILE, help="code-table source document")
    parser.add_argument("--style", type=Path, default=STYLE_FILE, help="prettier-style JSON config")
    parser.add_argument("--output", type=Path, default=OUTPUT_FILE, help="declaration file to write")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Generate the declaration file; exits non-zero without writing anything on malformed input."""
    args = parse_args(argv)
    document = load_document(args.source)

    try:
        style = load_style_config(args.style)
        output = generate(document, style)
    except (KeyCodeSpecError, ValidationError, json.JSONDecodeError) as err:
        logger.error("Generation failed: %s", err)
        raise SystemExit(1) from err

    save_output(output, args.output)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    main()
