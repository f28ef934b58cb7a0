"""Parse raw table blocks into Section models.

A block is everything between BEGIN_CODE_TABLE and END_CODE_TABLE: a header
(`<id> "<description>"`) followed by rows, each introduced by CODE or
CODE_OPT.  Any row or header that does not fit is a fatal error.
"""

import logging

from keycode_gen.errors import HeaderParseError, RowParseError
from keycode_gen.parsing.extract import extract_tables
from keycode_gen.parsing.patterns import ROW_MARKER_RE, ROW_RE, TABLE_HEADER_RE, WHITESPACE_RUN_RE
from keycode_gen.parsing.schema import CodeEntry, Section

logger = logging.getLogger(__name__)


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run (line breaks included) to one space and trim."""
    return WHITESPACE_RUN_RE.sub(" ", text).strip()


def parse_row(row: str) -> CodeEntry:
    """Parse the text following a row marker into a CodeEntry."""
    match = ROW_RE.match(row.strip())
    if not match:
        raise RowParseError(f"Malformed code row: {row.strip()[:60]!r}")
    code, raw_description = match.groups()
    description = collapse_whitespace(raw_description or "")
    # Empty collapses to None, never ""
    return CodeEntry(code=code, description=description or None)


def parse_table(block: str) -> Section:
    """Parse one table block into a Section."""
    header = TABLE_HEADER_RE.match(block)
    if not header:
        raise HeaderParseError(f"Malformed table header: {block.strip()[:60]!r}")
    section_id, description = header.groups()

    # re.split leaves the text before the first marker in chunks[0]
    chunks = ROW_MARKER_RE.split(block[header.end() :])
    if chunks[0].strip():
        raise RowParseError(f"Unexpected text before first row in {section_id!r}: {chunks[0].strip()[:60]!r}")

    codes = []
    for row in chunks[1:]:
        try:
            codes.append(parse_row(row))
        except RowParseError as err:
            raise RowParseError(f"{section_id}: {err}") from err

    logger.debug("Parsed section %s with %d codes", section_id, len(codes))
    return Section(id=section_id, description=description, codes=tuple(codes))


def parse_document(document: str) -> list[Section]:
    """Extract every table in the document and parse each into a Section, in order."""
    sections = [parse_table(block) for block in extract_tables(document)]
    logger.info(
        "Parsed %d sections (%d codes)",
        len(sections),
        sum(len(section.codes) for section in sections),
    )
    return sections
