"""Split the source document into raw table blocks."""

import logging

from keycode_gen.errors import StructuralError
from keycode_gen.parsing.patterns import BEGIN_TABLE_MARKER, TABLE_BLOCK_RE

logger = logging.getLogger(__name__)


def extract_tables(document: str) -> list[str]:
    """Return the text between each BEGIN_CODE_TABLE and its END_CODE_TABLE, in document order.

    Raises StructuralError if the document holds no tables at all.
    """
    tables = [match.group(1) for match in TABLE_BLOCK_RE.finditer(document)]
    if not tables:
        raise StructuralError(f"No {BEGIN_TABLE_MARKER} blocks found in document")

    logger.info("Extracted %d code tables", len(tables))
    return tables
