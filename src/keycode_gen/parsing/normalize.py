"""Turn raw code descriptions into clean display text.

Character references (``&amp;``, ``&#xE9;``, ...) are decoded and the inline
KEYCAP / PHONETIC markup tokens are deleted.  Only per-code descriptions are
normalized; section descriptions are used verbatim.
"""

import html
import logging

from keycode_gen.parsing.patterns import MARKUP_TOKENS, WHITESPACE_RUN_RE
from keycode_gen.parsing.schema import Section

logger = logging.getLogger(__name__)


def normalize_description(text: str) -> str:
    """Decode character references, then delete markup tokens (their surrounding text is kept).

    Whitespace decoded from references such as ``&#10;`` is collapsed to a
    single space so the result always fits on one comment line.
    """
    decoded = WHITESPACE_RUN_RE.sub(" ", html.unescape(text))
    for token in MARKUP_TOKENS:
        decoded = decoded.replace(token, "")
    return decoded


def normalize_section(section: Section) -> Section:
    """Return a copy of *section* with every code description normalized."""
    codes = tuple(
        entry.model_copy(update={"description": normalize_description(entry.description).strip() or None})
        if entry.description is not None
        else entry
        for entry in section.codes
    )
    return section.model_copy(update={"codes": codes})


def normalize_sections(sections: list[Section]) -> list[Section]:
    """Normalize the code descriptions of every section, preserving order."""
    normalized = [normalize_section(section) for section in sections]
    logger.debug("Normalized descriptions in %d sections", len(normalized))
    return normalized
