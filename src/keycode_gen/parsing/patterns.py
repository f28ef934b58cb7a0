"""Compiled regex patterns and marker constants for the code-table source.

A table in the source document looks like:

    BEGIN_CODE_TABLE writing-system-table "Writing System Keys"
    CODE      Backquote   `~ on a US keyboard.
    CODE_OPT  IntlBackslash
    END_CODE_TABLE

Used by extract.py, parse.py and normalize.py.
"""

import re

# ─── Table Markers ────────────────────────────────────────────────────────────

BEGIN_TABLE_MARKER = "BEGIN_CODE_TABLE"
END_TABLE_MARKER = "END_CODE_TABLE"

# Non-greedy so consecutive tables never merge; group 1 is the table body
TABLE_BLOCK_RE = re.compile(rf"{BEGIN_TABLE_MARKER}([\w\W]+?){END_TABLE_MARKER}")


# ─── Header / Row Patterns ────────────────────────────────────────────────────

# Header right after BEGIN_CODE_TABLE, e.g. `numpad-section "Numpad Section"`
TABLE_HEADER_RE = re.compile(r'^\s*([\w-]+)\s+"([^"]+)"')

# Row markers.  Required and optional rows carry the same data.
ROW_MARKERS = ("CODE_OPT", "CODE")
ROW_MARKER_RE = re.compile(rf"\b(?:{'|'.join(ROW_MARKERS)})\b")

# A row body: the code token, then (optionally) whitespace and description text
ROW_RE = re.compile(r"^(\w+)(?:\s+([\w\W]*))?$")

# Any run of whitespace, including line breaks inside a description
WHITESPACE_RUN_RE = re.compile(r"\s+")


# ─── Description Markup ───────────────────────────────────────────────────────

# Inline markup tokens deleted from code descriptions
MARKUP_TOKENS = ("KEYCAP", "PHONETIC")

# Explicit line break inside a description; one comment line per segment
LINE_BREAK_MARKER = "<br/>"
