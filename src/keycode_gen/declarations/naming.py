"""Derive TypeScript type names from section ids.

``writing-system-table`` -> ``WritingSystemTableKeyCode``.  Word splitting
follows lodash's camelCase: breaks at non-alphanumerics, lower-to-upper case
changes, and letter/digit boundaries.
"""

import re

from keycode_gen.config import TYPE_SUFFIX
from keycode_gen.errors import TypeNameError

# Acronym before a capitalised word, capitalised/lowercase word, acronym, digits
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def split_words(text: str) -> list[str]:
    return _WORD_RE.findall(text)


def camel_case(text: str) -> str:
    """lodash-style camelCase: 'numpad-section' -> 'numpadSection'."""
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def upper_camel_case(text: str) -> str:
    camel = camel_case(text)
    return camel[:1].upper() + camel[1:]


def type_name_for(section_id: str) -> str:
    """Return the exported type name for a section id, e.g. 'FunctionSectionKeyCode'."""
    name = upper_camel_case(section_id) + TYPE_SUFFIX
    if not name.isidentifier():
        raise TypeNameError(f"Section id {section_id!r} does not yield a usable type name ({name!r})")
    return name
