"""Errors raised while reading the code-table source document.

Every error is fatal: the source is hand-maintained, so any deviation is a
defect to fix upstream rather than something to recover from.
"""


class KeyCodeSpecError(ValueError):
    """Base class for malformed-input errors."""


class StructuralError(KeyCodeSpecError):
    """The document contains no BEGIN_CODE_TABLE / END_CODE_TABLE blocks."""


class HeaderParseError(KeyCodeSpecError):
    """A table block does not open with `<id> "<description>"`."""


class RowParseError(KeyCodeSpecError):
    """A table row does not match `<code> <description>`."""


class NameCollisionError(KeyCodeSpecError):
    """Two sections (or a section and the aggregate) derive the same type name."""


class TypeNameError(KeyCodeSpecError):
    """A section id does not yield a valid TypeScript identifier."""
