"""Declaration tree built from parsed sections.

Each node owns its documentation: a TypeAlias carries its block comment and
each LiteralMember carries its line comments, so reordering sections can
never misattach a comment.
"""

import logging
from collections import defaultdict

from pydantic import BaseModel, ConfigDict

from keycode_gen.config import AGGREGATE_TYPE_NAME
from keycode_gen.declarations.naming import type_name_for
from keycode_gen.errors import NameCollisionError
from keycode_gen.parsing.patterns import LINE_BREAK_MARKER
from keycode_gen.parsing.schema import Section

logger = logging.getLogger(__name__)


class LiteralMember(BaseModel):
    """A string-literal union alternative, e.g. ``"KeyA"``."""

    model_config = ConfigDict(frozen=True)

    value: str
    comment_lines: tuple[str, ...] = ()


class ReferenceMember(BaseModel):
    """A union alternative naming another type alias."""

    model_config = ConfigDict(frozen=True)

    name: str


class TypeAlias(BaseModel):
    """``export type <name> = <members>;`` with an optional block comment."""

    model_config = ConfigDict(frozen=True)

    name: str
    members: tuple[LiteralMember | ReferenceMember, ...]
    doc: str | None = None


class Declarations(BaseModel):
    """Ordered type aliases: one per section, then the aggregate union last."""

    model_config = ConfigDict(frozen=True)

    aliases: tuple[TypeAlias, ...]

    @property
    def section_aliases(self) -> tuple[TypeAlias, ...]:
        return self.aliases[:-1]

    @property
    def aggregate(self) -> TypeAlias:
        return self.aliases[-1]


def comment_lines(description: str | None) -> tuple[str, ...]:
    """Split a description on <br/> into one comment line per segment."""
    if description is None:
        return ()
    return tuple(segment.strip() for segment in description.split(LINE_BREAK_MARKER))


def section_alias(section: Section) -> TypeAlias:
    """Build the union type alias for one section, codes in their original order."""
    members = tuple(
        LiteralMember(value=entry.code, comment_lines=comment_lines(entry.description)) for entry in section.codes
    )
    return TypeAlias(name=type_name_for(section.id), members=members, doc=section.description)


def _check_unique_names(aliases: list[TypeAlias], sections: list[Section]) -> None:
    """Fail fast when two sections (or a section and the aggregate) share a type name."""
    owners: dict[str, str] = {}
    for alias, section in zip(aliases, sections):
        if alias.name == AGGREGATE_TYPE_NAME:
            raise NameCollisionError(f"Section {section.id!r} collides with the aggregate type {AGGREGATE_TYPE_NAME!r}")
        if alias.name in owners:
            raise NameCollisionError(
                f"Sections {owners[alias.name]!r} and {section.id!r} both derive type name {alias.name!r}"
            )
        owners[alias.name] = section.id


def _warn_shared_codes(sections: list[Section]) -> None:
    """Log codes that appear in more than one section (legal, but unexpected)."""
    code_sections: dict[str, list[str]] = defaultdict(list)
    for section in sections:
        for entry in section.codes:
            code_sections[entry.code].append(section.id)
    for code, section_ids in code_sections.items():
        if len(section_ids) > 1:
            logger.warning("Code %r appears in multiple sections: %s", code, ", ".join(section_ids))


def build_declarations(sections: list[Section]) -> Declarations:
    """Map sections onto per-section union aliases plus the aggregate KeyCode union."""
    aliases = [section_alias(section) for section in sections]
    _check_unique_names(aliases, sections)
    _warn_shared_codes(sections)

    aggregate = TypeAlias(
        name=AGGREGATE_TYPE_NAME,
        members=tuple(ReferenceMember(name=alias.name) for alias in aliases),
    )
    logger.info("Built %d section types and aggregate %s", len(aliases), AGGREGATE_TYPE_NAME)
    return Declarations(aliases=(*aliases, aggregate))
