"""Render a declaration tree to TypeScript, laid out the way prettier prints it.

    /** Writing System Keys */
    export type WritingSystemKeyCode =
      // `~ on a US keyboard.
      | "Backquote"
      | "IntlBackslash";
    export type KeyCode = WritingSystemKeyCode | FunctionKeyCode;

A union stays on one line when none of its members carry comments and the
line fits within printWidth; otherwise it breaks to one member per line.
"""

from keycode_gen.declarations.style import StyleConfig
from keycode_gen.declarations.tree import Declarations, LiteralMember, ReferenceMember, TypeAlias

EMPTY_UNION = "never"


def quote_string(value: str, single_quote: bool = False) -> str:
    """Quote a string literal, switching quote style when that needs fewer escapes."""
    preferred, alternate = ("'", '"') if single_quote else ('"', "'")
    quote = alternate if value.count(preferred) > value.count(alternate) else preferred
    escaped = value.replace("\\", "\\\\").replace(quote, "\\" + quote)
    return f"{quote}{escaped}{quote}"


def render_member(member: LiteralMember | ReferenceMember, style: StyleConfig) -> str:
    if isinstance(member, LiteralMember):
        return quote_string(member.value, style.single_quote)
    return member.name


def render_line_comment(line: str) -> str:
    return f"// {line}" if line else "//"


def render_alias(alias: TypeAlias, style: StyleConfig) -> list[str]:
    """Return the output lines for one type alias, leading block comment included."""
    lines = []
    if alias.doc is not None:
        lines.append(f"/** {alias.doc} */")

    head = f"export type {alias.name} ="
    terminator = ";" if style.semi else ""
    rendered = [render_member(member, style) for member in alias.members]

    if not rendered:
        lines.append(f"{head} {EMPTY_UNION}{terminator}")
        return lines

    has_comments = any(isinstance(m, LiteralMember) and m.comment_lines for m in alias.members)
    flat = f"{head} {' | '.join(rendered)}{terminator}"
    if not has_comments and len(flat) <= style.print_width:
        lines.append(flat)
        return lines

    # Broken layout: every member on its own line, behind "| " unless it is the only one
    lines.append(head)
    prefix = "" if len(rendered) == 1 else "| "
    for member, text in zip(alias.members, rendered):
        if isinstance(member, LiteralMember):
            lines.extend(style.indent + render_line_comment(line) for line in member.comment_lines)
        lines.append(f"{style.indent}{prefix}{text}")
    lines[-1] += terminator
    return lines


def render_declarations(declarations: Declarations, style: StyleConfig) -> str:
    """Render every alias in order; the result ends with a single newline."""
    lines: list[str] = []
    for alias in declarations.aliases:
        lines.extend(render_alias(alias, style))
    return style.newline.join(lines) + style.newline
