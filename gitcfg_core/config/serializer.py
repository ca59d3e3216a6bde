from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitcfg_core.config.model import ConfigDocument

from gitcfg_core.consts import DEFAULT_SUBSECTION

# characters that always need an escape sequence in a value
_value_escapes = str.maketrans(
    {
        '\\': '\\\\',
        '"': '\\"',
        '\n': '\\n',
        '\t': '\\t',
        '\b': '\\b',
    }
)
# presence of any of these makes a value get quoted
_quote_trigger_regex = re.compile(r'[\s#;"]')


def format_value(value: str) -> str:
    """Return a value in a form that parses back to the identical value"""
    escaped = value.translate(_value_escapes)
    if not value or _quote_trigger_regex.search(value):
        return f'"{escaped}"'
    return escaped


def format_section_header(section: str, subsection: str | None) -> str:
    if subsection is DEFAULT_SUBSECTION:
        return f'[{section}]'
    escaped = subsection.replace('\\', '\\\\').replace('"', '\\"')
    return f'[{section} "{escaped}"]'


def render(document: ConfigDocument) -> str:
    """Render a document as canonical git-config text

    One header is emitted for each section/subsection combination, in
    document order, followed by one ``\\tname = value`` line per value.
    An empty default subsection is only rendered (as a bare section header)
    when the section has no other subsections.
    """
    lines: list[str] = []
    for section in document:
        has_subsections = bool(section.subsection_names())
        for group in section:
            if group.name is DEFAULT_SUBSECTION and not len(group) and has_subsections:
                continue
            lines.append(format_section_header(section.name, group.name))
            lines.extend(
                f'\t{var.name} = {format_value(val)}'
                for var in group
                for val in var.values
            )
    return ''.join(f'{line}\n' for line in lines)
