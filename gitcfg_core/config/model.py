"""In-memory representation of git-config documents

A :class:`ConfigDocument` is a strict ownership tree::

  ConfigDocument -> Section -> Subsection -> ConfigVariable

All levels keep insertion order. Section names and variable names are
case-insensitive, subsection names are case-sensitive.
"""

from __future__ import annotations

import re
from dataclasses import (
    dataclass,
    field,
)
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

from gitcfg_core.consts import DEFAULT_SUBSECTION

# see git-config(1) for syntax details
section_name_regex = re.compile(r'[a-zA-Z0-9.-]+')
variable_name_regex = re.compile(r'[a-zA-Z][a-zA-Z0-9-]*')


def check_section_name(name: str) -> str:
    """Return the canonical (lower-case) form of a valid section name

    Raises ``ValueError`` for names that are not syntax-compliant.
    """
    if not section_name_regex.fullmatch(name):
        msg = f'invalid section name {name!r}'
        raise ValueError(msg)
    return name.lower()


def check_variable_name(name: str) -> str:
    """Return a valid variable name unchanged

    Raises ``ValueError`` for names that are not syntax-compliant.
    """
    if not variable_name_regex.fullmatch(name):
        msg = f'invalid variable name {name!r}'
        raise ValueError(msg)
    return name


def check_subsection_name(name: str | None) -> str | None:
    """Return a valid subsection name unchanged

    Any string is a valid subsection name, except for those containing
    newline or null characters.
    """
    if name is not None and ('\n' in name or '\0' in name):
        msg = f'invalid subsection name {name!r}'
        raise ValueError(msg)
    return name


def to_raw_value(value: Any) -> str:
    """Convert a value into its raw git-config string representation"""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


@dataclass
class ConfigVariable:
    """A configuration variable with all its values in a subsection"""

    name: str
    """Name of the variable in the casing it was first declared with"""
    values: list[str] = field(default_factory=list)
    """Raw values in order of declaration"""


class Subsection:
    """Ordered collection of :class:`ConfigVariable` in a section"""

    def __init__(self, name: str | None = DEFAULT_SUBSECTION):
        self.name = name
        self._variables: dict[str, ConfigVariable] = {}

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}({self.name!r}, '
            f'{list(self._variables.values())!r})'
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Subsection):
            return NotImplemented
        return self.name == other.name and list(self._variables.values()) == list(
            other._variables.values()
        )

    def __iter__(self) -> Iterator[ConfigVariable]:
        return iter(self._variables.values())

    def __len__(self) -> int:
        return len(self._variables)

    def get(self, name: str) -> ConfigVariable | None:
        """Return the variable with the given (case-insensitive) name"""
        return self._variables.get(name.lower())

    def names(self) -> list[str]:
        return [v.name for v in self._variables.values()]

    def raw_values(self, name: str) -> list[str]:
        var = self.get(name)
        return [] if var is None else list(var.values)

    def add_value(self, name: str, value: str) -> None:
        """Append a value to a (possibly new) variable"""
        var = self._variables.setdefault(name.lower(), ConfigVariable(name))
        var.values.append(value)

    def set_value(self, name: str, value: str) -> None:
        """Replace all values of a (possibly new) variable with a single one"""
        var = self._variables.setdefault(name.lower(), ConfigVariable(name))
        var.values[:] = [value]


class Section:
    """Named collection of :class:`Subsection` groups

    The default (unnamed) subsection group is always present, and is
    always the first group.
    """

    def __init__(self, name: str):
        self.name = check_section_name(name)
        self._subsections: dict[str | None, Subsection] = {
            DEFAULT_SUBSECTION: Subsection(DEFAULT_SUBSECTION),
        }

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}({self.name!r}, '
            f'{list(self._subsections.values())!r})'
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return self.name == other.name and list(self._subsections.values()) == list(
            other._subsections.values()
        )

    def __iter__(self) -> Iterator[Subsection]:
        return iter(self._subsections.values())

    def get(self, subsection: str | None) -> Subsection | None:
        return self._subsections.get(subsection)

    def ensure(self, subsection: str | None) -> Subsection:
        """Return the subsection group, create and append it if needed"""
        group = self._subsections.get(subsection)
        if group is None:
            group = Subsection(check_subsection_name(subsection))
            self._subsections[subsection] = group
        return group

    def subsection_names(self) -> list[str]:
        return [s for s in self._subsections if s is not DEFAULT_SUBSECTION]


class ConfigDocument:
    """Ordered collection of :class:`Section` instances

    The query methods of this class take section and variable names in any
    casing. Subsection names are matched exactly, where ``None`` identifies
    the default subsection group, and ``''`` a subsection that is named
    with an empty string.
    """

    def __init__(self):
        self._sections: dict[str, Section] = {}

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({list(self._sections.values())!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigDocument):
            return NotImplemented
        return list(self._sections.values()) == list(other._sections.values())

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections.values())

    def __len__(self) -> int:
        return len(self._sections)

    def get(self, section: str) -> Section | None:
        return self._sections.get(section.lower())

    def ensure(self, section: str) -> Section:
        """Return the named section, create and append it if needed"""
        sec = self.get(section)
        if sec is None:
            sec = Section(section)
            self._sections[sec.name] = sec
        return sec

    def get_subsection(
        self,
        section: str,
        subsection: str | None = DEFAULT_SUBSECTION,
    ) -> Subsection | None:
        sec = self.get(section)
        return None if sec is None else sec.get(subsection)

    def sections(self) -> list[str]:
        return list(self._sections)

    def subsections(self, section: str) -> list[str]:
        sec = self.get(section)
        return [] if sec is None else sec.subsection_names()

    def names(
        self,
        section: str,
        subsection: str | None = DEFAULT_SUBSECTION,
    ) -> list[str]:
        group = self.get_subsection(section, subsection)
        return [] if group is None else group.names()

    def raw_values(
        self,
        section: str,
        subsection: str | None,
        name: str,
    ) -> list[str]:
        group = self.get_subsection(section, subsection)
        return [] if group is None else group.raw_values(name)

    def set_value(
        self,
        section: str,
        subsection: str | None,
        name: str,
        value: Any,
    ) -> None:
        """Set a variable to a single value, replacing any existing values

        Section and subsection are created as needed. Non-string values are
        converted with :func:`to_raw_value`.
        """
        check_variable_name(name)
        # validate everything before anything gets created
        check_section_name(section)
        check_subsection_name(subsection)
        self.ensure(section).ensure(subsection).set_value(name, to_raw_value(value))
