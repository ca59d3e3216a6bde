from __future__ import annotations

import re
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from gitcfg_core.config.model import ConfigDocument

from gitcfg_core.consts import (
    DEFAULT_SUBSECTION,
    IMPLICIT_TRUE,
)

# base-10 only, no sign other than a leading minus, no separators
int_regex = re.compile(r'-?[0-9]+')


def coerce_value(value: Any) -> Any:
    """Infer the type of a raw git-config value

    The rules are applied in order:

    1. a base-10 integer (optional leading ``-``) becomes an ``int``
    2. the literal ``'true'`` becomes ``True``
    3. anything else is returned as-is

    The literal ``'false'`` is NOT converted to a ``bool``. Consumers have
    long received ``'false'`` as a ``str`` and may depend on it.

    Values that are not of type ``str`` are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    if int_regex.fullmatch(value):
        return int(value)
    if value == IMPLICIT_TRUE:
        return True
    return value


def typed_settings(
    document: ConfigDocument,
    section: str,
    subsection: str | None = DEFAULT_SUBSECTION,
) -> dict[str, Any]:
    """Return all variables of a subsection with their coerced last value

    An unknown section or subsection yields an empty mapping.
    """
    group = document.get_subsection(section, subsection)
    if group is None:
        return {}
    return {var.name: coerce_value(var.values[-1]) for var in group if var.values}
