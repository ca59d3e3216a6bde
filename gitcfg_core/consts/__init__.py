"""Assorted common constants"""

__all__ = [
    'UnsetValue',
    'DEFAULT_ENCODING',
    'DEFAULT_SUBSECTION',
    'IMPLICIT_TRUE',
]

from datasalad.settings import UnsetValue

DEFAULT_ENCODING = 'utf-8'
"""Encoding assumed for configuration text given as ``bytes``"""

DEFAULT_SUBSECTION = None
"""Name of the unnamed subsection group of any section

This is distinct from a subsection that is explicitly named with an empty
string (``[section ""]``).
"""

IMPLICIT_TRUE = 'true'
"""Raw value of a setting that is declared by its name alone

``git-config`` treats ``[core]\\n\\tbare`` as a short-hand for
``bare = true``.
"""
