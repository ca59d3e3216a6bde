"""Configuration management with git-config formatted text

This module provides the facilities to parse, query, modify, and render
configuration in the format used by ``git config``: named sections,
optional (quoted) subsections, and ordered settings within each.

The key piece is the :class:`ConfigStore`. It is created for a logical path
and a source of configuration text, and is loaded explicitly. Afterwards,
it can be queried for sections, subsections, variable names, and typed
settings, and it can be modified and rendered back to text. Persisting the
rendered text is left to the caller.

Usage
-----

Unlike some other configuration facilities, no process-wide instance of
:class:`ConfigStore` is provided. Each store must be created and passed on
explicitly, by whatever component needs it.

>>> store = ConfigStore(
...     'example.cfg',
...     '[remote "origin"]\\n\\turl = https://example.com/repo.git\\n',
... ).load()
>>> store['remote origin']
{'url': 'https://example.com/repo.git'}
>>> store.add_setting('timeout', '30', 'remote', 'origin')
>>> store['remote origin']['timeout']
30

A loaded store can also be used as a source for a
``datasalad.settings.Settings`` instance via :class:`ConfigStoreSource`.


.. currentmodule:: gitcfg_core.config
.. autosummary::
   :toctree: generated

   ConfigDocument
   ConfigItem
   ConfigIOError
   ConfigStore
   ConfigStoreSource
   NotLoadedError
   ParseError
   StoreState
   coerce_value
   parse
   render
"""

__all__ = [
    'ConfigDocument',
    'ConfigItem',
    'ConfigIOError',
    'ConfigStore',
    'ConfigStoreSource',
    'NotLoadedError',
    'ParseError',
    'StoreState',
    'coerce_value',
    'parse',
    'render',
]

from .coercion import coerce_value
from .exceptions import (
    ConfigIOError,
    NotLoadedError,
    ParseError,
)
from .item import ConfigItem
from .model import ConfigDocument
from .parser import parse
from .serializer import render
from .source import ConfigStoreSource
from .store import (
    ConfigStore,
    StoreState,
)
