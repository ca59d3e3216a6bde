from __future__ import annotations

import logging
from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from collections.abc import Hashable

    from datasalad.settings import Setting

    from gitcfg_core.config.store import ConfigStore

from datasalad.settings import CachingSource

from gitcfg_core.config.item import ConfigItem
from gitcfg_core.consts import DEFAULT_SUBSECTION

lgr = logging.getLogger('gitcfg.config')


class ConfigStoreSource(CachingSource):
    """Settings source exposing a :class:`ConfigStore` with git-style keys

    Keys have the form ``section.name`` for the default subsection, and
    ``section.subsection.name`` otherwise, just like ``git config`` reports
    them. Section and variable names are case-insensitive, the subsection
    is not. All values are reported as :class:`ConfigItem` instances.

    With this class, a store can be combined with other sources in a
    ``datasalad.settings.Settings`` instance.

    Setting an item writes through to the store, replacing all existing
    values of the respective variable. Adding values to, or removing
    variables from a store is not supported.
    """

    item_type = ConfigItem

    def __init__(self, store: ConfigStore):
        # assign before the base class initialization, which may already
        # reinit/load the source
        self._store = store
        super().__init__()

    def __str__(self) -> str:
        return f'{self.__class__.__name__}[{self._store.path}]'

    def _load(self) -> None:
        document = self._store.load().document
        count = 0
        for section in document:
            for group in section:
                for var in group:
                    count += 1
                    self.setall(
                        _compose_key(section.name, group.name, var.name),
                        tuple(ConfigItem(val) for val in var.values),
                    )
        lgr.debug('Loaded %i setting(s) from %s', count, self._store)

    #
    # we have to wrap most accessors to ensure the key normalization imposed
    # by git-config, otherwise we might breed effective duplicates,
    # or mismatches
    #
    def __contains__(self, key: Hashable) -> bool:
        return _normalize_key(key) in self.keys()

    def _get_item(self, key: Hashable) -> Setting:
        return super()._get_item(_normalize_key(key))

    def _getall(self, key: Hashable) -> tuple[Setting, ...]:
        return super()._getall(_normalize_key(key))

    def _setall(self, key: Hashable, values: tuple[Setting, ...]) -> None:
        super()._setall(_normalize_key(key), values)

    def _set_item(self, key: Hashable, value: Setting) -> None:
        key = _normalize_key(key)
        section, subsection, name = _split_key(key)
        self._store.load().document.set_value(
            section,
            subsection,
            name,
            value.pristine_value,
        )
        super()._set_item(key, value)

    def _add(self, key: Hashable, value: Setting) -> None:
        msg = f'{self} only supports replacing values, cannot add to {key!r}'
        raise NotImplementedError(msg)

    def _del_item(self, key: Hashable) -> None:
        msg = f'{self} does not support removing {key!r}'
        raise NotImplementedError(msg)


def _compose_key(section: str, subsection: str | None, name: str) -> str:
    return (
        f'{section}.'
        f'{"" if subsection is DEFAULT_SUBSECTION else f"{subsection}."}'
        f'{name.lower()}'
    )


def _split_key(key: str) -> tuple[str, str | None, str]:
    """Return section, subsection, and variable name of a normalized key"""
    key_l = key.split('.')
    # length of the component list when we have no subsection(s)
    no_sub_len = 2
    if len(key_l) < no_sub_len:
        msg = f'{key!r} is not a valid configuration key'
        raise ValueError(msg)
    return (
        key_l[0],
        '.'.join(key_l[1:-1]) if len(key_l) > no_sub_len else DEFAULT_SUBSECTION,
        key_l[-1],
    )


def _normalize_key(key: Hashable) -> str:
    key_l = str(key).split('.')
    if len(key_l) < 2:  # noqa: PLR2004
        # not a key at all, leave untouched to not produce a match
        return str(key)
    section = key_l[0]
    name = key_l[-1]
    # section name and variable name are case-insensitive, the subsection
    # not
    return '.'.join((section.lower(), *key_l[1:-1], name.lower()))
