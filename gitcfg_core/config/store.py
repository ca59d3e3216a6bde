from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import (
        Callable,
        Iterable,
    )
    from os import PathLike

    from gitcfg_core.config.model import ConfigDocument

    ConfigSource = (
        str | bytes | Iterable[str] | Iterable[bytes] | Callable[[], Any] | None
    )

from gitcfg_core.config.coercion import typed_settings
from gitcfg_core.config.exceptions import (
    ConfigIOError,
    NotLoadedError,
    ParseError,
)
from gitcfg_core.config.parser import parse
from gitcfg_core.config.serializer import render
from gitcfg_core.consts import DEFAULT_SUBSECTION

lgr = logging.getLogger('gitcfg.config')

# marker for a chunk iterable that failed while being read
_consumed_source = object()


# TODO: Could be `StrEnum`, came with PY3.11
class StoreState(Enum):
    """Enumeration of the lifecycle states of a :class:`ConfigStore`"""

    unloaded = 'unloaded'
    loaded = 'loaded'
    failed = 'failed'


class ConfigStore:
    """Typed access to a git-config document

    A store is created for a logical ``path`` and an optional ``source``
    of configuration text. The text is only obtained and parsed when
    :meth:`load` is called. ``source`` can be

    - a ``str`` or ``bytes`` blob,
    - an iterable of ``str`` or ``bytes`` chunks,
    - a callable without arguments that returns any of the above,
    - ``None``, in which case ``path`` is read from the file system.

    Any query, modification, or rendering of a store that is not loaded
    raises :class:`NotLoadedError`.

    At the level of this class, a subsection given as ``None`` or ``''``
    identifies the default (unnamed) subsection of a section. A subsection
    that is explicitly named with an empty string (``[section ""]``) is
    accessible via :attr:`document`.

    >>> store = ConfigStore('demo', '[core]\\n\\tbare = true\\n').load()
    >>> store['core']
    {'bare': True}
    """

    def __init__(
        self,
        path: str | PathLike,
        source: ConfigSource = None,
    ):
        self._path = path
        self._source = source
        self._document: ConfigDocument | None = None
        self._state = StoreState.unloaded

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({str(self._path)!r}, {self._state.value})'

    def __str__(self) -> str:
        return self.to_text()

    @property
    def path(self) -> str | PathLike:
        """Logical path of the configuration"""
        return self._path

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def is_loaded(self) -> bool:
        return self._state is StoreState.loaded

    @property
    def document(self) -> ConfigDocument:
        """The underlying :class:`ConfigDocument` of a loaded store"""
        return self._get_document()

    def load(self) -> ConfigStore:
        """Obtain and parse the configuration text

        Returns the store itself. Loading an already loaded store does
        nothing. A store that failed to load can be loaded again, e.g.,
        after a missing file was created.

        Raises
        ------
        ParseError
          When the text is not valid git-config syntax.
        ConfigIOError
          When the text cannot be obtained (or decoded), for whatever
          reason.
        """
        if self._state is StoreState.loaded:
            return self
        try:
            document = parse(self._read(), path=self._path)
        except (ParseError, ConfigIOError) as e:
            self._fail(e)
            raise
        except Exception as e:
            self._fail(e)
            raise ConfigIOError(str(e)) from e
        self._document = document
        self._state = StoreState.loaded
        lgr.debug('Loaded configuration from %s', self._path)
        return self

    def _read(self) -> Any:
        source = self._source
        if source is _consumed_source:
            msg = (
                f'source of configuration {self._path} was consumed by a '
                'previous load attempt'
            )
            raise ConfigIOError(msg)
        if source is None:
            return Path(self._path).read_bytes()
        if callable(source):
            return source()
        if isinstance(source, (str, bytes)):
            return source
        # an iterable of chunks may only be iterable once. Keep what was
        # read, such that a retry after a parse error sees the full text.
        # If reading fails halfway, a retry must not see a partial text.
        self._source = _consumed_source
        self._source = tuple(source)
        return self._source

    def _fail(self, exc: Exception) -> None:
        self._document = None
        self._state = StoreState.failed
        lgr.debug('Failed to load configuration from %s: %s', self._path, exc)

    def _get_document(self) -> ConfigDocument:
        if self._state is not StoreState.loaded or self._document is None:
            msg = f'configuration {self._path} is {self._state.value}, not loaded'
            raise NotLoadedError(msg, self._state)
        return self._document

    #
    # queries
    #
    def sections(self) -> list[str]:
        """Return the (lower-case) names of all sections in order"""
        return self._get_document().sections()

    def subsections(self, section: str) -> list[str]:
        """Return the names of all named subsections of a section in order"""
        return self._get_document().subsections(section)

    def names(
        self,
        section: str,
        subsection: str | None = DEFAULT_SUBSECTION,
    ) -> list[str]:
        """Return the names of all variables in a subsection in order"""
        return self._get_document().names(section, _subsection(subsection))

    def raw_values(
        self,
        section: str,
        subsection: str | None,
        name: str,
    ) -> list[str]:
        """Return all raw values of a variable, or an empty list"""
        return self._get_document().raw_values(
            section,
            _subsection(subsection),
            name,
        )

    def typed_settings(
        self,
        section: str,
        subsection: str | None = DEFAULT_SUBSECTION,
    ) -> dict[str, Any]:
        """Return all variables of a subsection with their coerced value

        See :func:`~gitcfg_core.config.coercion.coerce_value` for the
        coercion rules. Only the last value of a multi-value variable
        is reported.
        """
        return typed_settings(
            self._get_document(),
            section,
            _subsection(subsection),
        )

    def __getitem__(self, key: str) -> dict[str, Any]:
        """Return :meth:`typed_settings` for a ``'section [subsection]'`` key"""
        parts = key.split(maxsplit=1)
        if not parts:
            raise KeyError(key)
        return self.typed_settings(*parts)

    #
    # modification
    #
    def add_setting(
        self,
        name: str,
        value: Any,
        section: str,
        subsection: str | None = DEFAULT_SUBSECTION,
    ) -> None:
        """Set a variable to a single value

        Any existing values of the variable are replaced. Section and
        subsection are created as needed.
        """
        self._get_document().set_value(
            section,
            _subsection(subsection),
            name,
            value,
        )
        lgr.debug(
            'Set %s.%s%s in %s',
            section,
            f'{subsection}.' if subsection else '',
            name,
            self._path,
        )

    #
    # rendering
    #
    def to_text(self) -> str:
        """Render the configuration as git-config text"""
        return render(self._get_document())


def _subsection(subsection: str | None) -> str | None:
    return subsection or DEFAULT_SUBSECTION
