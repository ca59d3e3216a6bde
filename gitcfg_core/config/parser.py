from __future__ import annotations

import logging
import re
from itertools import chain
from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from collections.abc import (
        Iterable,
        Iterator,
    )
    from os import PathLike

    from gitcfg_core.config.model import Subsection

from datasalad.itertools import (
    decode_bytes,
    itemize,
)

from gitcfg_core.config.exceptions import ParseError
from gitcfg_core.config.model import ConfigDocument
from gitcfg_core.consts import (
    DEFAULT_ENCODING,
    DEFAULT_SUBSECTION,
    IMPLICIT_TRUE,
)

lgr = logging.getLogger('gitcfg.config')

_COMMENT_CHARS = ('#', ';')
_WHITESPACE_CHARS = (' ', '\t')
# escape sequences recognized in values
_VALUE_ESCAPES = {
    '\\': '\\',
    '"': '"',
    'n': '\n',
    't': '\t',
    'b': '\b',
}

section_head_regex = re.compile(r'\[(?P<name>[a-zA-Z0-9.-]+)')
setting_head_regex = re.compile(
    r'(?P<name>[a-zA-Z][a-zA-Z0-9-]*)[ \t]*(?P<assign>=?)',
)


class _LineReader:
    """Line iterator that keeps track of the current line number"""

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)
        self.lineno = 0

    def __iter__(self) -> _LineReader:
        return self

    def __next__(self) -> str:
        line = next(self._lines)
        self.lineno += 1
        return line


def iter_lines(text: str | bytes | Iterable[str] | Iterable[bytes]) -> Iterator[str]:
    """Yield the lines of configuration text without line endings

    ``text`` can be a ``str`` or ``bytes`` blob, or an iterable of chunks
    of either type. ``bytes`` are decoded as UTF-8, and decoding errors
    are raised as ``UnicodeDecodeError``.
    """
    chunks = iter((text,) if isinstance(text, (str, bytes)) else text)
    first = next(chunks, None)
    if first is None:
        return
    chunks = chain((first,), chunks)
    if isinstance(first, bytes):
        chunks = decode_bytes(
            chunks,
            encoding=DEFAULT_ENCODING,
            backslash_replace=False,
        )
    for lineno, line in enumerate(itemize(chunks, sep='\n', keep_ends=False)):
        if lineno == 0 and line.startswith('\ufeff'):
            line = line[1:]  # noqa: PLW2901
        yield line[:-1] if line.endswith('\r') else line


def parse(
    text: str | bytes | Iterable[str] | Iterable[bytes],
    path: str | PathLike | None = None,
) -> ConfigDocument:
    """Parse git-config formatted text into a :class:`ConfigDocument`

    Parameters
    ----------
    text: str or bytes or iterable
      Configuration text, see :func:`iter_lines` for supported types.
    path: str or PathLike, optional
      Logical identifier of the text. It is only used in error messages.

    Returns
    -------
    ConfigDocument

    Raises
    ------
    ParseError
      For any syntax violation. No partial result is returned.
    """
    document = ConfigDocument()
    lines = _LineReader(iter_lines(text))
    group: Subsection | None = None
    for line in lines:
        content = line.strip()
        if not content or content.startswith(_COMMENT_CHARS):
            continue
        if content.startswith('['):
            section, subsection = _parse_section_header(content, path, lines.lineno)
            group = document.ensure(section).ensure(subsection)
            continue
        if group is None:
            msg = 'setting before section'
            raise ParseError(msg, path, lines.lineno)
        # only leading whitespace can go, trailing whitespace could be
        # relevant for line continuation handling
        name, value = _parse_setting(line.lstrip(), lines, path)
        group.add_value(name, value)
    lgr.debug(
        'Parsed %i section(s) from %s in %i line(s)',
        len(document),
        path if path is not None else '<text>',
        lines.lineno,
    )
    return document


def _parse_section_header(
    line: str,
    path: str | PathLike | None,
    lineno: int,
) -> tuple[str, str | None]:
    """Return section and subsection name of a ``[section "subsection"]``"""
    match = section_head_regex.match(line)
    if match is None:
        msg = f'invalid section header {line!r}'
        raise ParseError(msg, path, lineno)
    section = match['name']
    subsection = DEFAULT_SUBSECTION
    pos = match.end()
    if line[pos : pos + 1] in _WHITESPACE_CHARS:
        rest = line[pos:].lstrip()
        pos = len(line) - len(rest)
        if not rest.startswith('"'):
            msg = f'expected quoted subsection name in {line!r}'
            raise ParseError(msg, path, lineno)
        subsection, pos = _parse_subsection_name(line, pos + 1, path, lineno)
    if line[pos : pos + 1] != ']':
        msg = f"expected ']' to close section header {line!r}"
        raise ParseError(msg, path, lineno)
    trailer = line[pos + 1 :].strip()
    if trailer and not trailer.startswith(_COMMENT_CHARS):
        msg = f'unexpected content after section header {line!r}'
        raise ParseError(msg, path, lineno)
    return section, subsection


def _parse_subsection_name(
    line: str,
    pos: int,
    path: str | PathLike | None,
    lineno: int,
) -> tuple[str, int]:
    """Return the subsection name starting at ``pos`` and the end position

    The returned position is the one right after the closing quote.
    """
    name: list[str] = []
    while pos < len(line):
        c = line[pos]
        if c == '"':
            return ''.join(name), pos + 1
        if c == '\\':
            pos += 1
            if pos == len(line):
                break
            # `\"` and `\\` are the documented escapes, but git also takes
            # any other escaped character for itself
            c = line[pos]
        name.append(c)
        pos += 1
    msg = f'unterminated subsection name in {line!r}'
    raise ParseError(msg, path, lineno)


def _parse_setting(
    line: str,
    lines: _LineReader,
    path: str | PathLike | None,
) -> tuple[str, str]:
    match = setting_head_regex.match(line)
    if match is None:
        msg = f'invalid variable name in {line!r}'
        raise ParseError(msg, path, lines.lineno)
    rest = line[match.end() :]
    if not match['assign']:
        if rest.strip():
            msg = f'invalid setting {line!r}'
            raise ParseError(msg, path, lines.lineno)
        return match['name'], IMPLICIT_TRUE
    return match['name'], _parse_value(rest, lines, path)


def _parse_value(
    chunk: str,
    lines: _LineReader,
    path: str | PathLike | None,
) -> str:
    """Decode a (possibly quoted and continued) value

    Continuation lines are pulled from ``lines`` as needed.
    """
    value: list[str] = []
    # unquoted whitespace is only kept when followed by more content
    whitespace: list[str] = []
    started = False
    in_quotes = False
    i = 0
    while True:
        if i >= len(chunk):
            if in_quotes:
                msg = 'unterminated quoted value'
                raise ParseError(msg, path, lines.lineno)
            break
        c = chunk[i]
        if c == '\\':
            if i + 1 == len(chunk):
                # line continuation, the newline itself is dropped
                try:
                    chunk = next(lines)
                except StopIteration:
                    msg = 'unexpected end of input after line continuation'
                    raise ParseError(msg, path, lines.lineno) from None
                i = 0
                continue
            value.extend(whitespace)
            whitespace.clear()
            started = True
            escaped = _VALUE_ESCAPES.get(chunk[i + 1])
            if escaped is None:
                # unknown escape sequence, keep the backslash literally and
                # process the next character normally
                value.append('\\')
                i += 1
                continue
            value.append(escaped)
            i += 2
            continue
        if c == '"':
            in_quotes = not in_quotes
            started = True
        elif c in _WHITESPACE_CHARS and not in_quotes:
            if started:
                whitespace.append(c)
        else:
            value.extend(whitespace)
            whitespace.clear()
            started = True
            value.append(c)
        i += 1
    return ''.join(value)
