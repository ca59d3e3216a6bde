from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from os import PathLike


class ParseError(ValueError):
    # we derive from ValueError, because malformed configuration text is
    # a value of the right type (str) with inappropriate content
    """Exception raised when configuration text is not valid git-config syntax

    Parsing is all-or-nothing. When this exception is raised, no partial
    result of the parsing process is exposed.
    """

    def __init__(
        self,
        message: str,
        path: str | PathLike | None = None,
        line: int | None = None,
    ):
        """
        Parameters
        ----------
        message: str
          Description of the syntax violation.
        path: str or PathLike, optional
          Logical identifier of the parsed text (typically a file path).
          It is only used for reporting.
        line: int, optional
          1-based number of the line at which the violation was detected.
        """
        # like `ValueError`, we put the message first in `.args`
        super().__init__(message, path, line)

    @property
    def message(self) -> str:
        """Description of the syntax violation"""
        return self.args[0]

    @property
    def path(self) -> str | PathLike | None:
        """Logical path of the parsed text, if known"""
        return self.args[1]

    @property
    def line(self) -> int | None:
        """Line number (1-based) of the violation, if known"""
        return self.args[2]

    def __str__(self) -> str:
        location = [
            str(i)
            for i in (
                self.path if self.path is not None else '<text>',
                self.line,
            )
            if i is not None
        ]
        return f'{":".join(location)}: {self.message}'

    def __repr__(self) -> str:
        return '{0}({1!r}, {2!r}, {3!r})'.format(
            self.__class__.__name__,
            *self.args,
        )


class ConfigIOError(OSError):
    """Exception raised when configuration text cannot be obtained

    The message of the underlying error is preserved, and the original
    exception is available as ``__cause__``.
    """


class NotLoadedError(RuntimeError):
    """Exception raised on access to a configuration store that is not loaded

    The ``state`` attribute reports the state of the store at the time
    of the failed access.
    """

    def __init__(self, message: str, state=None):
        super().__init__(message, state)

    @property
    def state(self):
        """State of the store at the time of the failed access"""
        return self.args[1]

    def __str__(self) -> str:
        return self.args[0]
